"""
Configuration for the Intelligence Reports engine.
"""
from intel_reports.config.settings import ReportSettings, get_settings

__all__ = ["ReportSettings", "get_settings"]
