"""
Intelligence Reports: report lifecycle engine.

Catalog of report templates, configuration validation, generation
orchestration and document rendering.
"""

__version__ = "0.1.0"
