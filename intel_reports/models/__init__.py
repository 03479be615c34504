"""
Wire models for the Intelligence Reports engine.
"""
from intel_reports.models.report import (
    CONFIG_MODELS,
    CompanyDeepDiveConfig,
    CompetitiveAnalysisConfig,
    GeneratedReport,
    GeneratedSection,
    GenerationRequest,
    MarketEntryBriefConfig,
    ReportConfig,
    SearchableEntity,
    SectorOverviewConfig,
    UsageInfo,
)

__all__ = [
    "CONFIG_MODELS",
    "CompanyDeepDiveConfig",
    "CompetitiveAnalysisConfig",
    "GeneratedReport",
    "GeneratedSection",
    "GenerationRequest",
    "MarketEntryBriefConfig",
    "ReportConfig",
    "SearchableEntity",
    "SectorOverviewConfig",
    "UsageInfo",
]
