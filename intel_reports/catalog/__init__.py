"""
Report type catalog for the Intelligence Reports engine.
"""
from intel_reports.catalog.report_types import (
    FieldOption,
    FieldType,
    REPORT_TYPES,
    ReportConfigField,
    ReportSection,
    ReportType,
    ReportTypeCatalog,
    SPACE_SECTORS,
    get_catalog,
    get_report_type,
    list_report_types,
    report_type_ids,
    sector_label,
)

__all__ = [
    "FieldOption",
    "FieldType",
    "REPORT_TYPES",
    "ReportConfigField",
    "ReportSection",
    "ReportType",
    "ReportTypeCatalog",
    "SPACE_SECTORS",
    "get_catalog",
    "get_report_type",
    "list_report_types",
    "report_type_ids",
    "sector_label",
]
