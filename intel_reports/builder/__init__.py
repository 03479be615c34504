"""
Configuration state, validation and request building.
"""
from intel_reports.builder.selection import (
    MultiSelection,
    SelectionOutcome,
    SingleSelection,
)
from intel_reports.builder.validator import (
    ConfigurationState,
    FIELD_BUILDERS,
    build_config,
    build_generation_request,
    validation_message,
)

__all__ = [
    "ConfigurationState",
    "FIELD_BUILDERS",
    "MultiSelection",
    "SelectionOutcome",
    "SingleSelection",
    "build_config",
    "build_generation_request",
    "validation_message",
]
