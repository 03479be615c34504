"""
Configuration validator and generation request builder.

Turns the raw configuration input for a report type into the exact config
payload the generation service expects, or raises ConfigValidationError with
a message that can be shown to the user as-is. Nothing in this module touches
the network or any UI state beyond what it is given.
"""
import logging
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from intel_reports.builder.selection import MultiSelection, SingleSelection
from intel_reports.catalog.report_types import ReportConfigField, ReportType
from intel_reports.errors import ConfigValidationError
from intel_reports.models.report import CONFIG_MODELS, GenerationRequest, ReportConfig

logger = logging.getLogger(__name__)

UNSUPPORTED_REPORT_TYPE = "Unsupported report type"


@dataclass
class ConfigurationState:
    """Raw user input on the configuration screen."""
    sector: str = ""
    company: SingleSelection = dataclass_field(default_factory=SingleSelection)
    companies: MultiSelection = dataclass_field(default_factory=MultiSelection)
    topic: str = ""

    def clear(self):
        self.sector = ""
        self.company.clear()
        self.companies.clear()
        self.topic = ""


FieldBuilder = Callable[[ReportConfigField, ConfigurationState], Any]


def _build_sector(field: ReportConfigField, state: ConfigurationState) -> str:
    sector = (state.sector or "").strip()
    if not sector:
        raise ConfigValidationError("Please select a sector", field.id)
    if field.options and sector not in field.option_values():
        raise ConfigValidationError("Invalid sector selected", field.id)
    return sector


def _build_company_slug(field: ReportConfigField, state: ConfigurationState) -> str:
    slug = state.company.slug
    if not slug:
        raise ConfigValidationError("Please select a company", field.id)
    if field.max_length is not None and len(slug) > field.max_length:
        raise ConfigValidationError("Company slug is too long", field.id)
    return slug


def _build_company_slugs(field: ReportConfigField, state: ConfigurationState) -> list:
    slugs = state.companies.slugs()
    minimum = field.min or 1
    if len(slugs) < minimum:
        raise ConfigValidationError(f"Please select at least {minimum} companies to compare", field.id)
    if field.max is not None and len(slugs) > field.max:
        raise ConfigValidationError(f"Select no more than {field.max} companies to compare", field.id)
    for slug in slugs:
        if not slug or (field.max_length is not None and len(slug) > field.max_length):
            raise ConfigValidationError("Invalid company slug in selection", field.id)
    return slugs


def _build_topic(field: ReportConfigField, state: ConfigurationState) -> str:
    topic = (state.topic or "").strip()
    minimum = field.min_length or 1
    if len(topic) < minimum:
        raise ConfigValidationError(
            f"Please provide a market/opportunity description (at least {minimum} characters)",
            field.id,
        )
    if field.max_length is not None and len(topic) > field.max_length:
        raise ConfigValidationError(
            f"Topic description is too long (max {field.max_length} characters)",
            field.id,
        )
    return topic


# Keyed by config field id; every field in the catalog needs an entry here.
FIELD_BUILDERS: Dict[str, FieldBuilder] = {
    "sector": _build_sector,
    "companySlug": _build_company_slug,
    "companySlugs": _build_company_slugs,
    "topic": _build_topic,
}


def build_config(report_type: ReportType, state: ConfigurationState) -> ReportConfig:
    """
    Validate the configuration input and build the config for a report type.

    Args:
        report_type: The catalog entry the user selected.
        state: The raw configuration input.

    Returns:
        The config model for exactly this report type.

    Raises:
        ConfigValidationError: With a user-displayable message.
    """
    model = CONFIG_MODELS.get(report_type.id)
    if model is None:
        raise ConfigValidationError(UNSUPPORTED_REPORT_TYPE)

    values: Dict[str, Any] = {}
    for config_field in report_type.config_fields:
        builder = FIELD_BUILDERS.get(config_field.id)
        if builder is None:
            logger.error(f"No builder for config field {config_field.id} of {report_type.id}")
            raise ConfigValidationError(UNSUPPORTED_REPORT_TYPE, config_field.id)
        values[config_field.id] = builder(config_field, state)

    try:
        return model.model_validate(values)
    except ValidationError as e:
        logger.error(f"Config for {report_type.id} does not match its model: {e}")
        raise ConfigValidationError(UNSUPPORTED_REPORT_TYPE) from e


def build_generation_request(report_type: ReportType, state: ConfigurationState) -> GenerationRequest:
    """Build the generation service request body for a validated configuration."""
    config = build_config(report_type, state)
    return GenerationRequest(report_type=report_type.id, config=config)


def validation_message(report_type: ReportType, state: ConfigurationState) -> Optional[str]:
    """Return the validation message for the input, or None when it is valid."""
    try:
        build_config(report_type, state)
    except ConfigValidationError as e:
        return e.message
    return None
