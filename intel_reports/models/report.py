"""Wire models for generation requests, responses and searchable entities."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class SearchableEntity(BaseModel):
    """A company returned by the entity directory service."""
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    sector: Optional[str] = None
    tier: int = 0


# ---------------------------------------------------------------------------
# Report configs: one model per report type, nothing else allowed
# ---------------------------------------------------------------------------

class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class SectorOverviewConfig(_ConfigModel):
    sector: str


class CompanyDeepDiveConfig(_ConfigModel):
    company_slug: str = Field(alias="companySlug")


class CompetitiveAnalysisConfig(_ConfigModel):
    company_slugs: List[str] = Field(alias="companySlugs")


class MarketEntryBriefConfig(_ConfigModel):
    topic: str


ReportConfig = Union[
    SectorOverviewConfig,
    CompanyDeepDiveConfig,
    CompetitiveAnalysisConfig,
    MarketEntryBriefConfig,
]

CONFIG_MODELS: Dict[str, Type[_ConfigModel]] = {
    "sector-overview": SectorOverviewConfig,
    "company-deep-dive": CompanyDeepDiveConfig,
    "competitive-analysis": CompetitiveAnalysisConfig,
    "market-entry-brief": MarketEntryBriefConfig,
}


class GenerationRequest(BaseModel):
    """Body sent to the generation service."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    report_type: str = Field(alias="reportType")
    config: ReportConfig

    def to_payload(self) -> Dict[str, Any]:
        return {"reportType": self.report_type, "config": self.config.to_payload()}


# ---------------------------------------------------------------------------
# Generation results
# ---------------------------------------------------------------------------

class GeneratedSection(BaseModel):
    """One section of a generated report; content is the semi-structured body."""
    id: str = ""
    title: str = ""
    content: str = ""

    @field_validator("id", "title", "content", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class GeneratedReport(BaseModel):
    """A report returned by the generation service."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    subtitle: str = ""
    generated_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("generatedAt", "generated_at"),
        serialization_alias="generatedAt",
    )
    report_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("reportType", "report_type"),
        serialization_alias="reportType",
    )
    executive_summary: str = Field(
        default="",
        validation_alias=AliasChoices("executiveSummary", "executive_summary"),
        serialization_alias="executiveSummary",
    )
    methodology: str = ""
    sections: List[GeneratedSection] = Field(default_factory=list)

    @field_validator("generated_at", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value):
        # Display only; unreadable values become None
        if value is None or value == "":
            return None
        try:
            return _DATETIME.validate_python(value)
        except ValidationError:
            logger.warning(f"Ignoring unparseable generatedAt value: {value!r}")
            return None


class UsageInfo(BaseModel):
    """Usage metadata attached to a successful generation response."""
    used: int
    limit: int
    tier: str

    def describe(self) -> str:
        return f"Reports used: {self.used}/{self.limit} this month ({self.tier} plan)"
