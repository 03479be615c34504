"""
Report type catalog.

Static registry describing each report template: the sections it produces,
the configuration fields it needs, pricing and estimates. The catalog drives
both the configuration screen and the validator, so each report type id has
exactly one definition here.
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class FieldType(str, Enum):
    """Kinds of configuration input controls."""
    SELECT = "select"
    MULTI_SELECT = "multi-select"
    TEXT = "text"
    TYPEAHEAD = "typeahead"


class FieldOption(BaseModel):
    """One enumerated option of a select field."""
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class ReportSection(BaseModel):
    """Expected output structure of one report section (not its content)."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str


class ReportConfigField(BaseModel):
    """One configurable input of a report type."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    label: str
    type: FieldType
    required: bool = True
    placeholder: str = ""
    options: Tuple[FieldOption, ...] = ()
    # Entity counts for multi-select fields
    min: Optional[int] = None
    max: Optional[int] = None
    # Character bounds for free-text fields
    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")

    def option_values(self) -> List[str]:
        return [option.value for option in self.options]


class ReportType(BaseModel):
    """Immutable catalog entry for one report template."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str
    icon: str = "document"
    price: int = 0
    is_sample: bool = Field(default=False, alias="isSample")
    sections: Tuple[ReportSection, ...]
    config_fields: Tuple[ReportConfigField, ...] = Field(alias="configFields")
    estimated_pages: int = Field(alias="estimatedPages")
    generation_time: str = Field(alias="generationTime")

    @property
    def is_free(self) -> bool:
        return self.price == 0

    def get_field(self, field_id: str) -> Optional[ReportConfigField]:
        for field in self.config_fields:
            if field.id == field_id:
                return field
        return None


SPACE_SECTORS: Tuple[FieldOption, ...] = tuple(
    FieldOption(value=value, label=label)
    for value, label in [
        ("launch-services", "Launch Services"),
        ("satellite-manufacturing", "Satellite Manufacturing"),
        ("earth-observation", "Earth Observation"),
        ("satellite-communications", "Satellite Communications"),
        ("space-defense", "Space Defense & National Security"),
        ("in-space-services", "In-Space Services & Logistics"),
        ("ground-segment", "Ground Segment & Infrastructure"),
        ("space-analytics", "Space Data & Analytics"),
        ("cislunar-economy", "Cislunar & Lunar Economy"),
        ("space-manufacturing", "Space Manufacturing"),
        ("space-tourism", "Space Tourism & Human Spaceflight"),
        ("smallsat-constellation", "SmallSat & Constellation Services"),
        ("propulsion", "Propulsion Systems"),
        ("space-debris", "Space Debris & Sustainability"),
        ("spectrum-management", "Spectrum Management & RF"),
    ]
)


def sector_label(value: str) -> Optional[str]:
    """Resolve a sector value to its display label."""
    for option in SPACE_SECTORS:
        if option.value == value:
            return option.label
    return None


def _sections(rows: Iterable[Tuple[str, str, str]]) -> Tuple[ReportSection, ...]:
    return tuple(ReportSection(id=id_, title=title, description=description)
                 for id_, title, description in rows)


SECTOR_OVERVIEW = ReportType(
    id="sector-overview",
    name="Sector Overview",
    description=(
        "Comprehensive market overview including size, growth trajectories, key players, "
        "competitive dynamics, emerging trends, and 5-year forecasts for a specific space "
        "industry sector."
    ),
    icon="chart-bar",
    price=0,
    is_sample=True,
    sections=_sections([
        ("exec-summary", "Executive Summary", "High-level overview and key takeaways"),
        ("market-size", "Market Size & Growth", "TAM, SAM, SOM with CAGR projections"),
        ("key-players", "Key Players & Market Share", "Top companies and competitive positions"),
        ("value-chain", "Value Chain Analysis", "End-to-end industry structure and dependencies"),
        ("trends", "Technology & Market Trends", "Emerging trends shaping the sector"),
        ("regulatory", "Regulatory Landscape", "Key regulations, licenses, and policy developments"),
        ("investment", "Investment & Funding Activity", "Recent funding rounds, M&A, and deal flow"),
        ("forecasts", "5-Year Forecast", "Growth projections and scenario analysis"),
        ("risks", "Risks & Challenges", "Key risk factors and mitigation strategies"),
        ("opportunities", "Strategic Opportunities", "Actionable opportunities for market participants"),
    ]),
    estimated_pages=15,
    generation_time="2-3 minutes",
    config_fields=(
        ReportConfigField(
            id="sector",
            label="Select Sector",
            type=FieldType.SELECT,
            placeholder="Choose a sector to analyze...",
            options=SPACE_SECTORS,
        ),
    ),
)

COMPANY_DEEP_DIVE = ReportType(
    id="company-deep-dive",
    name="Company Deep Dive",
    description=(
        "In-depth company analysis covering financials, technology capabilities, competitive "
        "positioning, recent developments, leadership assessment, and strategic outlook."
    ),
    icon="building",
    price=49,
    sections=_sections([
        ("exec-summary", "Executive Summary", "Company snapshot and investment thesis"),
        ("company-overview", "Company Overview", "History, mission, and corporate structure"),
        ("leadership", "Leadership & Team", "Key executives and organizational strengths"),
        ("products", "Products & Services", "Core offerings and technology capabilities"),
        ("financials", "Financial Analysis", "Revenue, funding, valuation, and financial health"),
        ("market-position", "Market Position", "Competitive positioning and market share"),
        ("recent-developments", "Recent Developments", "Latest news, contracts, and milestones"),
        ("partnerships", "Partnerships & Customers", "Key relationships and customer base"),
        ("swot", "SWOT Analysis", "Strengths, weaknesses, opportunities, and threats"),
        ("outlook", "Strategic Outlook", "Growth trajectory and future projections"),
    ]),
    estimated_pages=12,
    generation_time="2-3 minutes",
    config_fields=(
        ReportConfigField(
            id="companySlug",
            label="Select Company",
            type=FieldType.TYPEAHEAD,
            placeholder="Search for a company...",
            max_length=200,
        ),
    ),
)

COMPETITIVE_ANALYSIS = ReportType(
    id="competitive-analysis",
    name="Competitive Analysis",
    description=(
        "Head-to-head comparison of 2-5 companies across technology capabilities, financials, "
        "market positioning, and strategic direction. Ideal for investment decisions and "
        "partnership evaluation."
    ),
    icon="scale",
    price=79,
    sections=_sections([
        ("exec-summary", "Executive Summary", "Key findings and comparative highlights"),
        ("company-profiles", "Company Profiles", "Brief overview of each company"),
        ("capability-comparison", "Capability Comparison", "Side-by-side technology and service comparison"),
        ("financial-comparison", "Financial Comparison", "Revenue, funding, and financial metrics"),
        ("market-positioning", "Market Positioning", "Competitive positioning map and differentiation"),
        ("customer-base", "Customer & Contract Base", "Key customers and contract portfolios"),
        ("technology", "Technology Assessment", "Technical capabilities and IP comparison"),
        ("growth-trajectory", "Growth Trajectory", "Historical growth and future projections"),
        ("competitive-dynamics", "Competitive Dynamics", "Rivalry intensity and strategic moves"),
        ("recommendation", "Analyst Recommendation", "Summary scorecard and strategic recommendations"),
    ]),
    estimated_pages=18,
    generation_time="3-4 minutes",
    config_fields=(
        ReportConfigField(
            id="companySlugs",
            label="Select Companies to Compare",
            type=FieldType.MULTI_SELECT,
            placeholder="Search and select 2-5 companies...",
            min=2,
            max=5,
            max_length=200,
        ),
    ),
)

MARKET_ENTRY_BRIEF = ReportType(
    id="market-entry-brief",
    name="Market Entry Brief",
    description=(
        "Strategic market entry analysis covering regulatory requirements, total addressable "
        "market, competitive landscape, go-to-market strategy, and risk assessment for a "
        "specific space market opportunity."
    ),
    icon="rocket",
    price=99,
    sections=_sections([
        ("exec-summary", "Executive Summary", "Market opportunity overview and key recommendations"),
        ("market-definition", "Market Definition & Scope", "Target market boundaries and segmentation"),
        ("tam-analysis", "TAM/SAM/SOM Analysis", "Market sizing with bottom-up and top-down estimates"),
        ("regulatory", "Regulatory Requirements", "Licensing, compliance, and regulatory pathway"),
        ("competitive-landscape", "Competitive Landscape", "Existing players and market gaps"),
        ("customer-analysis", "Customer Analysis", "Target customers, needs, and buying behavior"),
        ("barriers", "Barriers to Entry", "Technical, regulatory, financial, and competitive barriers"),
        ("gtm-strategy", "Go-to-Market Strategy", "Recommended approach, partnerships, and positioning"),
        ("financial-model", "Financial Projections", "Revenue model, cost structure, and break-even analysis"),
        ("risk-assessment", "Risk Assessment & Mitigation", "Key risks with probability, impact, and mitigation strategies"),
        ("action-plan", "90-Day Action Plan", "Prioritized next steps for market entry"),
    ]),
    estimated_pages=20,
    generation_time="3-5 minutes",
    config_fields=(
        ReportConfigField(
            id="topic",
            label="Market / Opportunity Description",
            type=FieldType.TEXT,
            placeholder=(
                "Describe the market or opportunity you want to enter (e.g., \"LEO broadband "
                "constellation for maritime customers\" or \"On-orbit servicing for GEO satellites\")"
            ),
            min_length=10,
            max_length=2000,
        ),
    ),
)

REPORT_TYPES: Tuple[ReportType, ...] = (
    SECTOR_OVERVIEW,
    COMPANY_DEEP_DIVE,
    COMPETITIVE_ANALYSIS,
    MARKET_ENTRY_BRIEF,
)


class ReportTypeCatalog:
    """Read-only lookup of report types by id."""

    def __init__(self, report_types: Iterable[ReportType]):
        ordered = tuple(report_types)
        by_id = {}
        for report_type in ordered:
            if report_type.id in by_id:
                raise ValueError(f"Duplicate report type id: {report_type.id}")
            by_id[report_type.id] = report_type
        self._ordered = ordered
        self._by_id: Mapping[str, ReportType] = MappingProxyType(by_id)

    def get(self, report_type_id: str) -> Optional[ReportType]:
        """Get a report type by its id, or None if it is not in the catalog."""
        return self._by_id.get(report_type_id)

    def list(self) -> Tuple[ReportType, ...]:
        return self._ordered

    def ids(self) -> List[str]:
        return [report_type.id for report_type in self._ordered]

    def __contains__(self, report_type_id: object) -> bool:
        return report_type_id in self._by_id

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self):
        return iter(self._ordered)


# Built once at import; there is no mutation API.
_catalog = ReportTypeCatalog(REPORT_TYPES)


def get_catalog() -> ReportTypeCatalog:
    """Get the process-wide report type catalog."""
    return _catalog


def get_report_type(report_type_id: str) -> Optional[ReportType]:
    """Look up a report type in the process-wide catalog."""
    report_type = _catalog.get(report_type_id)
    if report_type is None:
        logger.debug(f"Unknown report type requested: {report_type_id}")
    return report_type


def list_report_types() -> Tuple[ReportType, ...]:
    return _catalog.list()


def report_type_ids() -> List[str]:
    return _catalog.ids()
