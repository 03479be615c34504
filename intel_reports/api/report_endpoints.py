"""
API endpoints for the report catalog, configuration validation and document rendering.

These endpoints are stateless: the generation itself runs in the external
generation service, so the server only describes report types, builds and
validates generation requests, and renders returned reports.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from intel_reports.builder.selection import DEFAULT_MAX_SELECTED, MultiSelection, SingleSelection
from intel_reports.builder.validator import ConfigurationState, build_generation_request
from intel_reports.catalog.report_types import SPACE_SECTORS, ReportTypeCatalog, get_catalog
from intel_reports.errors import ConfigValidationError
from intel_reports.models.report import GeneratedReport, SearchableEntity
from intel_reports.rendering.document import build_document, render_document_html


logger = logging.getLogger(__name__)

# Create router for report endpoints
router = APIRouter(prefix="/api/reports", tags=["Intelligence Reports"])


class ConfigRequest(BaseModel):
    """Raw configuration input for one report type"""
    model_config = ConfigDict(populate_by_name=True)

    report_type: str = Field(alias="reportType")
    sector: str = ""
    company: Optional[str] = None
    companies: List[str] = Field(default_factory=list)
    topic: str = ""


class TocEntryResponse(BaseModel):
    """Response model for table of contents entries"""
    id: str
    title: str
    number: str
    anchor: str


def get_report_catalog() -> ReportTypeCatalog:
    """Get the report type catalog."""
    return get_catalog()


def _state_from_request(body: ConfigRequest) -> ConfigurationState:
    company = SingleSelection()
    if body.company:
        company.select(SearchableEntity(slug=body.company, name=body.company))

    # Oversized lists reach the validator intact so it can reject them
    companies = MultiSelection(max_items=max(len(body.companies), DEFAULT_MAX_SELECTED))
    for slug in body.companies:
        companies.add(SearchableEntity(slug=slug, name=slug))

    return ConfigurationState(sector=body.sector, company=company, companies=companies, topic=body.topic)


@router.get("/types")
async def list_report_types(catalog: ReportTypeCatalog = Depends(get_report_catalog)) -> List[Dict[str, Any]]:
    """List all report types in catalog order."""
    return [report_type.model_dump(mode="json", by_alias=True) for report_type in catalog.list()]


@router.get("/types/{report_type_id}")
async def get_report_type(
    report_type_id: str,
    catalog: ReportTypeCatalog = Depends(get_report_catalog)
) -> Dict[str, Any]:
    """Get one report type."""
    report_type = catalog.get(report_type_id)
    if report_type is None:
        raise HTTPException(status_code=404, detail=f"Report type {report_type_id} not found")
    return report_type.model_dump(mode="json", by_alias=True)


@router.get("/sectors")
async def list_sectors() -> List[Dict[str, str]]:
    """List the sectors available for sector-based reports."""
    return [option.model_dump() for option in SPACE_SECTORS]


@router.post("/config")
async def build_config_payload(
    body: ConfigRequest,
    catalog: ReportTypeCatalog = Depends(get_report_catalog)
) -> Dict[str, Any]:
    """Validate configuration input and return the generation request body."""
    report_type = catalog.get(body.report_type)
    if report_type is None:
        raise HTTPException(status_code=404, detail=f"Report type {body.report_type} not found")

    try:
        request = build_generation_request(report_type, _state_from_request(body))
    except ConfigValidationError as e:
        logger.info(f"Rejected {body.report_type} config: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)

    return request.to_payload()


@router.post("/render", response_class=HTMLResponse)
async def render_report(report: GeneratedReport) -> HTMLResponse:
    """Render a generated report as a standalone printable page."""
    document = build_document(report)
    return HTMLResponse(content=render_document_html(document))


@router.post("/toc")
async def report_toc(report: GeneratedReport) -> List[TocEntryResponse]:
    """Get the table of contents of a generated report."""
    document = build_document(report)
    return [
        TocEntryResponse(id=section.section_id, title=section.title,
                         number=section.number, anchor=section.anchor)
        for section in document.sections
    ]
