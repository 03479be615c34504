"""
Report document rendering: section body markup, document/TOC model and page actions.
"""
from intel_reports.rendering.actions import DocumentActions, HeadlessHost, HostEnvironment
from intel_reports.rendering.document import (
    DISCLAIMER,
    RenderedSection,
    ReportDocument,
    TableOfContents,
    TocEntry,
    build_document,
    format_generated_at,
    render_document_html,
)
from intel_reports.rendering.markdown_renderer import parse_section_body, render_markdown

__all__ = [
    "DISCLAIMER",
    "DocumentActions",
    "HeadlessHost",
    "HostEnvironment",
    "RenderedSection",
    "ReportDocument",
    "TableOfContents",
    "TocEntry",
    "build_document",
    "format_generated_at",
    "parse_section_body",
    "render_document_html",
    "render_markdown",
]
