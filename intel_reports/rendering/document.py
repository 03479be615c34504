"""
Navigable report document built from a generated report.

The sections returned by the generation service are authoritative here: the
table of contents follows their order and count, whatever the catalog entry
for the report type declares.
"""
import html
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from intel_reports.models.report import GeneratedReport
from intel_reports.rendering.markdown_renderer import Block, blocks_to_html, parse_section_body

logger = logging.getLogger(__name__)

PLATFORM_NAME = "SpaceNexus Intelligence Platform"

DISCLAIMER = (
    "This report was generated by AI using data from the SpaceNexus intelligence database "
    "and Claude AI analysis. While we strive for accuracy, all data and projections should be "
    "independently verified before making investment or business decisions. SpaceNexus is not "
    "a registered investment advisor."
)

_ANCHOR_UNSAFE = re.compile(r"[^a-z0-9_-]+")


@dataclass
class TocEntry:
    section_id: str
    title: str
    number: str


@dataclass
class TableOfContents:
    """Ordered (id, title) entries with a click-driven active entry."""
    entries: List[TocEntry] = field(default_factory=list)
    active_id: Optional[str] = None

    def ids(self) -> List[str]:
        return [entry.section_id for entry in self.entries]

    def select(self, section_id: str) -> bool:
        """Mark a section active; unknown ids leave the current choice alone."""
        if section_id not in self.ids():
            return False
        self.active_id = section_id
        return True

    def clear(self):
        self.active_id = None


@dataclass
class RenderedSection:
    section_id: str
    title: str
    number: str
    anchor: str
    blocks: List[Block]
    html: str


@dataclass
class ReportDocument:
    title: str
    subtitle: str
    generated_label: str
    executive_summary: str
    methodology: str
    sections: List[RenderedSection]
    toc: TableOfContents
    report_type: Optional[str] = None
    generated_at: Optional[datetime] = None
    disclaimer: str = DISCLAIMER

    def get_section(self, section_id: str) -> Optional[RenderedSection]:
        for section in self.sections:
            if section.section_id == section_id:
                return section
        return None


def format_generated_at(value: Optional[datetime]) -> str:
    """Format a timestamp like 'October 19, 2026, 02:30 PM'."""
    if value is None:
        return ""
    return f"{value.strftime('%B')} {value.day}, {value.year}, {value.strftime('%I:%M %p')}"


def _section_anchor(raw_id: str, index: int, seen: set) -> str:
    slug = _ANCHOR_UNSAFE.sub("-", (raw_id or "").strip().lower()).strip("-")
    candidate = f"section-{slug}" if slug else f"section-{index + 1}"
    unique = candidate
    suffix = 2
    while unique in seen:
        unique = f"{candidate}-{suffix}"
        suffix += 1
    seen.add(unique)
    return unique


def build_document(report: GeneratedReport) -> ReportDocument:
    """Render every section of a generated report and build its table of contents."""
    seen: set = set()
    sections = []
    for index, section in enumerate(report.sections):
        anchor = _section_anchor(section.id, index, seen)
        if any(s.section_id == section.id for s in sections):
            logger.debug(f"Duplicate section id {section.id!r} anchored as {anchor}")
        blocks = parse_section_body(section.content)
        sections.append(RenderedSection(
            section_id=section.id,
            title=section.title,
            number=f"{index + 1:02d}",
            anchor=anchor,
            blocks=blocks,
            html=blocks_to_html(blocks),
        ))

    toc = TableOfContents(entries=[
        TocEntry(section_id=s.section_id, title=s.title, number=s.number) for s in sections
    ])

    return ReportDocument(
        title=report.title,
        subtitle=report.subtitle,
        generated_label=format_generated_at(report.generated_at),
        executive_summary=report.executive_summary,
        methodology=report.methodology,
        sections=sections,
        toc=toc,
        report_type=report.report_type,
        generated_at=report.generated_at,
    )


_PAGE_STYLE = """
    body { font-family: Arial, sans-serif; margin: 0; line-height: 1.6; color: #1f2937; }
    .report-layout { display: flex; gap: 32px; padding: 32px; }
    .report-toc { width: 240px; flex-shrink: 0; position: sticky; top: 24px; align-self: flex-start; }
    .report-toc a { display: block; padding: 4px 8px; color: #475569; text-decoration: none; }
    .report-toc a.active { color: #0e7490; border-left: 2px solid #0e7490; }
    .report-body { flex: 1; min-width: 0; }
    .report-summary { background: #ecfeff; border: 1px solid #a5f3fc; padding: 12px 16px; }
    .report-meta span { margin-right: 16px; color: #64748b; font-size: 12px; }
    .report-section { margin: 32px 0; }
    .report-section-number { font-family: monospace; color: #0891b2; margin-right: 8px; }
    blockquote { border-left: 4px solid #67e8f9; padding-left: 16px; color: #475569; font-style: italic; }
    table { border-collapse: collapse; width: 100%; margin: 12px 0; }
    th, td { border: 1px solid #d1d5db; padding: 8px; text-align: left; }
    th { background: #f3f4f6; }
    .report-disclaimer { font-size: 12px; color: #92400e; background: #fffbeb; padding: 12px 16px; }
    @media print {
      .report-toc, .no-print { display: none; }
      .report-layout { display: block; padding: 0; }
    }
"""


def _toc_link(section: RenderedSection, active: bool) -> str:
    css = ' class="active"' if active else ""
    return f'<a href="#{section.anchor}"{css}>{html.escape(section.title)}</a>'


def render_document_html(document: ReportDocument) -> str:
    """Render a standalone, printable HTML page for the document."""
    esc = html.escape
    toc_links = "\n".join(_toc_link(s, document.toc.active_id == s.section_id) for s in document.sections)
    sections_html = "\n".join(
        f'<section class="report-section" id="{s.anchor}">\n'
        f'<h2><span class="report-section-number no-print">{s.number}</span>{esc(s.title)}</h2>\n'
        f"{s.html}\n</section>"
        for s in document.sections
    )

    parts = [f"<h1>{esc(document.title)}</h1>"]
    if document.subtitle:
        parts.append(f'<p class="report-subtitle">{esc(document.subtitle)}</p>')
    if document.executive_summary:
        parts.append(
            '<div class="report-summary"><strong>Executive Summary</strong>'
            f"<p>{esc(document.executive_summary)}</p></div>"
        )
    meta = []
    if document.generated_label:
        meta.append(f"<span>Generated: {esc(document.generated_label)}</span>")
    meta.append(f"<span>{PLATFORM_NAME}</span>")
    meta.append(f"<span>{len(document.sections)} sections</span>")
    parts.append(f'<div class="report-meta">{"".join(meta)}</div>')
    parts.append(sections_html)
    if document.methodology:
        parts.append(f'<div class="report-methodology"><h3>Methodology</h3><p>{esc(document.methodology)}</p></div>')
    parts.append(f'<div class="report-disclaimer"><strong>Disclaimer:</strong> {esc(document.disclaimer)}</div>')
    body = "\n".join(parts)

    return f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>{esc(document.title)}</title>
  <style>{_PAGE_STYLE}</style>
</head>
<body>
<div class="report-layout">
<nav class="report-toc">
<h3>Table of Contents</h3>
{toc_links}
</nav>
<main class="report-body">
{body}
</main>
</div>
</body>
</html>
"""
