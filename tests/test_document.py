"""Tests for the report document model, table of contents and page actions."""

from datetime import datetime, timezone

import pytest

from intel_reports.models.report import GeneratedReport
from intel_reports.notifications.notifier import NotificationLevel
from intel_reports.rendering.actions import DocumentActions, HeadlessHost
from intel_reports.rendering.document import (
    DISCLAIMER,
    build_document,
    format_generated_at,
    render_document_html,
)


@pytest.fixture
def report():
    return GeneratedReport.model_validate({
        "title": "Competitive Analysis: SpaceX vs Rocket Lab",
        "subtitle": "Launch market positioning",
        "generatedAt": "2026-10-19T14:30:00Z",
        "reportType": "competitive-analysis",
        "executiveSummary": "SpaceX leads <by far>.",
        "methodology": "Public filings",
        "sections": [
            {"id": "overview", "title": "Overview", "content": "Intro *text*"},
            {"id": "Key Financials", "title": "Financials", "content": "| A | B |\n|---|---|\n| 1 | 2 |"},
            {"id": "overview", "title": "Overview (cont.)", "content": ""},
            {"id": None, "title": "Untitled", "content": None},
        ],
    })


class TestBuildDocument:

    def test_sections_follow_returned_order(self, report):
        document = build_document(report)
        assert [entry.title for entry in document.toc.entries] == [
            "Overview", "Financials", "Overview (cont.)", "Untitled",
        ]
        assert [s.number for s in document.sections] == ["01", "02", "03", "04"]

    def test_toc_keeps_returned_ids(self, report):
        document = build_document(report)
        assert document.toc.ids() == ["overview", "Key Financials", "overview", ""]

    def test_anchors_unique_and_stable(self, report):
        anchors = [s.anchor for s in build_document(report).sections]
        assert anchors == ["section-overview", "section-key-financials", "section-overview-2", "section-4"]
        assert [s.anchor for s in build_document(report).sections] == anchors

    def test_rendered_bodies(self, report):
        document = build_document(report)
        assert document.sections[0].html == "<p>Intro <em>text</em></p>"
        assert "<table>" in document.sections[1].html
        assert document.sections[2].blocks == []

    def test_metadata(self, report):
        document = build_document(report)
        assert document.generated_label == "October 19, 2026, 02:30 PM"
        assert document.disclaimer == DISCLAIMER
        assert document.report_type == "competitive-analysis"

    def test_toc_select(self, report):
        toc = build_document(report).toc
        assert toc.active_id is None
        assert toc.select("Key Financials") is True
        assert toc.select("unknown") is False
        assert toc.active_id == "Key Financials"


def test_format_generated_at():
    assert format_generated_at(datetime(2026, 3, 5, 9, 7, tzinfo=timezone.utc)) == "March 5, 2026, 09:07 AM"
    assert format_generated_at(None) == ""


def test_render_document_html(report):
    document = build_document(report)
    document.toc.select("Key Financials")
    page = render_document_html(document)

    assert page.startswith("<!doctype html>")
    assert "@media print" in page
    assert '<a href="#section-key-financials" class="active">Financials</a>' in page
    assert 'id="section-overview-2"' in page
    assert "SpaceX leads &lt;by far&gt;." in page
    assert "Disclaimer:" in page


class FailingClipboardHost(HeadlessHost):
    def copy_to_clipboard(self, text):
        raise PermissionError("clipboard denied")


class TestDocumentActions:

    def test_share_copies_reports_link(self, settings, notifier):
        host = HeadlessHost(settings.output_dir)
        actions = DocumentActions(host, notifier, settings)

        assert actions.share() is True
        assert host.clipboard == "https://spacenexus.test/reports"
        assert notifier.last.level == NotificationLevel.SUCCESS
        assert notifier.last.message == "Link copied to clipboard"

    @pytest.mark.parametrize("host_factory", [
        lambda out: HeadlessHost(out, clipboard_available=False),
        lambda out: FailingClipboardHost(out),
    ])
    def test_share_failure(self, settings, notifier, host_factory):
        actions = DocumentActions(host_factory(settings.output_dir), notifier, settings)
        assert actions.share() is False
        assert notifier.last.level == NotificationLevel.ERROR
        assert notifier.last.message == "Failed to copy link"

    def test_print_writes_page(self, settings, notifier, report):
        host = HeadlessHost(settings.output_dir)
        path = DocumentActions(host, notifier, settings).print_report(build_document(report))

        assert path.endswith("competitive-analysis-spacex-vs-rocket-lab.html")
        assert host.printed == [path]

    def test_scroll_to_section(self, settings, notifier, report):
        host = HeadlessHost(settings.output_dir)
        document = build_document(report)
        actions = DocumentActions(host, notifier, settings)

        assert actions.scroll_to_section(document, "Key Financials") is True
        assert host.scrolled_to == ["section-key-financials"]
        assert document.toc.active_id == "Key Financials"
