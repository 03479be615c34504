"""Tests for the section body renderer."""

import pytest

from intel_reports.rendering.markdown_renderer import (
    BlankLine,
    Blockquote,
    Heading,
    ListBlock,
    ListItem,
    Paragraph,
    Rule,
    Table,
    TextLine,
    apply_emphasis,
    classify_lines,
    detect_tables,
    group_lists,
    parse_section_body,
    render_markdown,
    split_cells,
    tokenize,
    wrap_paragraphs,
)


class TestEmphasis:

    def test_nested_emphasis(self):
        html = render_markdown("**Bold** and *italic* and ***both***.")
        assert html == (
            "<p><strong>Bold</strong> and <em>italic</em> and "
            "<strong><em>both</em></strong>.</p>"
        )
        assert "*" not in html

    def test_unmatched_markers_stay_literal(self):
        assert apply_emphasis("5 * 3 = 15") == "5 * 3 = 15"
        assert apply_emphasis("**dangling") == "**dangling"

    @pytest.mark.parametrize("text", ["***", "* * *", "a * b * c"])
    def test_lone_markers_stay_literal(self, text):
        assert apply_emphasis(text) == text

    def test_rule_of_asterisks_renders_literally(self):
        assert render_markdown("***") == "<p>***</p>"


class TestPipeline:

    def test_escapes_markup_first(self):
        html = render_markdown("<script>alert('x')</script> & more")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "&amp; more" in html

    def test_headings(self):
        blocks = parse_section_body("# Top\n## Middle\n### Low\n#### Not a heading")
        assert blocks[:3] == [
            Heading(level=1, html="Top"),
            Heading(level=2, html="Middle"),
            Heading(level=3, html="Low"),
        ]
        assert blocks[3] == Paragraph(html="#### Not a heading")
        assert render_markdown("## Middle").startswith("<h3")

    def test_quote_rule_and_blank(self):
        blocks = parse_section_body("> Quoted *insight*\n\n---")
        assert blocks == [Blockquote(html="Quoted <em>insight</em>"), BlankLine(), Rule()]

    def test_lists_grouped_by_kind(self):
        body = "- one\n- two\n1. first\n2. second\nbreak\n- three"
        blocks = parse_section_body(body)
        assert blocks == [
            ListBlock(ordered=False, items=("one", "two")),
            ListBlock(ordered=True, items=("first", "second")),
            Paragraph(html="break"),
            ListBlock(ordered=False, items=("three",)),
        ]

    def test_every_run_is_grouped(self):
        blocks = group_lists(classify_lines(["- a", "x", "- b", "- c", "y", "- d"]))
        assert [b for b in blocks if isinstance(b, ListBlock)] == [
            ListBlock(ordered=False, items=("a",)),
            ListBlock(ordered=False, items=("b", "c")),
            ListBlock(ordered=False, items=("d",)),
        ]
        assert not any(isinstance(b, ListItem) for b in blocks)

    def test_group_lists_idempotent(self):
        blocks = classify_lines(tokenize("- a\n- b\n\n1. c"))
        once = group_lists(blocks)
        assert group_lists(once) == once

    def test_detect_tables_idempotent(self):
        blocks = group_lists(classify_lines(tokenize("| A | B |\n|---|---|\n| 1 | 2 |\ntext")))
        once = detect_tables(blocks)
        assert detect_tables(once) == once

    def test_wrap_paragraphs_idempotent(self):
        blocks = detect_tables(group_lists(classify_lines(tokenize("# H\nplain *text*\n\n- item"))))
        once = wrap_paragraphs(blocks)
        assert wrap_paragraphs(once) == once
        assert Paragraph(html="plain <em>text</em>") in once

    def test_html_lists(self):
        assert render_markdown("- a\n- b") == "<ul><li>a</li><li>b</li></ul>"

    @pytest.mark.parametrize("body", ["", "   \n  ", None])
    def test_empty_body(self, body):
        assert parse_section_body(body) == []
        assert render_markdown(body) == ""


class TestTables:

    def test_table_with_n_rows(self):
        body = "| Company | Launches |\n|---|:---:|\n| SpaceX | 130 |\n| Rocket Lab | 16 |\n| ULA | 5 |"
        blocks = parse_section_body(body)
        assert len(blocks) == 1
        table = blocks[0]
        assert isinstance(table, Table)
        assert table.headers == ("Company", "Launches")
        assert len(table.rows) == 3
        assert table.rows[1] == ("Rocket Lab", "16")

    def test_missing_separator_falls_through(self):
        blocks = parse_section_body("| a | b |\n| 1 | 2 |")
        assert blocks == [Paragraph(html="| a | b |"), Paragraph(html="| 1 | 2 |")]

    def test_short_row_padded(self):
        body = "| A | B | C |\n| --- | --- | --- |\n| 1 |"
        table = parse_section_body(body)[0]
        assert table.rows == (("1", "", ""),)
        assert "<td></td>" in render_markdown(body)

    def test_emphasis_in_cells(self):
        body = "| **Name** | Note |\n|---|---|\n| X | *new* |"
        table = parse_section_body(body)[0]
        assert table.headers[0] == "<strong>Name</strong>"
        assert table.rows[0][1] == "<em>new</em>"

    def test_split_cells(self):
        assert split_cells("| a | b |") == ["a", "b"]
        assert split_cells("|a||c|") == ["a", "", "c"]

    def test_detect_tables_leaves_other_blocks(self):
        blocks = [Heading(level=1, html="T"), TextLine(text="plain")]
        assert detect_tables(blocks) == blocks

    def test_table_between_paragraphs(self):
        body = "Intro\n| A | B |\n|---|---|\n| 1 | 2 |\nOutro"
        blocks = parse_section_body(body)
        assert [type(b) for b in blocks] == [Paragraph, Table, Paragraph]
