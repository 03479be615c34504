"""
Renderer for the semi-structured section bodies returned by the generation service.

The body uses lightweight markup: #/##/### headers, **bold**, *italic*,
"> " quotes, "---" rules, "-" and "1." list items and pipe tables. Rendering
is an ordered pipeline of pure stages:

    tokenize -> classify_lines -> group_lists -> detect_tables -> wrap_paragraphs

and blocks_to_html() turns the resulting block list into markup. Each stage
leaves blocks produced by the previous ones alone, so running a stage twice
gives the same result as running it once.
"""
import html
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextLine:
    """A line no stage has claimed yet (already escaped, emphasis not applied)."""
    text: str


@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class Heading:
    level: int
    html: str


@dataclass(frozen=True)
class Paragraph:
    html: str


@dataclass(frozen=True)
class Blockquote:
    html: str


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class ListItem:
    ordered: bool
    html: str


@dataclass(frozen=True)
class ListBlock:
    ordered: bool
    items: Tuple[str, ...]


@dataclass(frozen=True)
class Table:
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]


Block = Union[TextLine, BlankLine, Heading, Paragraph, Blockquote, Rule, ListItem, ListBlock, Table]


# ---------------------------------------------------------------------------
# Inline emphasis
# ---------------------------------------------------------------------------

_BOLD_ITALIC = re.compile(r"\*\*\*(.+?)\*\*\*")
_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*([^*\s][^*]*?)\*")


def apply_emphasis(text: str) -> str:
    """Convert ***x***, **x** and *x* (in that order); unmatched markers stay literal."""
    text = _BOLD_ITALIC.sub(r"<strong><em>\1</em></strong>", text)
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    return _ITALIC.sub(r"<em>\1</em>", text)


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

_HEADING = re.compile(r"^(#{1,3}) (.+)$")
_QUOTE = re.compile(r"^&gt; (.+)$")
_RULE = re.compile(r"^---\s*$")
_BULLET = re.compile(r"^- (.+)$")
_NUMBERED = re.compile(r"^\d+\. (.+)$")

_TABLE_ROW = re.compile(r"^\s*\|.*\|\s*$")
_TABLE_SEPARATOR = re.compile(r"^\s*\|[\s|:-]*-[\s|:-]*\|\s*$")


def tokenize(body: Optional[str]) -> List[str]:
    """Escape &, < and > so no supplied text is read as markup, then split into lines."""
    if not body:
        return []
    escaped = html.escape(body, quote=False)
    return escaped.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def classify_line(line: str) -> Block:
    if not line.strip():
        return BlankLine()

    match = _HEADING.match(line)
    if match:
        return Heading(level=len(match.group(1)), html=apply_emphasis(match.group(2).strip()))

    match = _QUOTE.match(line)
    if match:
        return Blockquote(html=apply_emphasis(match.group(1)))

    if _RULE.match(line):
        return Rule()

    match = _BULLET.match(line)
    if match:
        return ListItem(ordered=False, html=apply_emphasis(match.group(1)))

    match = _NUMBERED.match(line)
    if match:
        return ListItem(ordered=True, html=apply_emphasis(match.group(1)))

    return TextLine(text=line)


def classify_lines(lines: Sequence[str]) -> List[Block]:
    return [classify_line(line) for line in lines]


def group_lists(blocks: Sequence[Block]) -> List[Block]:
    """Merge every unbroken run of same-kind list items into one list block."""
    grouped: List[Block] = []
    run: List[ListItem] = []

    def flush():
        if run:
            grouped.append(ListBlock(ordered=run[0].ordered, items=tuple(item.html for item in run)))
            run.clear()

    for block in blocks:
        if isinstance(block, ListItem):
            if run and run[0].ordered != block.ordered:
                flush()
            run.append(block)
        else:
            flush()
            grouped.append(block)
    flush()
    return grouped


def split_cells(row: str) -> List[str]:
    """Split a pipe row, dropping the empty cells outside the boundary pipes."""
    parts = row.strip().split("|")
    if parts and not parts[0].strip():
        parts = parts[1:]
    if parts and not parts[-1].strip():
        parts = parts[:-1]
    return [part.strip() for part in parts]


def _is_row(block: Block) -> bool:
    return isinstance(block, TextLine) and bool(_TABLE_ROW.match(block.text))


def _is_separator(block: Block) -> bool:
    return isinstance(block, TextLine) and bool(_TABLE_SEPARATOR.match(block.text))


def detect_tables(blocks: Sequence[Block]) -> List[Block]:
    """
    Replace header row + separator row + body rows with a Table block.

    A header row without a separator row (or without any body row) is left
    as plain lines.
    """
    result: List[Block] = []
    i = 0
    while i < len(blocks):
        block = blocks[i]
        if (_is_row(block) and not _is_separator(block)
                and i + 2 < len(blocks) and _is_separator(blocks[i + 1]) and _is_row(blocks[i + 2])):
            headers = [apply_emphasis(cell) for cell in split_cells(block.text)]
            j = i + 2
            rows = []
            while j < len(blocks) and _is_row(blocks[j]):
                cells = [apply_emphasis(cell) for cell in split_cells(blocks[j].text)]
                if len(cells) < len(headers):
                    cells.extend([""] * (len(headers) - len(cells)))
                rows.append(tuple(cells))
                j += 1
            result.append(Table(headers=tuple(headers), rows=tuple(rows)))
            i = j
        else:
            result.append(block)
            i += 1
    return result


def wrap_paragraphs(blocks: Sequence[Block]) -> List[Block]:
    """Turn every remaining non-empty text line into a paragraph."""
    wrapped: List[Block] = []
    for block in blocks:
        if isinstance(block, TextLine):
            text = block.text.strip()
            wrapped.append(Paragraph(html=apply_emphasis(text)) if text else BlankLine())
        else:
            wrapped.append(block)
    return wrapped


def parse_section_body(body: Optional[str]) -> List[Block]:
    """Run the full pipeline over a section body. An empty body yields no blocks."""
    if not body or not body.strip():
        return []
    blocks = classify_lines(tokenize(body))
    blocks = group_lists(blocks)
    blocks = detect_tables(blocks)
    return wrap_paragraphs(blocks)


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------

def block_to_html(block: Block) -> str:
    if isinstance(block, Heading):
        tag = f"h{block.level + 1}"
        return f'<{tag} class="report-heading report-heading-{block.level}">{block.html}</{tag}>'
    if isinstance(block, Paragraph):
        return f"<p>{block.html}</p>"
    if isinstance(block, Blockquote):
        return f"<blockquote>{block.html}</blockquote>"
    if isinstance(block, Rule):
        return "<hr />"
    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{item}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"
    if isinstance(block, ListItem):
        return f"<li>{block.html}</li>"
    if isinstance(block, Table):
        head = "".join(f"<th>{cell}</th>" for cell in block.headers)
        body = "".join(
            "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>"
            for row in block.rows
        )
        return (f'<div class="report-table"><table><thead><tr>{head}</tr></thead>'
                f"<tbody>{body}</tbody></table></div>")
    if isinstance(block, TextLine):
        return block.text
    return ""


def blocks_to_html(blocks: Sequence[Block]) -> str:
    return "\n".join(block_to_html(block) for block in blocks)


def render_markdown(body: Optional[str]) -> str:
    """Render a section body to HTML."""
    return blocks_to_html(parse_section_body(body))
