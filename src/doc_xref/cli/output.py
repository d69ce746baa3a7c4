"""Rich rendering helpers shared by CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from doc_xref.models import StyleMarker, TokenTree
from doc_xref.styles import LINE_ACCENT, MARKER_STYLES, scope_color

_MAX_COL_WIDTH = 80


def truncate(value: str, max_width: int = _MAX_COL_WIDTH) -> str:
    value = value.replace("\n", "⏎")
    if len(value) > max_width:
        return value[: max_width - 3] + "..."
    return value


def render_table(console: Console, headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(escape(truncate(str(v))) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def to_rich_text(tree: TokenTree) -> Text:
    """Build a terminal rendering of an annotated token tree with a line gutter."""
    gutter_width = len(str(len(tree.lines)))
    subtle = Style.parse(MARKER_STYLES[StyleMarker.SUBTLE])
    strong = Style.parse(MARKER_STYLES[StyleMarker.STRONG])

    text = Text()
    for line in tree.lines:
        line_subtle = StyleMarker.SUBTLE in line.markers
        accent = LINE_ACCENT if line_subtle else " "
        text.append(f"{line.number:>{gutter_width}} ", style="dim")
        text.append(accent, style="#F5B942" if line_subtle else "")
        for span in line.spans:
            style = Style.parse(scope_color(tree.theme, span.scope))
            if line_subtle:
                style += subtle
            if StyleMarker.STRONG in span.markers:
                style += strong
            text.append(span.text, style=style)
        text.append("\n")
    return text
