"""Decorate a highlighter's token tree with subtle line and strong token markers."""

from __future__ import annotations

from doc_xref.core.errors import MalformedTokenTreeError
from doc_xref.core.ports.highlighter import HighlightVisitor
from doc_xref.models import HighlightConfig, RenderedLine, RenderedSpan, StyleMarker, TokenTree


class HybridHighlightVisitor:
    """Answers line/span visits from a ``HighlightConfig``.

    Implements the ``HighlightVisitor`` protocol. Token matching is by exact
    ``(line, column)`` position: a highlighter span that starts elsewhere does
    not receive the strong marker.
    """

    def __init__(self, config: HighlightConfig) -> None:
        self._lines = config.line_set()
        self._positions = config.token_positions()

    def visit_line(self, line_number: int) -> StyleMarker | None:
        return StyleMarker.SUBTLE if line_number in self._lines else None

    def visit_span(self, line: int, column: int) -> StyleMarker | None:
        return StyleMarker.STRONG if (line, column) in self._positions else None


def _with_marker(markers: tuple[StyleMarker, ...], marker: StyleMarker | None) -> tuple[StyleMarker, ...]:
    if marker is None or marker in markers:
        return markers
    return (*markers, marker)


def decorate(tree: TokenTree, visitor: HighlightVisitor) -> TokenTree:
    """Walk ``tree`` through ``visitor`` and return a new, decorated tree."""
    if not isinstance(tree, TokenTree):
        raise MalformedTokenTreeError(f"Expected a TokenTree, got {type(tree).__name__}")

    lines: list[RenderedLine] = []
    for line in tree.lines:
        spans: list[RenderedSpan] = []
        for span in line.spans:
            if span.line != line.number:
                raise MalformedTokenTreeError(
                    f"Span at {span.line}:{span.column} is attached to line {line.number}"
                )
            marker = visitor.visit_span(span.line, span.column)
            spans.append(span.model_copy(update={"markers": _with_marker(span.markers, marker)}))
        marker = visitor.visit_line(line.number)
        lines.append(
            line.model_copy(update={"spans": tuple(spans), "markers": _with_marker(line.markers, marker)})
        )
    return tree.model_copy(update={"lines": tuple(lines)})


def annotate(tree: TokenTree, config: HighlightConfig) -> TokenTree:
    """Apply ``config`` to ``tree``. The input tree is left untouched."""
    return decorate(tree, HybridHighlightVisitor(config))
