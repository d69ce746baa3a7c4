from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from doc_xref.core.languages import grammar_for
from doc_xref.models import RenderedLine, RenderedSpan, TokenTree
from doc_xref.styles import resolve_theme

logger = logging.getLogger(__name__)

_NUMBER_TYPES = frozenset({"number", "integer", "float", "number_literal", "decimal_number", "hex_number"})
_LITERAL_KEYWORDS = frozenset({"true", "false", "null", "none", "this", "undefined", "super", "self"})

# (start_byte_column, end_byte_column, scope) on a single row
_Segment = tuple[int, int, str]


def _classify(node: Node) -> str:
    node_type = node.type
    if "comment" in node_type:
        return "comment"
    if not node.is_named:
        if node_type in ('"', "'", "`"):
            return "string"
        if node_type.replace("_", "").isalnum():
            return "keyword"
        return "punctuation"
    if "string" in node_type or node_type in ("escape_sequence", "template_string"):
        return "string"
    if node_type in _NUMBER_TYPES or "number" in node_type or "integer" in node_type:
        return "number"
    if node_type in _LITERAL_KEYWORDS:
        return "keyword"
    if "type" in node_type:
        return "type"
    if "identifier" in node_type:
        return "identifier"
    return "plain"


def _iter_leaves(root: Node) -> list[Node]:
    leaves: list[Node] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.child_count == 0:
            if node.end_byte > node.start_byte:
                leaves.append(node)
            continue
        stack.extend(reversed(node.children))
    return leaves


def _leaf_segments(code: str, grammar: str, row_lengths: list[int]) -> dict[int, list[_Segment]]:
    parser = get_parser(cast(SupportedLanguage, grammar))
    tree = parser.parse(code.encode("utf-8"))

    segments: dict[int, list[_Segment]] = defaultdict(list)
    for leaf in _iter_leaves(tree.root_node):
        start_row, start_col = leaf.start_point
        end_row, end_col = leaf.end_point
        scope = _classify(leaf)
        # Leaves such as block comments span rows; split them per line.
        for row in range(start_row, min(end_row, len(row_lengths) - 1) + 1):
            seg_start = start_col if row == start_row else 0
            seg_end = end_col if row == end_row else row_lengths[row]
            if seg_end > seg_start:
                segments[row].append((seg_start, seg_end, scope))
    return segments


def _build_line(number: int, text: str, segments: list[_Segment]) -> RenderedLine:
    raw = text.encode("utf-8")

    def span(start: int, end: int, scope: str) -> RenderedSpan:
        # tree-sitter columns are byte offsets; spans carry character offsets.
        return RenderedSpan(
            line=number,
            column=len(raw[:start].decode("utf-8")),
            text=raw[start:end].decode("utf-8"),
            scope=scope,
        )

    spans: list[RenderedSpan] = []
    cursor = 0
    for start, end, scope in sorted(segments):
        start = max(start, cursor)
        end = min(end, len(raw))
        if end <= start:
            continue
        if start > cursor:
            spans.append(span(cursor, start, "plain"))
        spans.append(span(start, end, scope))
        cursor = end
    if cursor < len(raw):
        spans.append(span(cursor, len(raw), "plain"))
    return RenderedLine(number=number, spans=tuple(spans))


class TreeSitterHighlighter:
    """Tokenize source text with tree-sitter into a ``TokenTree``.

    Implements the ``Highlighter`` protocol. Lines are split on ``"\\n"`` and
    numbered from 1; the spans of a line always concatenate to the raw line.
    """

    def tokenize_sync(self, code: str, language: str, theme: str | None = None) -> TokenTree:
        source_lines = code.split("\n")
        grammar = grammar_for(language)
        segments: dict[int, list[_Segment]] = {}
        if grammar is not None:
            row_lengths = [len(line.encode("utf-8")) for line in source_lines]
            segments = _leaf_segments(code, grammar, row_lengths)
        else:
            logger.debug("No grammar for %r, rendering as plain text", language)

        lines = tuple(
            _build_line(index + 1, text, segments.get(index, [])) for index, text in enumerate(source_lines)
        )
        return TokenTree(language=language, theme=resolve_theme(theme), lines=lines)

    async def tokenize(self, code: str, language: str, theme: str) -> TokenTree:
        return await asyncio.to_thread(self.tokenize_sync, code, language, theme)
