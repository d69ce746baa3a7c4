"""FastMCP server exposing doc-xref tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from doc_xref.core.block import locate_block as _locate_block
from doc_xref.core.content import load_unit
from doc_xref.core.identifier import extract_identifier as _extract_identifier
from doc_xref.core.languages import normalize_language
from doc_xref.core.locator import locate_occurrences as _locate_occurrences
from doc_xref.core.ports.highlighter import Highlighter
from doc_xref.core.render import CodeRenderer, to_html
from doc_xref.core.xref import audit_unit as _audit_unit
from doc_xref.models import HighlightConfig
from doc_xref.settings import get_theme


def create_mcp_server(highlighter: Highlighter) -> FastMCP:
    """Create a FastMCP server wired to the given highlighter."""

    mcp = FastMCP("doc-xref", instructions="Locate documentation code references in source files and highlight them.")

    @mcp.tool()
    async def extract_identifier(raw: str) -> str:
        """Extract the searchable identifier from an inline code reference."""
        return _extract_identifier(raw)

    @mcp.tool()
    async def locate_occurrences(source: str, identifier: str) -> dict[str, Any]:
        """Find word-bounded occurrences of an identifier (lines and token positions)."""
        cleaned = identifier.strip()
        if not cleaned:
            return HighlightConfig(lines=[], tokens=[]).model_dump()
        return _locate_occurrences(source, cleaned).model_dump()

    @mcp.tool()
    async def locate_block(source: str, snippet: str) -> list[int]:
        """Return the line numbers of the first occurrence of a multi-line snippet."""
        return _locate_block(source, snippet)

    @mcp.tool()
    async def render_highlighted(
        code: str,
        language: str = "text",
        lines: list[int] | None = None,
        tokens: list[dict[str, int]] | None = None,
        theme: str | None = None,
    ) -> str:
        """Render code as HTML with the given lines and tokens highlighted."""
        config = HighlightConfig.model_validate({"lines": lines, "tokens": tokens})
        renderer = CodeRenderer(highlighter, theme=get_theme())
        tree = await renderer.render(code, normalize_language(language), config, theme)
        return to_html(tree) if tree is not None else ""

    @mcp.tool()
    async def audit_unit(directory: str) -> list[dict[str, Any]]:
        """Check which README code references of a content directory resolve in its files."""
        unit = load_unit(directory)
        return [
            {
                "line": report.reference.line,
                "kind": report.reference.kind.value,
                "text": report.reference.text,
                "resolved": report.resolved,
                "files": [name for name, config in report.matches.items() if not config.is_empty()],
            }
            for report in _audit_unit(unit)
        ]

    return mcp
