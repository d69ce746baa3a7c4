from __future__ import annotations

from collections.abc import AsyncIterator

from doc_xref.core.ports.highlighter import Highlighter
from doc_xref.highlighter.tree_sitter_adapter import TreeSitterHighlighter

_highlighter: TreeSitterHighlighter | None = None


async def get_highlighter() -> AsyncIterator[Highlighter]:
    """Yield a ``Highlighter`` instance, creating it lazily on first call."""
    global _highlighter  # noqa: PLW0603
    if _highlighter is None:
        _highlighter = TreeSitterHighlighter()
    yield _highlighter


async def shutdown_highlighter() -> None:
    global _highlighter  # noqa: PLW0603
    _highlighter = None
