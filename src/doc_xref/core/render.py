from __future__ import annotations

import html
import logging

from doc_xref.core.annotate import annotate
from doc_xref.core.ports.highlighter import Highlighter
from doc_xref.models import HighlightConfig, TokenTree
from doc_xref.styles import DEFAULT_THEME, marker_classes

logger = logging.getLogger(__name__)


class CodeRenderer:
    """Tokenize and annotate the active source file, keeping only the newest result.

    Every ``render`` call supersedes the previous ones: a tokenization that
    finishes after a newer request was issued is dropped and never committed.
    """

    def __init__(self, highlighter: Highlighter, theme: str = DEFAULT_THEME) -> None:
        self._highlighter = highlighter
        self._theme = theme
        self._generation = 0
        self._committed: TokenTree | None = None

    @property
    def committed(self) -> TokenTree | None:
        return self._committed

    async def render(
        self,
        code: str,
        language: str,
        config: HighlightConfig | None = None,
        theme: str | None = None,
    ) -> TokenTree | None:
        self._generation += 1
        generation = self._generation

        tree = await self._highlighter.tokenize(code, language, theme or self._theme)
        if generation != self._generation:
            logger.debug("Discarding superseded render %d (latest is %d)", generation, self._generation)
            return None

        annotated = annotate(tree, config or HighlightConfig())
        self._committed = annotated
        return annotated


def to_html(tree: TokenTree) -> str:
    """Serialize a token tree as ``<pre><code>`` markup with marker classes."""
    rendered_lines: list[str] = []
    for line in tree.lines:
        spans = []
        for span in line.spans:
            classes = " ".join(filter(None, [f"token-{span.scope}", marker_classes(span.markers)]))
            spans.append(
                f'<span class="{classes}" data-column="{span.column}">{html.escape(span.text)}</span>'
            )
        line_classes = " ".join(filter(None, ["line", marker_classes(line.markers)]))
        rendered_lines.append(f'<span class="{line_classes}" data-line="{line.number}">{"".join(spans)}</span>')
    body = "\n".join(rendered_lines)
    theme = html.escape(tree.theme)
    language = html.escape(tree.language)
    return f'<pre class="doc-xref {theme}"><code data-language="{language}">{body}</code></pre>'
