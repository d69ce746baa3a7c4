from typing import Protocol

from doc_xref.models import StyleMarker, TokenTree


class Highlighter(Protocol):
    async def tokenize(self, code: str, language: str, theme: str) -> TokenTree: ...


class HighlightVisitor(Protocol):
    def visit_line(self, line_number: int) -> StyleMarker | None: ...

    def visit_span(self, line: int, column: int) -> StyleMarker | None: ...
