from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class HighlightMatch(BaseModel):
    """A single identifier occurrence: 1-based line, 0-based column."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    column: int = Field(ge=0)
    length: int = Field(ge=1)


class HighlightConfig(BaseModel):
    """Subtle line highlights plus strong token highlights.

    ``None`` and an empty list both mean "nothing to highlight" for a field.
    """

    model_config = ConfigDict(frozen=True)

    lines: list[Annotated[int, Field(ge=1)]] | None = None
    tokens: list[HighlightMatch] | None = None

    def is_empty(self) -> bool:
        return not self.lines and not self.tokens

    def line_set(self) -> frozenset[int]:
        return frozenset(self.lines or ())

    def token_positions(self) -> frozenset[tuple[int, int]]:
        return frozenset((t.line, t.column) for t in self.tokens or ())


class SourceFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    content: str
    language: str


class StyleMarker(str, Enum):
    SUBTLE = "subtle"
    STRONG = "strong"


class RenderedSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    column: int = Field(ge=0)
    text: str
    scope: str = "plain"
    markers: tuple[StyleMarker, ...] = ()


class RenderedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1)
    spans: tuple[RenderedSpan, ...] = ()
    markers: tuple[StyleMarker, ...] = ()

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


class TokenTree(BaseModel):
    """Per-line, per-span rendering of a source file produced by a highlighter."""

    model_config = ConfigDict(frozen=True)

    language: str
    theme: str
    lines: tuple[RenderedLine, ...] = ()


class ReferenceKind(str, Enum):
    IDENTIFIER = "identifier"
    BLOCK = "block"


class CodeReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ReferenceKind
    text: str
    language: str | None = None
    line: int = Field(default=1, ge=1)


class DocumentationUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    readme: str = ""
    files: list[SourceFile] = Field(default_factory=list)

    def get_file(self, name: str) -> SourceFile | None:
        return next((f for f in self.files if f.name == name), None)


class ReferenceReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference: CodeReference
    matches: dict[str, HighlightConfig] = Field(default_factory=dict)

    @property
    def resolved(self) -> bool:
        return any(not config.is_empty() for config in self.matches.values())
