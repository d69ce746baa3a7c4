from __future__ import annotations

from pydantic import BaseModel

from doc_xref.models import HighlightConfig, TokenTree


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    highlighter: str = "up"


class IdentifierHighlightRequest(BaseModel):
    source: str
    raw: str


class IdentifierHighlightResponse(BaseModel):
    identifier: str
    config: HighlightConfig


class BlockHighlightRequest(BaseModel):
    source: str
    snippet: str


class BlockHighlightResponse(BaseModel):
    lines: list[int]


class RenderRequest(BaseModel):
    code: str
    language: str = "text"
    theme: str | None = None
    config: HighlightConfig = HighlightConfig()


class RenderResponse(BaseModel):
    tree: TokenTree
    html: str
