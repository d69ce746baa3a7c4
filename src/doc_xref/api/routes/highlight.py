from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from doc_xref.api.dependencies import get_highlighter
from doc_xref.api.schemas import (
    BlockHighlightRequest,
    BlockHighlightResponse,
    IdentifierHighlightRequest,
    IdentifierHighlightResponse,
    RenderRequest,
    RenderResponse,
)
from doc_xref.core.block import locate_block
from doc_xref.core.errors import MalformedTokenTreeError
from doc_xref.core.identifier import extract_identifier
from doc_xref.core.languages import normalize_language
from doc_xref.core.locator import locate_occurrences
from doc_xref.core.ports.highlighter import Highlighter
from doc_xref.core.render import CodeRenderer, to_html
from doc_xref.models import HighlightConfig
from doc_xref.settings import get_theme

router = APIRouter(prefix="/highlight", tags=["highlight"])


@router.post("/identifier", response_model=IdentifierHighlightResponse)
async def identifier(body: IdentifierHighlightRequest) -> IdentifierHighlightResponse:
    """Highlight every occurrence of an inline code reference."""
    extracted = extract_identifier(body.raw)
    if not extracted:
        return IdentifierHighlightResponse(identifier="", config=HighlightConfig(lines=[], tokens=[]))
    return IdentifierHighlightResponse(identifier=extracted, config=locate_occurrences(body.source, extracted))


@router.post("/block", response_model=BlockHighlightResponse)
async def block(body: BlockHighlightRequest) -> BlockHighlightResponse:
    """Find the first line range containing a fenced snippet."""
    return BlockHighlightResponse(lines=locate_block(body.source, body.snippet))


@router.post("/render", response_model=RenderResponse)
async def render(
    body: RenderRequest,
    highlighter: Highlighter = Depends(get_highlighter),
) -> RenderResponse:
    """Tokenize source code and apply a highlight config."""
    try:
        language = normalize_language(body.language)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None

    renderer = CodeRenderer(highlighter, theme=get_theme())
    try:
        tree = await renderer.render(body.code, language, body.config, body.theme)
    except MalformedTokenTreeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None
    assert tree is not None
    return RenderResponse(tree=tree, html=to_html(tree))
