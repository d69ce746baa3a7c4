from fastapi import APIRouter, Depends, Response, status

from doc_xref.api.dependencies import get_highlighter
from doc_xref.api.schemas import HealthResponse, ReadinessResponse
from doc_xref.core.ports.highlighter import Highlighter

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    highlighter: Highlighter = Depends(get_highlighter),
) -> ReadinessResponse:
    """Readiness probe: checks that the highlighter can tokenize."""
    tree = await highlighter.tokenize("x = 1", "python", "github-dark")
    if tree.lines:
        return ReadinessResponse(status="ok", highlighter="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", highlighter="down")
