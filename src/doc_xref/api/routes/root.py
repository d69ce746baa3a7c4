from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Doc Xref API",
            "description": "Locate documentation code references in source files and highlight them.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "identifier": "/highlight/identifier",
            "block": "/highlight/block",
            "render": "/highlight/render",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
