from __future__ import annotations

from fastapi import FastAPI

from doc_xref.api.lifespan import lifespan
from doc_xref.api.routes.health import router as health_router
from doc_xref.api.routes.highlight import router as highlight_router
from doc_xref.api.routes.root import router as root_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Doc Xref API",
        description="Locate documentation code references in source files and highlight them.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(highlight_router)

    return app
