"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from dep_tree import __version__
from dep_tree.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="dep-tree", version=__version__)
    app.include_router(router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app
