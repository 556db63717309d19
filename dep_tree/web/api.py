"""Dependency tree API: build the forest, render the graph, serve the HTML view."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from dep_tree.analysis import summarize
from dep_tree.errors import (
    DepTreeError,
    ManifestMissingDependenciesError,
    ManifestNotFoundError,
    ManifestParseError,
)
from dep_tree.exporter import render_html
from dep_tree.models import BuildConfig, BuildResult
from dep_tree.pipeline import run_build

router = APIRouter(prefix="/api")


class ProjectRequest(BaseModel):
    path: str


def _status_for(error: DepTreeError) -> int:
    if isinstance(error, ManifestNotFoundError):
        return 404
    if isinstance(error, (ManifestMissingDependenciesError, ManifestParseError)):
        return 422
    return 500


def _allowed_root() -> Path:
    return Path(os.getenv("DEP_TREE_WEB_ROOT") or Path.home()).expanduser().resolve()


def _validate_path(p: str) -> Path:
    """Ensure path is an existing directory under the allowed root (home by default)."""
    resolved = Path(p).expanduser().resolve()
    if not resolved.is_dir():
        raise HTTPException(404, f"Directory not found: {p}")
    root = _allowed_root()
    if resolved != root and root not in resolved.parents:
        raise HTTPException(403, f"Path must be under {root}")
    return resolved


def _build(req: ProjectRequest) -> BuildResult:
    project_dir = _validate_path(req.path)
    # The API never installs; it reads whatever node_modules already holds
    config = BuildConfig(project_dir=project_dir, skip_install=True)
    try:
        return run_build(config)
    except DepTreeError as e:
        raise HTTPException(_status_for(e), str(e))


@router.post("/tree")
async def build_tree(req: ProjectRequest):
    result = await asyncio.to_thread(_build, req)
    return {
        "path": req.path,
        "tree": [node.to_dict() for node in result.forest],
        "summary": summarize(result.forest),
    }


@router.post("/graph")
async def build_graph(req: ProjectRequest):
    result = await asyncio.to_thread(_build, req)
    return {
        "path": req.path,
        "ids": result.id_map.to_dict(),
        "edges": result.edges,
        "mermaid": result.mermaid,
    }


@router.post("/graph/html", response_class=HTMLResponse)
async def graph_html(req: ProjectRequest):
    result = await asyncio.to_thread(_build, req)
    return HTMLResponse(render_html(result.mermaid, title=f"Dependency tree: {Path(req.path).name}"))
