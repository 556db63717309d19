"""Pipeline orchestrator: read manifest -> install -> build -> assign ids -> render."""

from __future__ import annotations

import logging
from typing import Callable

from dep_tree.analysis import TreeBuilder, assign_ids, render_edges, render_mermaid
from dep_tree.installer import run_install
from dep_tree.manifest import read_manifest
from dep_tree.models import BuildConfig, BuildResult, IdentifierMap
from dep_tree.store import PackageStore

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_build(config: BuildConfig, progress: ProgressCallback | None = None) -> BuildResult:
    """Run the full build. Any DepTreeError aborts it with no partial result."""
    # Stage 1: Read manifest; a missing or broken one stops the run before install
    manifest = read_manifest(config.project_dir, config.manifest_name)

    # Stage 2: Install
    if not config.skip_install:
        if progress:
            progress("Installing", 0, 1)
        run_install(config)
        if progress:
            progress("Installing", 1, 1)
        manifest = read_manifest(config.project_dir, config.manifest_name)

    # Stage 3: Build trees
    store = PackageStore(config.store_path, config.manifest_name)
    builder = TreeBuilder(store, manifest)
    roots = list(manifest.dependencies)
    forest = []
    for i, name in enumerate(roots):
        if progress:
            progress("Building", i, len(roots))
        forest.append(builder.build_tree(name))
    if progress:
        progress("Building", len(roots), len(roots))

    # Stage 4: Assign ids
    id_map = assign_ids(forest, IdentifierMap(base=config.id_base))

    # Stage 5: Render
    result = BuildResult(
        manifest=manifest,
        forest=forest,
        id_map=id_map,
        edges=render_edges(forest, id_map),
        mermaid=render_mermaid(forest, id_map),
    )
    logger.info(
        "built %d tree(s), %d distinct node(s), %d edge(s)",
        len(forest), len(id_map), len(result.edges),
    )
    return result
