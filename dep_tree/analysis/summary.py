"""Counts over a built forest, for the CLI footer and the web API."""

from __future__ import annotations

from dep_tree.analysis.identifiers import walk
from dep_tree.models import DependencyNode


def summarize(forest: list[DependencyNode]) -> dict:
    nodes = 0
    circular = 0
    missing: set[str] = set()
    missing_count = 0
    packages: set[str] = set()

    for node in walk(forest):
        nodes += 1
        packages.add(node.name)
        if node.circular:
            circular += 1
        elif node.missing:
            missing_count += 1
            missing.add(node.name)

    return {
        "roots": len(forest),
        "nodes": nodes,
        "packages": len(packages),
        "circular": circular,
        "missing": missing_count,
        "missing_packages": sorted(missing),
    }
