"""Serialize a dependency forest to JSON."""

from __future__ import annotations

import json
from pathlib import Path

from dep_tree.models import DependencyNode


def tree_to_json(forest: list[DependencyNode]) -> str:
    return json.dumps([node.to_dict() for node in forest], indent=2)


def export_json(forest: list[DependencyNode], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tree_to_json(forest) + "\n", encoding="utf-8")
    return path
