"""Assign synthetic diagram ids to (name, version) pairs."""

from __future__ import annotations

from typing import Iterator

from dep_tree.models import DependencyNode, IdentifierMap


def walk(forest: list[DependencyNode]) -> Iterator[DependencyNode]:
    """Pre-order, left-to-right traversal over every tree in the forest."""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        if node.children:
            stack.extend(reversed(node.children))


def assign_ids(forest: list[DependencyNode], id_map: IdentifierMap | None = None) -> IdentifierMap:
    """Give each unseen (name, version) pair the next id, in first-encounter order.

    Passing an existing map continues numbering from it; keys already present
    keep their ids, so re-running on the same forest changes nothing.
    """
    if id_map is None:
        id_map = IdentifierMap()
    for node in walk(forest):
        id_map.add(node.name, node.version)
    return id_map
