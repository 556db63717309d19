"""Mermaid flowchart rendering of a dependency forest."""

from __future__ import annotations

from dep_tree.models import DependencyNode, IdentifierMap, format_version

FLOWCHART_HEADER = "flowchart TD"
INDENT = "    "


def _escape(label: str) -> str:
    return label.replace('"', "#quot;")


def _node_ref(node_id: int, label: str) -> str:
    return f'{node_id}["{_escape(label)}"]'


def _lookup(id_map: IdentifierMap, node: DependencyNode) -> int:
    node_id = id_map.get(node.name, node.version)
    if node_id is None:
        raise KeyError(f"no id assigned for {node.label}")
    return node_id


def render_edges(forest: list[DependencyNode], id_map: IdentifierMap) -> list[str]:
    """Return one edge per distinct (parent, child) pair, in traversal order.

    Parents are labelled ``name@version`` and children ``name: version``.
    Recurses once per tree level, like the tree builder.
    """
    # dict as an insertion-ordered set
    edges: dict[str, None] = {}

    def traverse(node: DependencyNode) -> None:
        if not node.children:
            return
        parent = _node_ref(_lookup(id_map, node), node.label)
        for child in node.children:
            child_label = f"{child.name}: {format_version(child.version)}"
            child_ref = _node_ref(_lookup(id_map, child), child_label)
            edges.setdefault(f"{parent} --> {child_ref}", None)
            traverse(child)

    for root in forest:
        traverse(root)
    return list(edges)


def render_mermaid(forest: list[DependencyNode], id_map: IdentifierMap) -> str:
    """Full flowchart source: header line followed by indented edges."""
    lines = [FLOWCHART_HEADER]
    lines.extend(INDENT + edge for edge in render_edges(forest, id_map))
    return "\n".join(lines)
