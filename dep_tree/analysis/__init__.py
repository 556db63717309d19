"""Analysis layer: tree building, id assignment, rendering."""

from dep_tree.analysis.identifiers import assign_ids, walk
from dep_tree.analysis.mermaid import render_edges, render_mermaid
from dep_tree.analysis.summary import summarize
from dep_tree.analysis.tree_builder import TreeBuilder

__all__ = [
    "TreeBuilder",
    "assign_ids",
    "render_edges",
    "render_mermaid",
    "summarize",
    "walk",
]
