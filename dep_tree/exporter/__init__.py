"""Exporter layer."""

from dep_tree.exporter.diagram_exporter import export_html, export_mermaid, render_html
from dep_tree.exporter.json_exporter import export_json, tree_to_json

__all__ = ["export_html", "export_json", "export_mermaid", "render_html", "tree_to_json"]
