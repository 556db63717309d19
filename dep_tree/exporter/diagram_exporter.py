"""Write Mermaid source, bare or wrapped in a standalone HTML page."""

from __future__ import annotations

import html
from pathlib import Path

MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"

_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <script src="{script_url}"></script>
  <script>mermaid.initialize({{ startOnLoad: true, maxTextSize: 1000000 }});</script>
</head>
<body>
  <pre class="mermaid">
{diagram}
  </pre>
</body>
</html>
"""


def render_html(mermaid: str, title: str = "Dependency tree") -> str:
    """Minimal page that renders ``mermaid`` client-side."""
    return _HTML_TEMPLATE.format(
        title=html.escape(title),
        script_url=MERMAID_SCRIPT_URL,
        diagram=html.escape(mermaid, quote=False),
    )


def export_mermaid(mermaid: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(mermaid + "\n", encoding="utf-8")
    return path


def export_html(mermaid: str, path: Path, title: str = "Dependency tree") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html(mermaid, title), encoding="utf-8")
    return path
