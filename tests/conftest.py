"""Shared fixtures: on-disk projects with a node_modules store."""

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))


@pytest.fixture
def sample_project() -> Path:
    return FIXTURES / "sample_project"


@pytest.fixture
def make_project(tmp_path):
    """Create a project from a root manifest and a {name: manifest} store.

    A store value of None leaves the package out of node_modules.
    """
    def _make(root: dict, packages: dict[str, dict | None] | None = None) -> Path:
        project = tmp_path / "project"
        _write_json(project / "package.json", root)
        (project / "node_modules").mkdir(parents=True, exist_ok=True)
        for name, manifest in (packages or {}).items():
            if manifest is not None:
                _write_json(project / "node_modules" / name / "package.json", manifest)
        return project

    return _make
