"""Tests for the web API."""

import pytest
from fastapi.testclient import TestClient

from dep_tree.web import create_app


@pytest.fixture(autouse=True)
def open_web_root(monkeypatch):
    """Fixture projects live outside the home directory under tmp_path."""
    monkeypatch.setenv("DEP_TREE_WEB_ROOT", "/")


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_tree(client, sample_project):
    res = client.post("/api/tree", json={"path": str(sample_project)})
    assert res.status_code == 200
    data = res.json()
    assert [node["name"] for node in data["tree"]] == ["express", "left-pad", "@types/node"]
    assert data["summary"]["circular"] == 1
    assert data["summary"]["missing_packages"] == ["undici-types"]


def test_graph(client, sample_project):
    res = client.post("/api/graph", json={"path": str(sample_project)})
    assert res.status_code == 200
    data = res.json()
    assert data["ids"]["express@^4.18.2"] == 1001
    assert data["edges"][0] == '1001["express@^4.18.2"] --> 1002["body-parser: undefined"]'
    assert data["mermaid"].startswith("flowchart TD")


def test_graph_html(client, sample_project):
    res = client.post("/api/graph/html", json={"path": str(sample_project)})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert '<pre class="mermaid">' in res.text


def test_path_outside_root_blocked(client, sample_project, monkeypatch):
    monkeypatch.setenv("DEP_TREE_WEB_ROOT", str(sample_project))
    res = client.post("/api/tree", json={"path": str(sample_project.parent)})
    assert res.status_code == 403


def test_sibling_with_shared_prefix_blocked(client, tmp_path, monkeypatch):
    allowed = tmp_path / "proj"
    sibling = tmp_path / "proj-other"
    allowed.mkdir()
    sibling.mkdir()
    monkeypatch.setenv("DEP_TREE_WEB_ROOT", str(allowed))
    res = client.post("/api/tree", json={"path": str(sibling)})
    assert res.status_code == 403


def test_default_root_is_home(client, sample_project, tmp_path, monkeypatch):
    monkeypatch.delenv("DEP_TREE_WEB_ROOT")
    monkeypatch.setenv("HOME", str(tmp_path))
    res = client.post("/api/graph", json={"path": str(sample_project)})
    assert res.status_code == 403


def test_path_inside_root_allowed(client, sample_project, monkeypatch):
    monkeypatch.setenv("DEP_TREE_WEB_ROOT", str(sample_project.parent))
    res = client.post("/api/tree", json={"path": str(sample_project)})
    assert res.status_code == 200


def test_directory_not_found(client, tmp_path):
    res = client.post("/api/tree", json={"path": str(tmp_path / "nope")})
    assert res.status_code == 404


def test_manifest_not_found(client, tmp_path):
    res = client.post("/api/tree", json={"path": str(tmp_path)})
    assert res.status_code == 404
    assert "No package.json" in res.json()["detail"]


def test_missing_dependencies_section(client, make_project):
    project = make_project({"peerDependencies": {"a": "1"}})
    res = client.post("/api/graph", json={"path": str(project)})
    assert res.status_code == 422


def test_web_never_installs(client, sample_project):
    from unittest.mock import patch

    with patch("dep_tree.installer.subprocess.run") as run:
        client.post("/api/tree", json={"path": str(sample_project)})
    run.assert_not_called()
