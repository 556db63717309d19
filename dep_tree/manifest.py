"""Read package.json manifests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dep_tree.errors import (
    ManifestMissingDependenciesError,
    ManifestNotFoundError,
    ManifestParseError,
)
from dep_tree.models import Manifest

logger = logging.getLogger(__name__)

DEPENDENCIES = "dependencies"
DEV_DEPENDENCIES = "devDependencies"
PEER_DEPENDENCIES = "peerDependencies"


def parse_manifest_text(text: str, path: Path) -> dict:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ManifestParseError(path, "top-level value is not an object")
    return data


def dependency_section(data: dict, section: str, path: Path) -> dict[str, str]:
    """Return one dependency section as a name -> version dict, in file order."""
    value = data.get(section)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestParseError(path, f"{section!r} is not an object")
    return {str(name): version for name, version in value.items()}


def read_manifest(project_dir: Path, manifest_name: str = "package.json") -> Manifest:
    """Read the root manifest of a project.

    Raises ManifestNotFoundError when the file does not exist and
    ManifestMissingDependenciesError when it has no ``dependencies`` section
    (absent or null), even if dev or peer sections are present.
    """
    path = project_dir / manifest_name
    if not path.is_file():
        raise ManifestNotFoundError(project_dir)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, str(e)) from e

    data = parse_manifest_text(text, path)
    if data.get(DEPENDENCIES) is None:
        raise ManifestMissingDependenciesError(path)

    manifest = Manifest(
        dependencies=dependency_section(data, DEPENDENCIES, path),
        dev_dependencies=dependency_section(data, DEV_DEPENDENCIES, path),
        peer_dependencies=dependency_section(data, PEER_DEPENDENCIES, path),
    )
    logger.info(
        "read %s: %d runtime, %d dev, %d peer",
        path,
        len(manifest.dependencies),
        len(manifest.dev_dependencies),
        len(manifest.peer_dependencies),
    )
    return manifest
