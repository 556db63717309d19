"""Package store reader: looks up installed packages under node_modules."""

from __future__ import annotations

import logging
from pathlib import Path

from dep_tree.errors import ManifestParseError, SubpackageReadError
from dep_tree.manifest import (
    DEPENDENCIES,
    PEER_DEPENDENCIES,
    dependency_section,
    parse_manifest_text,
)

logger = logging.getLogger(__name__)


class PackageStore:
    """Read-only view of a directory-per-package store."""

    def __init__(self, root: Path, manifest_name: str = "package.json"):
        self.root = root
        self.manifest_name = manifest_name

    def manifest_path(self, name: str) -> Path:
        # Scoped names ("@scope/pkg") land in nested directories
        return self.root / name / self.manifest_name

    def resolve(self, name: str) -> dict[str, str] | None:
        """Return the runtime + peer dependencies of ``name``, or None if absent.

        Development dependencies of installed packages are never returned.
        """
        path = self.manifest_path(name)
        if not path.is_file():
            logger.debug("store miss: %s", name)
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SubpackageReadError(name, path, str(e)) from e
        except UnicodeDecodeError as e:
            raise ManifestParseError(path, str(e)) from e

        data = parse_manifest_text(text, path)
        sub_deps = {
            **dependency_section(data, DEPENDENCIES, path),
            **dependency_section(data, PEER_DEPENDENCIES, path),
        }
        logger.debug("store hit: %s (%d sub-dependencies)", name, len(sub_deps))
        return sub_deps
