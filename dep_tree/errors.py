"""Exceptions raised by dep-tree. Cycles and missing packages are not errors."""

from __future__ import annotations

from pathlib import Path


class DepTreeError(Exception):
    """Base class for fatal dep-tree errors."""


class ManifestNotFoundError(DepTreeError):
    def __init__(self, project_dir: Path):
        self.project_dir = project_dir
        super().__init__(f"No package.json found in the specified path: {project_dir}")


class ManifestMissingDependenciesError(DepTreeError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No dependencies section found in {path}")


class ManifestParseError(DepTreeError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path}: {reason}")


class SubpackageReadError(DepTreeError):
    def __init__(self, package: str, path: Path, reason: str):
        self.package = package
        self.path = path
        super().__init__(f"Could not read manifest of {package!r} at {path}: {reason}")


class InstallError(DepTreeError):
    """The package install command failed or could not be started."""
