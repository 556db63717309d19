"""Data models for the dep-tree pipeline."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Manifest:
    """Root project manifest, split into its three declared kinds."""
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    peer_dependencies: dict[str, str] = field(default_factory=dict)

    @property
    def all_dependencies(self) -> dict[str, str]:
        # Later kinds win on a name collision
        return {**self.dependencies, **self.dev_dependencies, **self.peer_dependencies}


@dataclass
class DependencyNode:
    """One occurrence of a package on a specific tree path."""
    name: str
    version: str | None = None
    children: list[DependencyNode] | None = None
    circular: bool = False
    missing: bool = False

    @property
    def label(self) -> str:
        return f"{self.name}@{format_version(self.version)}"

    def to_dict(self) -> dict:
        """JSON-ready form; ``version`` is omitted when absent."""
        data: dict = {"name": self.name}
        if self.version is not None:
            data["version"] = self.version
        if self.circular:
            data["circular"] = True
        elif self.missing:
            data["missing"] = True
        else:
            data["children"] = [child.to_dict() for child in self.children or []]
        return data


ABSENT_VERSION = "undefined"


def format_version(version: str | None) -> str:
    return ABSENT_VERSION if version is None else version


def _default_install_command() -> list[str]:
    return shlex.split(os.getenv("DEP_TREE_INSTALL_COMMAND", "npm install"))


@dataclass
class BuildConfig:
    """Configuration for a dependency tree build."""
    project_dir: Path = field(default_factory=lambda: Path("."))
    manifest_name: str = "package.json"
    store_dir: str = "node_modules"
    skip_install: bool = False
    install_command: list[str] = field(default_factory=_default_install_command)
    id_base: int = 1001

    @property
    def store_path(self) -> Path:
        return self.project_dir / self.store_dir


NodeKey = tuple[str, "str | None"]


@dataclass
class IdentifierMap:
    """Append-only (name, version) <-> synthetic id mapping.

    Keys are tuples rather than ``name@version`` strings so that names or
    versions containing ``@`` cannot collide.
    """
    base: int = 1001
    ids: dict[NodeKey, int] = field(default_factory=dict)
    keys: dict[int, NodeKey] = field(default_factory=dict)

    @property
    def next_id(self) -> int:
        return self.base + len(self.ids)

    def add(self, name: str, version: str | None) -> int:
        key = (name, version)
        if key not in self.ids:
            node_id = self.next_id
            self.ids[key] = node_id
            self.keys[node_id] = key
        return self.ids[key]

    def get(self, name: str, version: str | None) -> int | None:
        return self.ids.get((name, version))

    def to_dict(self) -> dict[str, int]:
        """Display form keyed by ``name@version``."""
        return {f"{name}@{format_version(version)}": node_id for (name, version), node_id in self.ids.items()}

    def __len__(self) -> int:
        return len(self.ids)


@dataclass
class BuildResult:
    """Everything produced by one run of the pipeline."""
    manifest: Manifest
    forest: list[DependencyNode] = field(default_factory=list)
    id_map: IdentifierMap = field(default_factory=IdentifierMap)
    edges: list[str] = field(default_factory=list)
    mermaid: str = ""
