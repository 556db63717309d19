"""Dependency tree builder: expands manifest entries against the package store, marks cycles and missing packages."""

from __future__ import annotations

import logging

from dep_tree.models import DependencyNode, Manifest
from dep_tree.store import PackageStore

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Build dependency trees for the runtime dependencies of a manifest.

    Versions always come from the root manifest. A package that is only
    reached through nested traversal therefore has ``version=None``.

    Expansion is recursive, one frame per tree level, so a non-cyclic chain
    deeper than the interpreter recursion limit raises RecursionError.
    """

    def __init__(self, store: PackageStore, manifest: Manifest):
        self.store = store
        self.manifest = manifest
        self._versions = manifest.all_dependencies

    def build_forest(self) -> list[DependencyNode]:
        """One tree per root runtime dependency, in declaration order."""
        return [self.build_tree(name) for name in self.manifest.dependencies]

    def build_tree(self, name: str, visited: frozenset[str] = frozenset()) -> DependencyNode:
        version = self._versions.get(name)

        if name in visited:
            logger.warning("circular dependency: %s", name)
            return DependencyNode(name=name, version=version, circular=True)

        # Ancestors on this path only; sibling branches get their own set
        path = visited | {name}

        sub_deps = self.store.resolve(name)
        if sub_deps is None:
            logger.warning("missing package: %s", name)
            return DependencyNode(name=name, version=version, missing=True)

        children = [self.build_tree(sub_dep, path) for sub_dep in sub_deps]
        return DependencyNode(name=name, version=version, children=children)
