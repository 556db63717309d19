"""dep-tree: reconstruct and draw the installed dependency tree of a package.json project."""

__version__ = "0.1.0"
