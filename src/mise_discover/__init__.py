"""mise-discover: group mise tasks by project for CI job matrices."""

__version__ = "0.1.0"
