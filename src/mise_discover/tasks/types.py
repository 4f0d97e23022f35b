"""Task discovery types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ROOT_PROJECT = "."
MONOREPO_MARKER = "//"

# Raw task object from `mise tasks ls --all --json`. Only `name` and
# `sources` are read; description, outputs, depends etc. ride along.
RawTask = dict[str, Any]


@dataclass(frozen=True)
class NormalizedTask:
    """Task with its monorepo project split out of the qualified name."""

    project: str
    task: str
    local_name: str
    sources: tuple[str, ...] = ()

    @property
    def is_root(self) -> bool:
        return self.project == ROOT_PROJECT

    @property
    def is_degenerate(self) -> bool:
        """True for `//path` names that carry no task after the project path."""
        return self.task.startswith(MONOREPO_MARKER) and self.local_name == ""


@dataclass(frozen=True)
class ProjectGroup:
    """Tasks of one project, joined for a single matrix entry."""

    project: str
    tasks: str

    def to_dict(self) -> dict[str, str]:
        return {"project": self.project, "tasks": self.tasks}
