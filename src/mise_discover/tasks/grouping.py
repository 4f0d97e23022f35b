"""Group discovered tasks into per-project matrix entries."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from mise_discover.tasks.types import NormalizedTask, ProjectGroup

TASK_DELIMITER = " ::: "


def group_by_project(tasks: Iterable[NormalizedTask]) -> list[ProjectGroup]:
    """Group tasks by project in order of first appearance."""
    by_project: dict[str, list[str]] = {}
    for task in tasks:
        by_project.setdefault(task.project, []).append(task.task)
    return [
        ProjectGroup(project=project, tasks=TASK_DELIMITER.join(names))
        for project, names in by_project.items()
    ]


def projects_json(groups: Sequence[ProjectGroup]) -> str:
    """Serialize groups in the compact form consumed by `fromJSON` in workflows."""
    return json.dumps(
        [group.to_dict() for group in groups],
        separators=(",", ":"),
        ensure_ascii=False,
    )
