"""Pure parsing and filtering of mise task listings."""

from __future__ import annotations

from collections.abc import Sequence

from mise_discover.tasks.types import MONOREPO_MARKER, ROOT_PROJECT, NormalizedTask, RawTask


def split_task_name(name: str) -> tuple[str, str]:
    """Split a qualified task name into ``(project, local_name)``.

    Grammar:
        ``ci:build``               -> (".", "ci:build")
        ``//:ci:build``            -> (".", "ci:build")
        ``//services/api:ci:build`` -> ("services/api", "ci:build")
        ``//services/api``         -> ("services/api", "")

    Only the first colon after the marker ends the project path, so local
    names may contain colons of their own.
    """
    if not name.startswith(MONOREPO_MARKER):
        return ROOT_PROJECT, name

    remainder = name[len(MONOREPO_MARKER):]
    project, sep, local_name = remainder.partition(":")
    if not sep:
        local_name = ""
    return project or ROOT_PROJECT, local_name


def normalize_tasks(raw: Sequence[RawTask]) -> list[NormalizedTask]:
    """Parse raw mise task records, one NormalizedTask per record, in order."""
    normalized: list[NormalizedTask] = []
    for record in raw:
        name = record["name"]
        project, local_name = split_task_name(name)
        normalized.append(
            NormalizedTask(
                project=project,
                task=name,
                local_name=local_name,
                sources=tuple(record.get("sources") or ()),
            )
        )
    return normalized


def filter_by_prefix(tasks: list[NormalizedTask], prefix: str) -> list[NormalizedTask]:
    """Keep tasks whose local name starts with ``prefix``. Empty prefix matches all."""
    if prefix == "":
        return tasks
    return [task for task in tasks if task.local_name.startswith(prefix)]
