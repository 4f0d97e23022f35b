"""Discovery orchestration: list, normalize, filter, group."""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence

from mise_discover.changes import DiffQuiet, filter_by_changed_sources, git_diff_quiet
from mise_discover.config import DiscoverConfig
from mise_discover.mise import list_mise_tasks
from mise_discover.tasks import (
    NormalizedTask,
    ProjectGroup,
    RawTask,
    filter_by_prefix,
    group_by_project,
    normalize_tasks,
    projects_json,
)

logger = logging.getLogger(__name__)

__all__ = ["discover", "drop_degenerate", "projects_json", "run_discovery"]


def drop_degenerate(tasks: list[NormalizedTask]) -> list[NormalizedTask]:
    """Exclude `//path` names that carry no task, warning for each."""
    kept: list[NormalizedTask] = []
    for task in tasks:
        if task.is_degenerate:
            logger.warning("  %s: no task name after project path, excluded", task.task)
            continue
        kept.append(task)
    return kept


async def discover(
    raw: Sequence[RawTask],
    *,
    prefix: str = "",
    base_ref: str = "",
    diff_quiet: DiffQuiet = git_diff_quiet,
) -> list[ProjectGroup]:
    """Run the discovery stages over an already-fetched task listing."""
    tasks = drop_degenerate(normalize_tasks(raw))
    matched = filter_by_prefix(tasks, prefix)
    if base_ref:
        matched = await filter_by_changed_sources(matched, base_ref, diff_quiet=diff_quiet)
    return group_by_project(matched)


async def run_discovery(config: DiscoverConfig) -> list[ProjectGroup]:
    """List mise tasks in the configured directory and discover project groups.

    Raises:
        RuntimeError: If the configured working directory does not exist
    """
    workdir = config.working_directory
    if workdir is not None and not workdir.is_dir():
        raise RuntimeError(f"working directory does not exist: {workdir}")

    raw = await list_mise_tasks(cwd=workdir, mise_bin=config.mise_bin)
    groups = await discover(
        raw,
        prefix=config.task_prefix,
        base_ref=config.base_ref,
        diff_quiet=functools.partial(git_diff_quiet, cwd=workdir),
    )

    logger.info("Discovered %d project(s) matching '%s*':", len(groups), config.task_prefix)
    for group in groups:
        logger.info("  %s: %s", group.project, group.tasks)
    return groups
