"""Source-based change detection using git diff.

Tasks whose declared ``sources`` globs did not change since a base ref are
dropped. Every ambiguous outcome keeps the task (fail-open).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from pathlib import Path

from mise_discover.exec import run_git
from mise_discover.tasks.types import NormalizedTask

logger = logging.getLogger(__name__)

DiffQuiet = Callable[[str, Sequence[str]], Awaitable[int]]


class ChangeDecision(str, Enum):
    """Per-task outcome of the change filter."""

    NO_SOURCES = "no_sources"
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    QUERY_FAILED = "query_failed"

    @property
    def keeps_task(self) -> bool:
        return self is not ChangeDecision.UNCHANGED


async def git_diff_quiet(base_ref: str, pathspecs: Sequence[str], *, cwd: Path | None = None) -> int:
    """Return the exit code of ``git diff --quiet <base_ref> HEAD -- <pathspecs>``.

    0 means no matching change, 1 means changed, anything else is an error.
    """
    args = ["diff", "--quiet", base_ref, "HEAD", "--", *(f":(glob){spec}" for spec in pathspecs)]
    result = await run_git(args, cwd=cwd, check=False)
    return result.returncode


def build_pathspecs(task: NormalizedTask) -> list[str]:
    """Localize source globs to the task's project subtree."""
    if task.is_root:
        return list(task.sources)
    return [f"{task.project}/{glob}" for glob in task.sources]


async def decide_task(task: NormalizedTask, base_ref: str, diff_quiet: DiffQuiet) -> ChangeDecision:
    """Run at most one diff query for ``task`` and classify the result."""
    if not task.sources:
        return ChangeDecision.NO_SOURCES
    try:
        code = await diff_quiet(base_ref, build_pathspecs(task))
    except Exception:
        logger.debug("diff query raised for %s", task.task, exc_info=True)
        return ChangeDecision.QUERY_FAILED
    # 1 = changes found; any other non-zero code is an error and kept as well
    return ChangeDecision.UNCHANGED if code == 0 else ChangeDecision.CHANGED


async def filter_by_changed_sources(
    tasks: Sequence[NormalizedTask],
    base_ref: str,
    *,
    diff_quiet: DiffQuiet = git_diff_quiet,
    log: logging.Logger | None = None,
) -> list[NormalizedTask]:
    """Keep tasks without sources or whose sources changed since ``base_ref``.

    Queries run one at a time in input order.
    """
    log = log or logger
    log.info("Filtering tasks by changes since %s...", base_ref)

    kept: list[NormalizedTask] = []
    for task in tasks:
        decision = await decide_task(task, base_ref, diff_quiet)
        if decision is ChangeDecision.NO_SOURCES:
            log.info("  %s: no sources, included", task.task)
        elif decision is ChangeDecision.UNCHANGED:
            log.info("  %s: unchanged, skipped", task.task)
        elif decision is ChangeDecision.CHANGED:
            log.info("  %s: changed, included", task.task)
        else:
            log.warning("  %s: git diff failed, included (fail-open)", task.task)
        if decision.keeps_task:
            kept.append(task)
    return kept
