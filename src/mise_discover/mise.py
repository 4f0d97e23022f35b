"""mise task source provider."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from mise_discover.exec import run_command
from mise_discover.tasks.types import RawTask

logger = logging.getLogger(__name__)

MISE_TASKS_LS_ARGS = ("tasks", "ls", "--all", "--json")


def parse_mise_output(stdout: str) -> list[RawTask]:
    """Decode ``mise tasks ls --json`` output.

    Raises:
        ValueError: If the output is not a JSON array of task objects
    """
    data = json.loads(stdout)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    for entry in data:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ValueError(f"task entry without a string name: {entry!r}")
    return data


async def list_mise_tasks(*, cwd: Path | None = None, mise_bin: str = "mise") -> list[RawTask]:
    """Run ``mise tasks ls --all --json`` and return the decoded task list.

    Returns an empty list when mise is missing, fails (e.g. no mise.toml), or
    prints something that is not a task list.

    Raises:
        FileNotFoundError: If ``cwd`` is not an existing directory
    """
    try:
        result = await run_command([mise_bin, *MISE_TASKS_LS_ARGS], cwd=cwd, check=False)
    except FileNotFoundError:
        if cwd is not None and not cwd.is_dir():
            raise
        logger.warning("%s not found on PATH, returning empty task list", mise_bin)
        return []

    if result.returncode != 0:
        logger.warning("mise tasks ls failed, returning empty task list")
        logger.debug("mise stderr: %s", result.stderr.strip())
        return []

    try:
        return parse_mise_output(result.stdout)
    except ValueError:
        # json.JSONDecodeError is a ValueError subclass
        logger.warning("Failed to parse mise tasks ls output as JSON")
        return []
