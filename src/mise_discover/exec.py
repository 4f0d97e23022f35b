"""Async command runners for mise and git invocations."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecResult:
    """Result envelope for subprocess execution."""

    argv: tuple[str, ...]
    cwd: Path
    returncode: int
    stdout: str
    stderr: str


class ExecError(RuntimeError):
    """Raised when a command returns non-zero in check mode."""

    def __init__(self, result: ExecResult):
        rendered = " ".join(result.argv)
        detail = (result.stderr or result.stdout).strip()
        super().__init__(f"command failed ({result.returncode}): {rendered}\n{detail}")
        self.result = result


async def run_command(
    argv: list[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> ExecResult:
    """Run command and return structured result.

    A missing executable surfaces as ``FileNotFoundError`` from the event loop.
    """
    workdir = (cwd or Path.cwd()).resolve()
    logger.debug("exec: %s (cwd=%s)", " ".join(argv), workdir)
    process = await asyncio.create_subprocess_exec(
        *argv,
        cwd=str(workdir),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    result = ExecResult(
        argv=tuple(argv),
        cwd=workdir,
        returncode=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )
    if check and result.returncode != 0:
        raise ExecError(result)
    return result


async def run_git(
    args: list[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> ExecResult:
    """Run git command rooted at ``cwd``."""
    return await run_command(["git", *args], cwd=cwd, check=check)
