"""Unit tests for the async command runner."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

from mise_discover.exec import ExecError, run_command


def test_run_command_captures_output(tmp_path: Path) -> None:
    result = asyncio.run(
        run_command([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)
    )
    assert result.returncode == 0
    assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()
    assert result.cwd == tmp_path.resolve()
    assert result.argv[0] == sys.executable


def test_run_command_non_zero_without_check() -> None:
    script = "import sys; sys.stderr.write('bad ref'); sys.exit(128)"
    result = asyncio.run(run_command([sys.executable, "-c", script], check=False))
    assert result.returncode == 128
    assert result.stderr == "bad ref"


def test_run_command_check_raises() -> None:
    script = "import sys; sys.stderr.write('bad ref'); sys.exit(3)"
    with pytest.raises(ExecError, match="command failed \\(3\\)") as excinfo:
        asyncio.run(run_command([sys.executable, "-c", script]))
    assert excinfo.value.result.returncode == 3
    assert "bad ref" in str(excinfo.value)


def test_missing_executable_raises_file_not_found() -> None:
    with pytest.raises(FileNotFoundError):
        asyncio.run(run_command(["mise-discover-no-such-binary"], check=False))
