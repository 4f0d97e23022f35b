"""Pytest configuration and fixtures for mise-discover tests."""
import logging
from pathlib import Path

import pytest

from mise_discover.logs import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging so caplog keeps seeing package records."""
    yield
    log = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.propagate = True
    log.setLevel(logging.NOTSET)


@pytest.fixture
def actions_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Simulate a GitHub Actions step with an empty GITHUB_OUTPUT file."""
    output_file = tmp_path / "github_output"
    output_file.write_text("", encoding="utf-8")
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    return output_file


@pytest.fixture(autouse=True)
def _clear_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests may themselves run inside GitHub Actions."""
    for name in ("GITHUB_ACTIONS", "GITHUB_OUTPUT", "INPUT_TASK-PREFIX", "INPUT_BASE-REF", "INPUT_WORKING-DIRECTORY"):
        monkeypatch.delenv(name, raising=False)
