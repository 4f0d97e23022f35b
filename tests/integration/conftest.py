"""Fixtures building throwaway git repositories for integration tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def _write(root: Path, files: dict[str, str]) -> None:
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_repo(tmp_path: Path):
    """Create a repo with two commits; return (repo, base_sha).

    When ``mise_toml`` is given it is committed with the initial files.
    """

    def _make(
        files: dict[str, str],
        modified: dict[str, str],
        mise_toml: str | None = None,
    ) -> tuple[Path, str]:
        repo = tmp_path / "repo"
        repo.mkdir()
        _git(repo, "init")
        _git(repo, "config", "user.email", "test@example.com")
        _git(repo, "config", "user.name", "Test User")

        if mise_toml is not None:
            files = {"mise.toml": mise_toml, **files}
        _write(repo, files)
        _git(repo, "add", "-A")
        _git(repo, "commit", "-m", "initial")
        base = _git(repo, "rev-parse", "HEAD")

        if modified:
            _write(repo, modified)
            _git(repo, "add", "-A")
            _git(repo, "commit", "-m", "change")
        return repo, base

    return _make


@pytest.fixture
def mise_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Trust fixture configs and keep mise from reading configs above tmp_path."""
    monkeypatch.setenv("MISE_YES", "1")
    monkeypatch.setenv("MISE_EXPERIMENTAL", "1")
    monkeypatch.setenv("MISE_TRUSTED_CONFIG_PATHS", str(tmp_path))
    monkeypatch.setenv("MISE_CEILING_PATHS", str(tmp_path))
