"""GitHub Actions runner I/O: inputs, outputs and workflow commands."""

from __future__ import annotations

import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO


def _env(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Read an action input; unset inputs read as empty string."""
    return _env(environ).get(input_env_name(name), "").strip()


def in_github_actions(environ: Mapping[str, str] | None = None) -> bool:
    return _env(environ).get("GITHUB_ACTIONS") == "true"


def escape_data(message: str) -> str:
    """Escape a workflow command payload."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str, stream: TextIO | None = None) -> None:
    """Print ``::command::message`` for the runner to pick up."""
    out = stream or sys.stdout
    out.write(f"::{command}::{escape_data(message)}\n")
    out.flush()


def set_output(
    name: str,
    value: str,
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Set a step output.

    Appends the heredoc form to ``$GITHUB_OUTPUT``; without it, falls back to
    the legacy ``set-output`` command so local runs still show the value.
    """
    output_file = _env(environ).get("GITHUB_OUTPUT", "").strip()
    if not output_file:
        out = stream or sys.stdout
        out.write(f"::set-output name={name}::{escape_data(value)}\n")
        out.flush()
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"output {name!r} collides with generated delimiter")
    with Path(output_file).open("a", encoding="utf-8") as handle:
        handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
