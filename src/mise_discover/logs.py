"""Logging setup for console and GitHub Actions runs."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from mise_discover.actions import issue_command

PACKAGE_LOGGER = "mise_discover"

_ANNOTATIONS = {
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class ActionsAnnotationHandler(logging.Handler):
    """Write records to the runner log.

    DEBUG/INFO print as plain lines, WARNING and above become
    ``::warning::`` / ``::error::`` workflow annotations.
    """

    def __init__(self, stream: TextIO | None = None):
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            out = self.stream or sys.stdout
            if record.levelno == logging.DEBUG:
                issue_command("debug", message, stream=out)
            elif record.levelno >= logging.WARNING:
                command = _ANNOTATIONS.get(record.levelno, "error")
                issue_command(command, message, stream=out)
            else:
                out.write(message + "\n")
                out.flush()
        except Exception:
            self.handleError(record)


def configure_logging(*, github_actions: bool, verbose: bool = False) -> logging.Logger:
    """Install a single handler on the package logger."""
    log = logging.getLogger(PACKAGE_LOGGER)
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    log.propagate = False
    for handler in list(log.handlers):
        log.removeHandler(handler)

    handler: logging.Handler
    if github_actions:
        handler = ActionsAnnotationHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
    log.addHandler(handler)
    return log
