"""Discovery inputs.

Values come from CLI options or, inside GitHub Actions, from the
``INPUT_*`` environment variables the runner derives from ``action.yml``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mise_discover.actions import get_input

TASK_PREFIX_INPUT = "task-prefix"
BASE_REF_INPUT = "base-ref"
WORKING_DIRECTORY_INPUT = "working-directory"


@dataclass(frozen=True)
class DiscoverConfig:
    """Inputs for one discovery run."""

    task_prefix: str = ""  # empty matches every task
    base_ref: str = ""  # empty skips change filtering
    working_directory: Path | None = None
    mise_bin: str = "mise"

    @property
    def change_filtering(self) -> bool:
        return bool(self.base_ref)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DiscoverConfig:
        """Build config from action inputs."""
        workdir = get_input(WORKING_DIRECTORY_INPUT, environ)
        return cls(
            task_prefix=get_input(TASK_PREFIX_INPUT, environ),
            base_ref=get_input(BASE_REF_INPUT, environ),
            working_directory=Path(workdir) if workdir else None,
        )
