"""mise-discover CLI - task matrix discovery for CI."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mise_discover import __version__
from mise_discover.actions import in_github_actions, set_output
from mise_discover.config import DiscoverConfig
from mise_discover.logs import configure_logging
from mise_discover.pipeline import projects_json, run_discovery
from mise_discover.tasks import TASK_DELIMITER

logger = logging.getLogger("mise_discover.cli")

PROJECTS_OUTPUT = "projects"

cli = typer.Typer(
    name="mise-discover",
    help="Discover mise tasks and group them by project for CI matrices",
    no_args_is_help=True,
)
console = Console()


def _version_option_callback(value: bool) -> None:
    """Handle eager --version option."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@cli.callback()
def _cli_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show mise-discover version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
) -> None:
    """Discover mise tasks and group them by project for CI matrices."""


def _build_config(
    task_prefix: str | None,
    base_ref: str | None,
    working_directory: Path | None,
) -> DiscoverConfig:
    """Merge CLI options over action inputs from the environment."""
    inputs = DiscoverConfig.from_env()
    return DiscoverConfig(
        task_prefix=inputs.task_prefix if task_prefix is None else task_prefix.strip(),
        base_ref=inputs.base_ref if base_ref is None else base_ref.strip(),
        working_directory=working_directory or inputs.working_directory,
    )


TaskPrefixOption = typer.Option(
    None,
    "--task-prefix",
    help="Only include tasks whose local name starts with this prefix.",
)
BaseRefOption = typer.Option(
    None,
    "--base-ref",
    help="Only include tasks whose sources changed since this git ref.",
)
WorkingDirectoryOption = typer.Option(
    None,
    "--working-directory",
    help="Directory to run mise and git in (defaults to current working directory).",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log subprocess commands.")


@cli.command("run")
def run(
    task_prefix: str | None = TaskPrefixOption,
    base_ref: str | None = BaseRefOption,
    working_directory: Path | None = WorkingDirectoryOption,
    verbose: bool = VerboseOption,
) -> None:
    """Discover tasks and set the `projects` step output."""
    actions = in_github_actions()
    configure_logging(github_actions=actions, verbose=verbose)

    try:
        config = _build_config(task_prefix, base_ref, working_directory)
        groups = asyncio.run(run_discovery(config))
        payload = projects_json(groups)
        set_output(PROJECTS_OUTPUT, payload)
    except Exception as exc:
        logger.error(str(exc) or "An unexpected error occurred")
        raise typer.Exit(1) from exc


@cli.command("ls")
def ls(
    task_prefix: str | None = TaskPrefixOption,
    base_ref: str | None = BaseRefOption,
    working_directory: Path | None = WorkingDirectoryOption,
    as_json: bool = typer.Option(False, "--json", help="Print the projects JSON instead of a table."),
    verbose: bool = VerboseOption,
) -> None:
    """Show the discovered project matrix."""
    configure_logging(github_actions=False, verbose=verbose)

    try:
        config = _build_config(task_prefix, base_ref, working_directory)
        groups = asyncio.run(run_discovery(config))
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] Discovery failed: {e}")
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(projects_json(groups))
        return

    if not groups:
        console.print(f"[yellow]No tasks matching '{config.task_prefix}*'[/yellow]")
        return

    table = Table(title="Discovered projects")
    table.add_column("Project", style="cyan")
    table.add_column("Tasks", justify="right")
    table.add_column("Names")
    for group in groups:
        names = group.tasks.split(TASK_DELIMITER)
        table.add_row(group.project, str(len(names)), "\n".join(names))
    console.print(table)


def main() -> None:
    cli()


if __name__ == "__main__":

    main()
