"""vault CLI — periodic directory backups."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Annotated

import click
import typer
from rich.markup import escape

from vault import __version__
from vault.core.config import ConfigStore
from vault.core.errors import ConfigLoadError, ExitCode
from vault.utils.console import err_console, setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="vault",
    help="Back up directories to an object store, interactively or as a service.",
    add_completion=False,
)

# Sub-command groups
config_app = typer.Typer(help="View or modify the app configuration")

app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vault {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Show debug logging"),
    ] = False,
) -> None:
    """Back up directories to an object store.

    With no command, vault runs in service mode.
    """
    setup_logging(verbose)

    if ctx.obj is None:
        ctx.obj = ConfigStore.default()
    store: ConfigStore = ctx.obj

    # Nothing runs against a config that failed to load
    try:
        store.load()
    except ConfigLoadError as e:
        err_console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.ERROR) from None

    logger.debug("Loaded configuration from %s", store.path)

    if ctx.invoked_subcommand is None:
        raise typer.Exit(run_service(store))


# Import and register commands
from vault.commands.config_cmd import adddir, config_callback, list_shares  # noqa: E402
from vault.commands.help import print_usage, show_config_help, show_help  # noqa: E402
from vault.commands.service import run_service  # noqa: E402

# Register top-level commands
app.command(name="help")(show_help)

# Register sub-commands
config_app.callback(invoke_without_command=True)(config_callback)
config_app.command(name="adddir")(adddir)
config_app.command(name="list")(list_shares)
config_app.command(name="help")(show_config_help)


def deepest_command(command: click.Command, argv: Sequence[str]) -> str:
    """Name of the deepest registered command that ``argv`` reaches.

    Options are skipped; the walk stops at the first word that isn't a
    subcommand of the current group.
    """
    name = "vault"
    for token in argv:
        if token.startswith("-"):
            continue
        if not isinstance(command, click.Group):
            break
        sub = command.commands.get(token)
        if sub is None:
            break
        command, name = sub, token
    return name


def run(argv: Sequence[str], store: ConfigStore | None = None) -> int:
    """Run one vault command and return its exit code.

    Usage errors print the usage block of the command that rejected the
    arguments instead of a traceback.
    """
    command = typer.main.get_command(app)
    try:
        rv = command.main(
            args=list(argv),
            prog_name="vault",
            obj=store,
            standalone_mode=False,
        )
    except click.UsageError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.format_message())}")
        print_usage(deepest_command(command, argv))
        return ExitCode.ERROR
    except click.Abort:
        err_console.print("[yellow]Aborted[/yellow]")
        return ExitCode.ERROR

    if isinstance(rv, int):
        return rv
    return ExitCode.OK


def main() -> None:
    """Console script entry point."""
    sys.exit(run(sys.argv[1:]))
