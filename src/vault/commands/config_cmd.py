"""vault config — view or modify the app configuration."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.markup import escape

from vault.commands.help import print_usage
from vault.core.config import ConfigStore
from vault.core.errors import ConfigSaveError, ExitCode
from vault.utils.console import console

logger = logging.getLogger(__name__)


def get_store(ctx: typer.Context) -> ConfigStore:
    """The config store the root command loaded for this invocation."""
    store = ctx.find_object(ConfigStore)
    if store is None:
        msg = "No config store attached to the command context"
        raise RuntimeError(msg)
    return store


def config_callback(ctx: typer.Context) -> None:
    """View or modify the app configuration."""
    if ctx.invoked_subcommand is None:
        print_usage("config")
        raise typer.Exit(ExitCode.ERROR)


def adddir(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Option("--name", help="The name of the share to create"),
    ] = "",
    directory: Annotated[
        str,
        typer.Option("--dir", help="The directory to back up to the share"),
    ] = "",
) -> None:
    """Add a directory to back up under a share name."""
    if not name or not directory:
        print_usage("adddir")
        raise typer.Exit(ExitCode.ERROR)

    store = get_store(ctx)
    store.add_share(name, directory)

    try:
        store.save()
    except ConfigSaveError as e:
        logger.error("Failed to save config: %s", e)
        raise typer.Exit(ExitCode.ERROR) from None

    console.print(
        f"[green]✓[/green] Added share [bold]{escape(name)}[/bold] -> {escape(directory)}",
        emoji=False,
        soft_wrap=True,
    )


def list_shares(ctx: typer.Context) -> None:
    """List the configured shares."""
    store = get_store(ctx)

    console.print("=== Shares", markup=False, highlight=False, emoji=False, soft_wrap=True)
    labels = [f"{share.name}:" for share in store.shares]
    width = max((len(label) for label in labels), default=0)
    for label, share in zip(labels, store.shares):
        console.print(
            f"{label:<{width}} {share.dir}",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
