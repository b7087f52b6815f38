"""vault help — usage text for each command level."""

from __future__ import annotations

import typer

USAGE = """\
vault [COMMAND] [OPTION...]

Running vault with no command starts the app in service mode. In this mode, the
backup process will be performed periodically in a loop. This is how the system
service manager starts up the app. To run in interactive mode, one of the
commands below must be present.

COMMAND:
    config    View or modify the app configuration
    help      Print this help"""

CONFIG_USAGE = """\
vault config COMMAND [OPTION...]

Running vault with the config command allows you to view and/or modify the app
configuration using one of the subcommands below.

COMMAND:
    adddir    Add a directory to back up
    list      List the configured shares
    help      Print this help"""

ADDDIR_USAGE = """\
vault config adddir --name VALUE --dir VALUE

Calling adddir adds a new directory to backup. The provided name will be used as
the share name, which corresponds to a top-level "folder" in the object store.
The directory provided will be backed up recursively, preserving the file names
and orders under the top-level share."""

# Keyed by the command name Click reports for the failing level.
USAGE_BY_COMMAND = {
    "vault": USAGE,
    "config": CONFIG_USAGE,
    "adddir": ADDDIR_USAGE,
}


def print_usage(command: str = "vault") -> None:
    """Print the usage block for ``command``, falling back to the top level."""
    typer.echo(USAGE_BY_COMMAND.get(command, USAGE))


def show_help() -> None:
    """Print this help."""
    print_usage("vault")


def show_config_help() -> None:
    """Print the config command help."""
    print_usage("config")
