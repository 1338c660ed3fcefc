"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All store and clipboard access goes through the Container (bootstrap.py).

    yank <key>               copy the value stored under <key>
    yank put <key> <value>   store a value
    yank delete <key>        remove a key
    yank ls                  list stored keys
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import click
import typer
from typer.core import TyperGroup

from yank.bootstrap import Container
from yank.config.loader import load_config
from yank.config.models import YankConfig
from yank.domain.errors import NoKeyProvided, YankError
from yank.domain.models.enums import DeleteOutcome
from yank.presentation.cli.formatters import (
    configure_logging,
    error_message,
    info_message,
    plain,
    success_message,
)

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "yank"


class DefaultKeyGroup(TyperGroup):
    """Group that routes ``yank <key>`` to the hidden default command.

    Any first argument that is not a visible subcommand is taken as a key.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        cmd = self.commands.get(args[0]) if args else None
        if cmd is None or cmd.hidden:
            return DEFAULT_COMMAND, self.commands[DEFAULT_COMMAND], args
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="yank",
    help="A simple key-value clipboard manager.",
    cls=DefaultKeyGroup,
    rich_markup_mode="rich",
    no_args_is_help=False,
    add_completion=False,
)


def _container(ctx: typer.Context) -> Container:
    config: YankConfig = ctx.obj
    return Container(config=config)


def _fail(exc: YankError) -> typer.Exit:
    logger.debug("Command failed", exc_info=exc)
    error_message(str(exc))
    return typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """A simple key-value clipboard manager.

    Run [bold]yank <key>[/] to copy a stored value.
    """
    try:
        cfg = load_config(config)
    except YankError as exc:
        raise _fail(exc)

    configure_logging(logging.DEBUG if verbose else cfg.log_level)
    ctx.obj = cfg

    if ctx.invoked_subcommand is None:
        raise _fail(NoKeyProvided())


# ---------------------------------------------------------------------------
# yank <key>
# ---------------------------------------------------------------------------


@app.command(name=DEFAULT_COMMAND, hidden=True)
def yank_key(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Key to yank")],
) -> None:
    """Copy the value stored under KEY to the clipboard."""
    try:
        value = _container(ctx).yank_value().execute(key)
    except YankError as exc:
        raise _fail(exc)

    plain(value)
    success_message("Copied to clipboard!")


# ---------------------------------------------------------------------------
# yank put / delete / ls
# ---------------------------------------------------------------------------


@app.command()
def put(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="The key to store the value under")],
    value: Annotated[str, typer.Argument(help="The value to store")],
) -> None:
    """Store a value under a key."""
    try:
        _container(ctx).manage_entries().put(key, value)
    except YankError as exc:
        raise _fail(exc)

    success_message("Value set successfully!")


@app.command()
def delete(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="The key to delete")],
) -> None:
    """Delete a stored key."""
    try:
        outcome = _container(ctx).manage_entries().delete(key)
    except YankError as exc:
        raise _fail(exc)

    if outcome is DeleteOutcome.NOT_PRESENT:
        info_message(f"Key '{key}' not found")
    else:
        success_message("Value deleted successfully!")


@app.command("ls")
def list_keys(ctx: typer.Context) -> None:
    """List all stored keys."""
    try:
        keys = _container(ctx).manage_entries().list_keys()
    except YankError as exc:
        raise _fail(exc)

    if not keys:
        info_message("No keys stored.")
        return
    for key in keys:
        plain(key)


if __name__ == "__main__":
    app()
