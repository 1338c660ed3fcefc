"""Rich output helpers for the CLI.

Everything the CLI prints goes through here: plain values on stdout,
status lines with a little colour, errors and log records on stderr.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def plain(text: str) -> None:
    """Print *text* exactly as stored.

    Rich would still strip control characters from it, so this bypasses
    the console.
    """
    typer.echo(text)


def success_message(message: str) -> None:
    """Print a green confirmation line."""
    console.print(f"[green]{escape(message)}[/]", highlight=False, soft_wrap=True)


def info_message(message: str) -> None:
    """Print a yellow informational line."""
    console.print(f"[yellow]{escape(message)}[/]", highlight=False, soft_wrap=True)


def error_message(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/]", highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(level: int | str) -> None:
    """Send ``yank.*`` log records to stderr through Rich."""
    logger = logging.getLogger("yank")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=err_console, show_time=False, show_path=False)
    )
    logger.setLevel(level)
