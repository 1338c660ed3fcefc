"""Concrete clipboard strategies: external helper processes and pyperclip."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Sequence

import pyperclip

from yank.domain.errors import StrategyFailed
from yank.domain.ports.clipboard_port import ClipboardStrategy

logger = logging.getLogger(__name__)

DEFAULT_HELPER_TIMEOUT = 5.0
DEFAULT_SETTLE_DELAY = 0.1


class SubprocessStrategy(ClipboardStrategy):
    """Run an external clipboard helper such as ``xclip`` or ``pbcopy``.

    The text is piped to the helper's standard input, or appended as the
    last command-line argument when *pass_as_argument* is set. Helper
    output is discarded: tools like ``wl-copy`` and ``xclip`` fork a
    process that keeps serving the selection, and it must not hold our
    pipes open.
    """

    def __init__(
        self,
        name: str,
        command: Sequence[str],
        *,
        pass_as_argument: bool = False,
        timeout: float = DEFAULT_HELPER_TIMEOUT,
    ) -> None:
        self.name = name
        self.command = list(command)
        self.pass_as_argument = pass_as_argument
        self.timeout = timeout

    def copy(self, text: str) -> None:
        if self.pass_as_argument:
            cmd = [*self.command, text]
            stdin_bytes = None
        else:
            cmd = self.command
            stdin_bytes = text.encode("utf-8")

        try:
            subprocess.run(
                cmd,
                input=stdin_bytes,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise StrategyFailed(f"{self.command[0]} is not installed") from exc
        except subprocess.CalledProcessError as exc:
            raise StrategyFailed(
                f"{self.command[0]} exited with status {exc.returncode}"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise StrategyFailed(f"{self.command[0]} timed out") from exc
        except OSError as exc:
            raise StrategyFailed(f"{self.command[0]} could not be started: {exc}") from exc

    def __repr__(self) -> str:
        return f"SubprocessStrategy({self.name!r}, {self.command!r})"


class PyperclipStrategy(ClipboardStrategy):
    """Set the clipboard through ``pyperclip``.

    Only Windows goes through a native API in-process. On macOS and Linux
    pyperclip itself runs ``pbcopy``, ``wl-copy``, ``xclip`` or ``xsel``
    (or a Qt/GTK binding when one is importable), so on a machine with
    none of those helpers this strategy fails too.

    After copying, waits *settle_delay* seconds so a clipboard manager
    can take ownership of the text before the process exits.
    """

    name = "pyperclip"

    def __init__(self, settle_delay: float = DEFAULT_SETTLE_DELAY) -> None:
        self.settle_delay = settle_delay

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise StrategyFailed(f"pyperclip: {exc}") from exc
        if self.settle_delay > 0:
            time.sleep(self.settle_delay)

    def __repr__(self) -> str:
        return f"PyperclipStrategy(settle_delay={self.settle_delay!r})"


# -- Known helpers -----------------------------------------------------------


def wayland_strategies(timeout: float = DEFAULT_HELPER_TIMEOUT) -> list[ClipboardStrategy]:
    return [SubprocessStrategy("wl-copy", ["wl-copy"], timeout=timeout)]


def x11_strategies(timeout: float = DEFAULT_HELPER_TIMEOUT) -> list[ClipboardStrategy]:
    return [
        SubprocessStrategy("copyq", ["copyq", "copy"], pass_as_argument=True, timeout=timeout),
        SubprocessStrategy("xclip", ["xclip", "-selection", "clipboard"], timeout=timeout),
        SubprocessStrategy("xsel", ["xsel", "--clipboard", "--input"], timeout=timeout),
    ]


def macos_strategies(timeout: float = DEFAULT_HELPER_TIMEOUT) -> list[ClipboardStrategy]:
    return [SubprocessStrategy("pbcopy", ["pbcopy"], timeout=timeout)]
