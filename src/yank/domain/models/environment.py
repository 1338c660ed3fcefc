"""Clipboard environment descriptor.

Captures the handful of process signals that decide which clipboard
helpers are worth trying. The writer receives one of these instead of
reading ``os.environ`` itself, so every desktop setup can be simulated.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

WAYLAND_ENV_VAR = "WAYLAND_DISPLAY"
X11_ENV_VAR = "DISPLAY"


@dataclass(frozen=True)
class ClipboardEnvironment:
    """Which desktop session the current process runs under.

    Attributes:
        wayland: A Wayland compositor session is active.
        x11: An X11 display is reachable.
        platform: ``sys.platform`` style identifier (``linux``, ``darwin``…).
    """

    wayland: bool = False
    x11: bool = False
    platform: str = "linux"

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"

    @classmethod
    def detect(
        cls,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> "ClipboardEnvironment":
        """Build a descriptor from the process environment.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            platform: Platform string to use instead of ``sys.platform``.
        """
        env = os.environ if environ is None else environ
        return cls(
            wayland=bool(env.get(WAYLAND_ENV_VAR)),
            x11=bool(env.get(X11_ENV_VAR)),
            platform=platform or sys.platform,
        )
