"""Clipboard writer — implements ClipboardPort with ordered fallbacks.

Strategies are tried one after another, first success wins:

1. ``wl-copy`` when a Wayland session is active;
2. ``copyq``, ``xclip`` then ``xsel`` when an X11 display is set;
3. ``pbcopy`` on macOS;
4. ``pyperclip`` everywhere, as the last resort.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from yank.domain.errors import ClipboardUnavailable, StrategyFailed
from yank.domain.models.environment import ClipboardEnvironment
from yank.domain.ports.clipboard_port import ClipboardPort, ClipboardStrategy
from yank.infrastructure.clipboard.strategies import (
    DEFAULT_HELPER_TIMEOUT,
    DEFAULT_SETTLE_DELAY,
    PyperclipStrategy,
    macos_strategies,
    wayland_strategies,
    x11_strategies,
)

logger = logging.getLogger(__name__)


def build_strategies(
    environment: ClipboardEnvironment,
    *,
    helper_timeout: float = DEFAULT_HELPER_TIMEOUT,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
) -> list[ClipboardStrategy]:
    """Return the strategy chain for *environment*, in trial order."""
    strategies: list[ClipboardStrategy] = []
    if environment.wayland:
        strategies.extend(wayland_strategies(helper_timeout))
    if environment.x11:
        strategies.extend(x11_strategies(helper_timeout))
    if environment.is_macos:
        strategies.extend(macos_strategies(helper_timeout))
    strategies.append(PyperclipStrategy(settle_delay))
    return strategies


class ClipboardWriter(ClipboardPort):
    """Clipboard adapter trying each strategy once, in order.

    Parameters
    ----------
    environment : ClipboardEnvironment | None
        Session descriptor; detected from the process when omitted.
    strategies : Sequence[ClipboardStrategy] | None
        Explicit chain, bypassing environment detection.
    """

    def __init__(
        self,
        environment: ClipboardEnvironment | None = None,
        strategies: Sequence[ClipboardStrategy] | None = None,
        *,
        helper_timeout: float = DEFAULT_HELPER_TIMEOUT,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
    ) -> None:
        if strategies is None:
            strategies = build_strategies(
                environment or ClipboardEnvironment.detect(),
                helper_timeout=helper_timeout,
                settle_delay=settle_delay,
            )
        self._strategies = list(strategies)

    @property
    def strategies(self) -> list[ClipboardStrategy]:
        return list(self._strategies)

    def copy(self, text: str) -> None:
        """Copy *text* with the first strategy that succeeds."""
        for strategy in self._strategies:
            try:
                strategy.copy(text)
            except StrategyFailed as exc:
                logger.debug("Clipboard strategy %s failed: %s", strategy.name, exc)
                continue
            logger.debug("Copied %d characters with %s", len(text), strategy.name)
            return
        raise ClipboardUnavailable()
