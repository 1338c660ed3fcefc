"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from yank.application.use_cases.manage_entries import ManageEntriesUseCase
from yank.application.use_cases.yank_value import YankValueUseCase
from yank.config.loader import load_config
from yank.config.models import YankConfig
from yank.domain.models.environment import ClipboardEnvironment
from yank.domain.ports.clipboard_port import ClipboardPort
from yank.domain.ports.store_port import KeyValueStorePort
from yank.infrastructure.clipboard.clipboard_writer import ClipboardWriter
from yank.infrastructure.persistence.json_store import JsonStore


class Container:
    """Simple dependency injection container.

    Opens and loads the store eagerly; the clipboard writer is only built
    when a use case needs it.

    Usage::

        container = Container()
        value = container.yank_value().execute("color")
    """

    def __init__(
        self,
        config: YankConfig | None = None,
        *,
        config_path: Path | None = None,
        home: Path | None = None,
        environment: ClipboardEnvironment | None = None,
        clipboard: ClipboardPort | None = None,
    ) -> None:
        self._config = config or load_config(config_path)
        self._environment = environment
        self._clipboard = clipboard

        self._store = JsonStore.open(home=home, data_file=self._config.data_file)
        self._store.load()

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> YankConfig:
        return self._config

    @property
    def store(self) -> KeyValueStorePort:
        return self._store

    @property
    def clipboard(self) -> ClipboardPort:
        if self._clipboard is None:
            self._clipboard = ClipboardWriter(
                self._environment,
                helper_timeout=self._config.helper_timeout,
                settle_delay=self._config.settle_delay,
            )
        return self._clipboard

    # -- Use Case factories --------------------------------------------------

    def yank_value(self) -> YankValueUseCase:
        """Create a use case for copying a stored value."""
        return YankValueUseCase(store=self._store, clipboard=self.clipboard)

    def manage_entries(self) -> ManageEntriesUseCase:
        """Create a use case for put/delete/list."""
        return ManageEntriesUseCase(store=self._store)
