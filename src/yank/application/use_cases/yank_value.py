"""Use Case: Yank a Value.

Looks a key up in the store and copies its value to the system clipboard
through an injected ClipboardPort.
"""

from yank.domain.ports.clipboard_port import ClipboardPort
from yank.domain.ports.store_port import KeyValueStorePort


class YankValueUseCase:
    """Fetch a stored value and copy it to the clipboard."""

    def __init__(self, store: KeyValueStorePort, clipboard: ClipboardPort) -> None:
        self._store = store
        self._clipboard = clipboard

    def execute(self, key: str) -> str:
        """Copy the value stored under *key*.

        Args:
            key: Exact key to look up.

        Returns:
            The value that was copied.

        Raises:
            KeyNotFound: Nothing is stored under *key*.
            ClipboardUnavailable: No clipboard strategy succeeded.
        """
        value = self._store.get(key)
        self._clipboard.copy(value)
        return value
