"""Use Case: Manage Entries.

Put, delete and list operations on the key-value store.
"""

from yank.domain.models.enums import DeleteOutcome
from yank.domain.ports.store_port import KeyValueStorePort


class ManageEntriesUseCase:
    """CRUD over stored entries, persisted via KeyValueStorePort."""

    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store

    def put(self, key: str, value: str) -> None:
        """Store *value* under *key*, overwriting any previous value."""
        self._store.put(key, value)

    def delete(self, key: str) -> DeleteOutcome:
        """Remove *key*; absent keys are reported, not raised."""
        return self._store.delete(key)

    def list_keys(self) -> list[str]:
        """Return all keys in ascending order."""
        return self._store.list_keys()
