"""Port: Key-value store — durable ``key -> value`` mapping."""

from abc import ABC, abstractmethod

from yank.domain.models.enums import DeleteOutcome


class KeyValueStorePort(ABC):
    """Contract for loading, querying and mutating stored entries."""

    @abstractmethod
    def load(self) -> None:
        """Read persisted entries into memory (missing storage means empty)."""
        ...

    @abstractmethod
    def list_keys(self) -> list[str]:
        """Return every key, sorted ascending."""
        ...

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the value for *key* or raise ``KeyNotFound``."""
        ...

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Insert or overwrite *key*, then persist."""
        ...

    @abstractmethod
    def delete(self, key: str) -> DeleteOutcome:
        """Remove *key* and persist, or report it was not present."""
        ...

    @abstractmethod
    def persist(self) -> None:
        """Write the full mapping to storage."""
        ...
