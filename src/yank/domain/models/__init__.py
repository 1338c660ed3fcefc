"""Domain models — public API."""

from yank.domain.models.enums import DeleteOutcome
from yank.domain.models.environment import ClipboardEnvironment
from yank.domain.models.store_data import StoreData

__all__ = [
    "ClipboardEnvironment",
    "DeleteOutcome",
    "StoreData",
]
