"""Enumerations used across the yank domain."""

from enum import Enum


class DeleteOutcome(str, Enum):
    """Result of removing a key from the store."""

    DELETED = "deleted"
    NOT_PRESENT = "not_present"
