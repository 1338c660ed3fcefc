"""Infrastructure layer — external framework adapters."""

from yank.infrastructure.clipboard.clipboard_writer import ClipboardWriter
from yank.infrastructure.persistence.json_store import JsonStore

__all__ = [
    "ClipboardWriter",
    "JsonStore",
]
