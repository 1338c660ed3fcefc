"""JSON store — implements KeyValueStorePort on a single JSON document.

Entries live in ``~/.yank/data.json``. The whole mapping is loaded at
start-up and rewritten on every mutation (write to temp, then rename).
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from yank.domain.errors import (
    HomeDirNotFound,
    KeyNotFound,
    StoreIOError,
    StoreParseError,
)
from yank.domain.models.enums import DeleteOutcome
from yank.domain.models.store_data import StoreData
from yank.domain.ports.store_port import KeyValueStorePort

logger = logging.getLogger(__name__)

DATA_DIRNAME = ".yank"
DATA_FILENAME = "data.json"


def default_data_file(home: Path | None = None) -> Path:
    """Return ``<home>/.yank/data.json``.

    Raises:
        HomeDirNotFound: *home* was not given and cannot be resolved.
    """
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise HomeDirNotFound() from exc
    return home / DATA_DIRNAME / DATA_FILENAME


class JsonStore(KeyValueStorePort):
    """File-backed ``key -> value`` store.

    Parameters
    ----------
    data_file : Path
        Location of the JSON document. Use :meth:`open` to derive it from
        the home directory and create its parent directory.
    """

    def __init__(self, data_file: Path) -> None:
        self._data_file = data_file
        self._data: dict[str, str] = {}

    @classmethod
    def open(cls, home: Path | None = None, data_file: Path | None = None) -> "JsonStore":
        """Resolve the data file and make sure its directory exists.

        Raises:
            HomeDirNotFound: The home directory cannot be determined.
            StoreIOError: The data directory cannot be created.
        """
        path = data_file or default_data_file(home)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreIOError(exc) from exc
        return cls(path)

    # -- Persistence ---------------------------------------------------------

    def load(self) -> None:
        """Read the data file; a missing file is an empty store."""
        try:
            content = self._data_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No data file at %s, starting empty", self._data_file)
            self._data = {}
            return
        except UnicodeDecodeError as exc:
            raise StoreParseError(exc) from exc
        except OSError as exc:
            raise StoreIOError(exc) from exc

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as exc:
            raise StoreParseError(exc) from exc

        try:
            self._data = StoreData.model_validate(raw).root
        except ValidationError as exc:
            detail = "; ".join(err["msg"] for err in exc.errors())
            raise StoreParseError(detail) from exc

        logger.debug("Loaded %d entries from %s", len(self._data), self._data_file)

    def persist(self) -> None:
        """Write the full mapping atomically (write to temp, then rename)."""
        content = json.dumps(self._data, indent=2, ensure_ascii=False, sort_keys=True)
        directory = self._data_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(
                dir=directory,
                prefix=f".{DATA_FILENAME}.",
                suffix=".tmp",
            )
            try:
                with open(tmp_fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                    fh.write("\n")
                    fh.flush()
                    os.fsync(fh.fileno())
                Path(tmp_path).replace(self._data_file)
            except Exception:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StoreIOError(exc) from exc

        logger.debug("Persisted %d entries to %s", len(self._data), self._data_file)

    # -- Queries -------------------------------------------------------------

    def list_keys(self) -> list[str]:
        return sorted(self._data)

    def get(self, key: str) -> str:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFound(key) from None

    # -- Mutations -----------------------------------------------------------

    def put(self, key: str, value: str) -> None:
        """Insert or overwrite *key* and flush to disk before returning.

        Raises:
            StoreIOError: *key* or *value* cannot be written as UTF-8, or
                the write itself failed.
        """
        for text in (key, value):
            try:
                text.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise StoreIOError(f"cannot store {text!r}: not valid UTF-8") from exc
        self._data[key] = value
        self.persist()

    def delete(self, key: str) -> DeleteOutcome:
        """Remove *key*; an absent key leaves the file untouched."""
        if key not in self._data:
            logger.debug("Key %r not present, nothing to delete", key)
            return DeleteOutcome.NOT_PRESENT
        del self._data[key]
        self.persist()
        return DeleteOutcome.DELETED

    # -- Introspection -------------------------------------------------------

    @property
    def data_file(self) -> Path:
        """Absolute path to the JSON data file."""
        return self._data_file

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
