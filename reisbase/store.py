"""Reisbase: file-backed store with a fully resident map."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from types import TracebackType

from . import codec
from .errors import classify
from .kv.base import KVStore
from .kv.memory import Memory

logger = logging.getLogger(__name__)


class Reisbase:
    """Key-value store loaded from, and written back to, a text file.

    The file is read once by ``open()`` and overwritten once by
    ``close()``. In between, the in-memory backend is the only source
    of truth; nothing touches the file.

    Use as a context manager so the map is flushed when the command
    ends::

        with Reisbase.open("reis.db") as db:
            db.insert("greeting", "hello")

    Args:
        path: Backing file location.
        backend: Resident map. Defaults to an empty ``Memory``.
    """

    def __init__(self, path: str | os.PathLike[str], backend: KVStore | None = None) -> None:
        self.path = os.fspath(path)
        self._store = backend if backend is not None else Memory()
        self._closed = False

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Reisbase:
        """Load the database at ``path``, creating an empty file if missing.

        Raises:
            ReisFailure: Any I/O error other than a missing file, or
                content that is not valid UTF-8.
        """
        try:
            with open(path, encoding="utf-8", newline="") as f:
                contents = f.read()
        except FileNotFoundError:
            logger.debug("No database at %s; creating an empty one", path)
            contents = ""
            try:
                with open(path, "w", encoding="utf-8") as f:
                    f.write(contents)
            except (OSError, ValueError) as e:
                raise classify(e) from e
        except (OSError, ValueError) as e:
            raise classify(e) from e

        entries = codec.decode(contents)
        logger.debug("Loaded %d entries from %s", len(entries), path)
        return cls(path, Memory(entries))

    # -- Read operations --

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def exists(self, key: str) -> bool:
        return key in self._store

    def is_empty(self) -> bool:
        return len(self._store) == 0

    def count(self) -> int:
        return len(self._store)

    def get_all(self) -> str | None:
        """Encoded dump of every entry, or None when the store is empty."""
        if self.is_empty():
            return None
        return codec.encode(self._store.items())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[str]:
        return iter(self._store.keys())

    # -- Write operations --

    def insert(self, key: str, value: str) -> None:
        """Upsert ``key``. Existence rules are enforced by actions, not here."""
        self._store.set(key, value)

    def delete(self, key: str) -> str | None:
        """Remove ``key`` and return its previous value, if any."""
        return self._store.pop(key)

    def clear(self) -> None:
        self._store.clear()

    # -- Persistence --

    @property
    def closed(self) -> bool:
        return self._closed

    def flush(self) -> None:
        """Overwrite the backing file with the current map.

        Raises:
            ReisFailure: If the file cannot be written.
        """
        contents = codec.encode(self._store.items())
        try:
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(contents)
        except (OSError, ValueError) as e:
            raise classify(e) from e
        logger.debug("Flushed %d entries to %s", len(self._store), self.path)

    def close(self) -> None:
        """Flush once. Subsequent calls do nothing."""
        if self._closed:
            return
        self._closed = True
        self.flush()

    def __enter__(self) -> Reisbase:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Reisbase(path={self.path!r}, entries={len(self._store)})"
