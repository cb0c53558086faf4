"""Abstract KV store interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping


class KVStore(ABC):
    """Key-value store operating on strings only.

    Persistence is handled at higher layers (e.g., Reisbase).
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get value for key, or None if not found."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set value for key."""

    @abstractmethod
    def update(self, entries: Mapping[str, str]) -> None:
        """Set multiple key-value pairs."""

    @abstractmethod
    def items(self) -> Iterable[tuple[str, str]]:
        """Iterate over all key-value pairs."""

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """Iterate over all keys."""

    @abstractmethod
    def __contains__(self, key: str) -> bool:
        """Check if key exists in store."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries."""

    @abstractmethod
    def pop(self, key: str) -> str | None:
        """Remove a key, returning its value if it was present."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all items from the store."""
