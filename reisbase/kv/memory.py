"""In-memory KV store."""

from typing import Iterable, Mapping

from .base import KVStore


class Memory(KVStore):
    """A memory-backed KV store.

    Not thread-safe; a store is owned by a single command invocation.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self.memory: dict[str, str] = {}
        if entries:
            self.update(entries)

    def get(self, key: str) -> str | None:
        return self.memory.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        self.memory[key] = value

    def update(self, entries: Mapping[str, str]) -> None:
        for key, value in entries.items():
            if not isinstance(value, str):
                raise TypeError(f"Expected str for {key}, got {type(value).__name__}")
        self.memory.update(entries)

    def items(self) -> Iterable[tuple[str, str]]:
        return list(self.memory.items())

    def keys(self) -> Iterable[str]:
        return list(self.memory.keys())

    def __contains__(self, key: str) -> bool:
        return key in self.memory

    def __len__(self) -> int:
        return len(self.memory)

    def pop(self, key: str) -> str | None:
        return self.memory.pop(key, None)

    def clear(self) -> None:
        self.memory.clear()
