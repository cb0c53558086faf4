"""Actions: the closed set of operations a command can request.

Each action validates itself against a ``Reisbase`` and either returns
a ``Success`` or raises an ``ActionWarning``. Actions never touch the
backing file; persistence is the store's concern.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Iterable

from .errors import (
    EmptyDatabase,
    EntryAlreadyExists,
    EntryDoesntExist,
    InvalidActionArguments,
    RequiredArgumentsNotSpecified,
    UnknownActionRequested,
)
from .store import Reisbase

logger = logging.getLogger(__name__)

Clipboard = Callable[[str], None]
"""Receives a value to copy. Errors it raises are logged, not propagated."""


class Flag(Enum):
    """Optional modifiers attached to a command."""

    FORCE = "-f"
    HELP = "-h"
    CLIPBOARD = "-c"
    DESCRIPTION = "-d"

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> frozenset[Flag]:
        """Map flag tokens to flags, dropping unknown tokens."""
        known = {flag.value: flag for flag in cls}
        return frozenset(known[token] for token in tokens if token in known)

    def __str__(self) -> str:
        return f"{self.value} ({_FLAG_LABELS[self]})"


_FLAG_LABELS = {
    Flag.FORCE: "Force",
    Flag.HELP: "Help",
    Flag.CLIPBOARD: "Copy to Clipboard",
    Flag.DESCRIPTION: "Description",
}


class Operation(Enum):
    """Kind of operation a ``Success`` reports."""

    INSERT = "Insert"
    GET = "Get"
    PUT = "Put"
    DELETE = "Delete"
    GET_ALL = "Get All"
    CLEAR = "Clear"


@dataclass(frozen=True)
class Success:
    """Outcome of an action that completed.

    Attributes:
        operation: Which kind of operation ran.
        message: Line to show the user.
    """

    operation: Operation
    message: str


def insert_message(key: str, value: str) -> str:
    return f"Successfully set the key {key} with the value {value} in the database!"


def delete_message(key: str) -> str:
    return f"Successfully deleted the entry for {key}!"


CLEAR_MESSAGE = "Successfully cleared all database values!"


class Action(ABC):
    """Base class for all actions.

    Subclasses are frozen dataclasses declaring the fields they carry
    (``key``, ``value``, ``flags``) plus the class-level name table
    entries below.
    """

    names: ClassVar[tuple[str, str]]
    display_name: ClassVar[str]
    has_key: ClassVar[bool] = False
    has_value: ClassVar[bool] = False

    flags: frozenset[Flag]

    @abstractmethod
    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        """Run against ``store``.

        Raises:
            ActionWarning: When a business rule blocks the operation.
        """

    def has_flag(self, flag: Flag) -> bool:
        return flag in self.flags


@dataclass(frozen=True)
class Set(Action):
    """Create a new entry. Refuses to overwrite."""

    names = ("s", "set")
    display_name = "Set"
    has_key = True
    has_value = True

    key: str
    value: str
    flags: frozenset[Flag] = frozenset()

    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        old_value = store.get(self.key)
        if old_value is not None:
            raise EntryAlreadyExists(self.key, old_value, self.value)
        store.insert(self.key, self.value)
        return Success(Operation.INSERT, insert_message(self.key, self.value))


@dataclass(frozen=True)
class Get(Action):
    """Read an entry, optionally copying it to the clipboard."""

    names = ("g", "get")
    display_name = "Get"
    has_key = True

    key: str
    flags: frozenset[Flag] = frozenset()

    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        value = store.get(self.key)
        if value is None:
            raise EntryDoesntExist(self.key)
        if self.has_flag(Flag.CLIPBOARD) and clipboard is not None:
            try:
                clipboard(value)
            except Exception as e:
                logger.debug("Could not copy %s to the clipboard: %s", self.key, e)
        return Success(Operation.GET, value)


@dataclass(frozen=True)
class Put(Action):
    """Update an existing entry. Refuses to create."""

    names = ("p", "put")
    display_name = "Put"
    has_key = True
    has_value = True

    key: str
    value: str
    flags: frozenset[Flag] = frozenset()

    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        if not store.exists(self.key):
            raise EntryDoesntExist(self.key, self.value)
        store.insert(self.key, self.value)
        return Success(Operation.PUT, insert_message(self.key, self.value))


@dataclass(frozen=True)
class Del(Action):
    names = ("d", "del")
    display_name = "Delete"
    has_key = True

    key: str
    flags: frozenset[Flag] = frozenset()

    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        if not store.exists(self.key):
            raise EntryDoesntExist(self.key)
        store.delete(self.key)
        return Success(Operation.DELETE, delete_message(self.key))


@dataclass(frozen=True)
class GetAll(Action):
    names = ("ga", "getall")
    display_name = "Get All"

    flags: frozenset[Flag] = frozenset()

    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        dump = store.get_all()
        if dump is None:
            raise EmptyDatabase()
        return Success(Operation.GET_ALL, dump)


@dataclass(frozen=True)
class Clear(Action):
    """Remove every entry. Needs ``Flag.FORCE``.

    An empty store is reported before the missing flag.
    """

    names = ("c", "clr")
    display_name = "Clear"

    flags: frozenset[Flag] = frozenset()

    def execute(self, store: Reisbase, clipboard: Clipboard | None = None) -> Success:
        if store.is_empty():
            raise EmptyDatabase()
        if not self.has_flag(Flag.FORCE):
            raise RequiredArgumentsNotSpecified(self)
        store.clear()
        return Success(Operation.CLEAR, CLEAR_MESSAGE)


ACTIONS: tuple[type[Action], ...] = (Set, Get, Put, Del, GetAll, Clear)

_BY_NAME: dict[str, type[Action]] = {name: action for action in ACTIONS for name in action.names}


def lookup(name: str) -> type[Action]:
    """Resolve a short or long action name to its class.

    Raises:
        UnknownActionRequested: If no action uses ``name``.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownActionRequested(name) from None


def build_action(
    name: str,
    key: str | None = None,
    value: str | None = None,
    flags: Iterable[Flag] = (),
) -> Action:
    """Build the action called ``name``.

    ``key`` and ``value`` are only consulted by actions that carry them.

    Raises:
        UnknownActionRequested: If ``name`` is not in the name table.
        InvalidActionArguments: If a required key or value is missing.
    """
    action_type = lookup(name)
    fields: dict[str, str] = {}
    if action_type.has_key:
        if key is None:
            raise InvalidActionArguments(action_type.display_name)
        fields["key"] = key
    if action_type.has_value:
        if value is None:
            raise InvalidActionArguments(action_type.display_name)
        fields["value"] = value
    return action_type(flags=frozenset(flags), **fields)  # type: ignore[call-arg]
