"""Confirmation-and-retry for recoverable warnings."""

from __future__ import annotations

import logging
from typing import Callable

from .actions import Action, Clear, Clipboard, Flag, Put, Success
from .errors import (
    ActionWarning,
    EntryAlreadyExists,
    InputUnavailable,
    OperationCanceled,
    RequiredArgumentsNotSpecified,
)
from .store import Reisbase

logger = logging.getLogger(__name__)

THIS_ACTION_IS_PERMANENT = "This action is permanent! Do you want to continue? (Y/n)"

Confirm = Callable[[str], bool]
"""Shows a prompt and returns True if the user agreed."""


def key_already_exists_prompt(key: str, old_value: str) -> str:
    return (
        f"The key {key} already exists with the value {old_value}. "
        "Do you want to replace it? (Y/n)"
    )


def is_affirmative(response: str) -> bool:
    return response[:1].lower() == "y"


def confirm(
    prompt: str,
    *,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] = print,
) -> bool:
    """Ask a yes/no question on the console.

    ``read`` defaults to ``input``. End of input is an empty answer,
    i.e. a refusal.

    Raises:
        InputUnavailable: If reading the answer fails.
    """
    write(prompt)
    try:
        response = read() if read is not None else input()
    except EOFError:
        return False
    except OSError as e:
        logger.error("%s", e)
        raise InputUnavailable(e) from e
    return is_affirmative(response)


def follow_up(warning: ActionWarning) -> tuple[str, Action] | None:
    """The prompt and action that would resolve ``warning``, if any.

    ``EmptyDatabase`` and ``EntryDoesntExist`` have no follow-up.
    """
    if isinstance(warning, EntryAlreadyExists):
        return (
            key_already_exists_prompt(warning.key, warning.old_value),
            Put(warning.key, warning.new_value),
        )
    if isinstance(warning, RequiredArgumentsNotSpecified) and isinstance(warning.operation, Clear):
        return THIS_ACTION_IS_PERMANENT, Clear(flags=frozenset({Flag.FORCE}))
    return None


def execute(
    action: Action,
    store: Reisbase,
    *,
    confirm: Confirm = confirm,
    clipboard: Clipboard | None = None,
) -> Success:
    """Execute ``action``, offering one confirmed retry on recoverable warnings.

    Raises:
        ActionWarning: A terminal warning, or any warning raised by the
            retried action.
        OperationCanceled: If the user declined the confirmation, or
            ``InputUnavailable`` if the answer could not be read.
    """
    retried = False
    while True:
        try:
            return action.execute(store, clipboard)
        except ActionWarning as warning:
            resolution = None if retried else follow_up(warning)
            if resolution is None:
                raise
            prompt, action = resolution
            logger.debug("Asking to resolve %s with %r", type(warning).__name__, action)
            if not confirm(prompt):
                raise OperationCanceled() from warning
            retried = True
