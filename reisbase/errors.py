"""reisbase error types.

Two disjoint families:

``ReisFailure``
    I/O or structural faults. They abort the command and are never
    retried.

``ActionWarning``
    Business-rule violations raised while executing an action. Some of
    them can be resolved by asking the user for confirmation.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .actions import Action


# -- Failures --


class ReisFailure(Exception):
    """Base class for I/O and structural failures.

    Attributes:
        message: Human-readable explanation shown to the user.
        error: The underlying exception, kept for diagnostics.
    """

    default_message = "An unexpected error occurred! Please report this error."

    def __init__(self, message: str | None = None, error: BaseException | None = None) -> None:
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"Error: {self.message}"


class CorruptedDatabase(ReisFailure):
    default_message = (
        "Invalid data was read from your database! It may be corrupt, "
        "or an invalid value was written to it externally!"
    )


class DatabaseNotFound(ReisFailure):
    default_message = "Database has not been created or could not be found!"


class DatabaseTooLarge(ReisFailure):
    default_message = "The database has a file size larger than what is supported!"


class InvalidDatabaseName(ReisFailure):
    default_message = "The database filename exceeded the filename length limit."


class InvalidInput(ReisFailure):
    default_message = "Invalid parameters were passed to the operation!"


class InvalidPlatformOperation(ReisFailure):
    default_message = "An operation occurred which is invalid in this platform!"


class PermissionDenied(ReisFailure):
    default_message = "Reisbase doesn't have permission to access the database!"


class OutOfSpace(ReisFailure):
    default_message = "There is no space left to write the database!"


class UnknownActionRequested(ReisFailure):
    default_message = "Unknown action requested!"

    def __init__(self, action: str, error: BaseException | None = None) -> None:
        self.action = action
        super().__init__(f"Unknown action requested: {action!r}!", error)


class InvalidActionArguments(ReisFailure):
    default_message = "Invalid arguments were passed for the action!"

    def __init__(self, action_name: str, error: BaseException | None = None) -> None:
        self.action_name = action_name
        super().__init__(f"Invalid arguments were passed for the {action_name} action!", error)


class DefaultFailure(ReisFailure):
    pass


_ERRNO_FAILURES: dict[int, type[ReisFailure]] = {
    errno.ENOENT: DatabaseNotFound,
    errno.EACCES: PermissionDenied,
    errno.EPERM: PermissionDenied,
    errno.EROFS: PermissionDenied,
    errno.ENOSPC: OutOfSpace,
    errno.EFBIG: DatabaseTooLarge,
    errno.ENAMETOOLONG: InvalidDatabaseName,
    errno.EINVAL: InvalidInput,
    errno.ENOTSUP: InvalidPlatformOperation,
    errno.EOPNOTSUPP: InvalidPlatformOperation,
}
if hasattr(errno, "EDQUOT"):
    _ERRNO_FAILURES[errno.EDQUOT] = OutOfSpace


def classify(error: BaseException) -> ReisFailure:
    """Map a raw exception onto the matching ``ReisFailure`` kind.

    Undecodable file content is corruption; any other ``ValueError``
    (e.g. a path with a NUL byte) is invalid input.
    """
    if isinstance(error, ReisFailure):
        return error
    if isinstance(error, UnicodeDecodeError):
        return CorruptedDatabase(error=error)
    if isinstance(error, ValueError):
        return InvalidInput(error=error)
    if isinstance(error, FileNotFoundError):
        return DatabaseNotFound(error=error)
    if isinstance(error, PermissionError):
        return PermissionDenied(error=error)
    if isinstance(error, OSError) and error.errno in _ERRNO_FAILURES:
        return _ERRNO_FAILURES[error.errno](error=error)
    return DefaultFailure(error=error)


# -- Warnings --


class ActionWarning(Exception):
    """Base class for business-rule violations raised by actions."""


class EmptyDatabase(ActionWarning):
    def __init__(self) -> None:
        super().__init__("Your database is empty! Try: reis set <key> <value>")


class EntryAlreadyExists(ActionWarning):
    """Raised by Set when the key is already present.

    Attributes:
        key: The requested key.
        old_value: The value currently stored.
        new_value: The value Set tried to write.
    """

    def __init__(self, key: str, old_value: str, new_value: str) -> None:
        self.key = key
        self.old_value = old_value
        self.new_value = new_value
        super().__init__(f"The key {key} already exists with the value {old_value}!")


class EntryDoesntExist(ActionWarning):
    """Raised by Get, Put and Del when the key is missing.

    ``value`` is the value Put wanted to write, if any. It is used to
    suggest the ``set`` command that would create the entry.
    """

    def __init__(self, key: str, value: str | None = None) -> None:
        self.key = key
        self.value = value
        suggestion = value if value is not None else "value"
        super().__init__(f"The entry for {key} doesn't exist! Try: reis set {key} {suggestion}")


class RequiredArgumentsNotSpecified(ActionWarning):
    """Raised when a destructive action runs without the flag it needs.

    Attributes:
        operation: The action that was refused.
    """

    def __init__(self, operation: Action) -> None:
        self.operation = operation
        super().__init__(
            f"The {operation.display_name} action requires confirmation! Try adding -f"
        )


class OperationCanceled(Exception):
    """Raised when the user declines a confirmation prompt."""

    def __init__(self, message: str = "Operation canceled!") -> None:
        super().__init__(message)


class InputUnavailable(OperationCanceled):
    """Raised when the answer to a confirmation prompt cannot be read.

    Attributes:
        error: The underlying read error.
    """

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__("Sorry, an error occurred when attempting to read your input!")
