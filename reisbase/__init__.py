"""reisbase: single-user key-value store backed by a flat text file."""

from .actions import (
    ACTIONS,
    Action,
    Clear,
    Del,
    Flag,
    Get,
    GetAll,
    Operation,
    Put,
    Set,
    Success,
    build_action,
)
from .config import ReisConfig
from .errors import (
    ActionWarning,
    CorruptedDatabase,
    DatabaseNotFound,
    DatabaseTooLarge,
    DefaultFailure,
    EmptyDatabase,
    EntryAlreadyExists,
    EntryDoesntExist,
    InputUnavailable,
    InvalidActionArguments,
    InvalidDatabaseName,
    InvalidInput,
    InvalidPlatformOperation,
    OperationCanceled,
    OutOfSpace,
    PermissionDenied,
    ReisFailure,
    RequiredArgumentsNotSpecified,
    UnknownActionRequested,
)
from .kv.base import KVStore
from .store import Reisbase

__all__ = [
    "ACTIONS",
    "Action",
    "ActionWarning",
    "Clear",
    "CorruptedDatabase",
    "DatabaseNotFound",
    "DatabaseTooLarge",
    "DefaultFailure",
    "Del",
    "EmptyDatabase",
    "EntryAlreadyExists",
    "EntryDoesntExist",
    "Flag",
    "Get",
    "GetAll",
    "InputUnavailable",
    "InvalidActionArguments",
    "InvalidDatabaseName",
    "InvalidInput",
    "InvalidPlatformOperation",
    "KVStore",
    "Operation",
    "OperationCanceled",
    "OutOfSpace",
    "PermissionDenied",
    "Put",
    "ReisConfig",
    "ReisFailure",
    "Reisbase",
    "RequiredArgumentsNotSpecified",
    "Set",
    "Success",
    "UnknownActionRequested",
    "build_action",
]
