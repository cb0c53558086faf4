"""Command-line front end: ``reis <action> [key] [value] [flags...]``."""

from __future__ import annotations

import functools
import logging
import sys
from typing import Callable, Sequence

from . import retry
from .actions import Action, Flag, Operation, build_action, lookup
from .config import ReisConfig
from .errors import ActionWarning, InvalidInput, OperationCanceled, ReisFailure
from .store import Reisbase

logger = logging.getLogger(__name__)


def copy_to_clipboard(value: str) -> None:
    """Copy ``value`` to the system clipboard."""
    import pyperclip

    pyperclip.copy(value)


def parse_command(argv: Sequence[str]) -> Action:
    """Turn command-line tokens into an action.

    The first token names the action. It then takes a key if the action
    carries one and a value if it carries one. Every remaining token is
    read as a flag; unknown flags are ignored.

    Raises:
        ReisFailure: If no action is given, the action is unknown, or a
            required key or value is missing.
    """
    if not argv:
        raise InvalidInput("Operation should contain an action!")
    name, rest = argv[0], list(argv[1:])
    action_type = lookup(name)
    key = rest.pop(0) if action_type.has_key and rest else None
    value = rest.pop(0) if action_type.has_value and rest else None
    return build_action(name, key, value, Flag.parse(rest))


def run(
    argv: Sequence[str],
    config: ReisConfig,
    *,
    confirm: retry.Confirm | None = None,
    clipboard: Callable[[str], None] | None = copy_to_clipboard,
    write: Callable[[str], object] = print,
) -> int:
    """Run one command and print its outcome. Returns the exit status.

    Prompts go through ``write`` unless a ``confirm`` callable is given.
    """
    if confirm is None:
        confirm = functools.partial(retry.confirm, write=write)
    try:
        action = parse_command(argv)
        with Reisbase.open(config.path) as db:
            success = retry.execute(action, db, confirm=confirm, clipboard=clipboard)
    except ReisFailure as failure:
        write(str(failure))
        logger.error("%s", failure.error if failure.error is not None else failure.message)
        return 1
    except (ActionWarning, OperationCanceled) as warning:
        write(str(warning))
        return 0

    message = success.message
    if success.operation is Operation.GET_ALL:
        message = message.rstrip("\n")
    write(message)
    return 0


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    config = ReisConfig.from_env()
    configure_logging(config.debug)
    return run(sys.argv[1:] if argv is None else argv, config)


if __name__ == "__main__":
    sys.exit(main())
