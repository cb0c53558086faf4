"""Runtime configuration."""

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DATABASE_NAME = "reis.db"

PATH_ENV = "REISBASE_PATH"
DEBUG_ENV = "REISBASE_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ReisConfig:
    """Settings for one command invocation.

    Args:
        path: Location of the database file.
        debug: Emit debug logging on stderr.
    """

    path: str = DEFAULT_DATABASE_NAME
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReisConfig":
        """Build a config from ``REISBASE_PATH`` and ``REISBASE_DEBUG``."""
        env = os.environ if environ is None else environ
        path = env.get(PATH_ENV) or DEFAULT_DATABASE_NAME
        debug = env.get(DEBUG_ENV, "").strip().lower() in _TRUTHY
        return cls(path=path, debug=debug)
