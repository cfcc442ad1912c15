"""Runtime defaults read from the environment (and ``.env`` via python-dotenv).

Only the CLI, the MCP server and the playground read these; the string
helpers themselves take every parameter explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from string_extensions.errors import InvalidArgumentError

ENV_PREFIX = "STRING_EXTENSIONS_"

DEFAULT_REPLACE_CHAR = "*"
DEFAULT_CHUNK_SIZE = 3
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Defaults used by the outer surfaces when a caller gives none."""

    replace_char: str = DEFAULT_REPLACE_CHAR
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = DEFAULT_LOG_LEVEL


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment.

    Raises :class:`InvalidArgumentError` for values that cannot be used.
    """
    replace_char = _env("REPLACE_CHAR", DEFAULT_REPLACE_CHAR)
    if not replace_char:
        raise InvalidArgumentError(f"{ENV_PREFIX}REPLACE_CHAR", replace_char, "must not be empty")

    raw_size = _env("CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
    try:
        chunk_size = int(raw_size)
    except ValueError as exc:
        raise InvalidArgumentError(f"{ENV_PREFIX}CHUNK_SIZE", raw_size, "must be an integer") from exc
    if chunk_size <= 0:
        raise InvalidArgumentError(f"{ENV_PREFIX}CHUNK_SIZE", chunk_size, "must be a positive integer")

    log_level = _env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise InvalidArgumentError(f"{ENV_PREFIX}LOG_LEVEL", log_level, "unknown logging level")

    return Settings(replace_char=replace_char, chunk_size=chunk_size, log_level=log_level)
