"""Configuration utilities for shapekit.

This module centralizes the defaults used by the I/O helpers. Each default
can be overridden through an environment variable, read at call time so
tests and applications can change it without reloading the package.
"""

import codecs
import os

from shapekit.errors import InvalidEncodingError, InvalidReadFlagError

ENCODING_ENV_VAR = "SHAPEKIT_ENCODING"  # pragma: no mutate
READ_FLAG_ENV_VAR = "SHAPEKIT_READ_FLAG"  # pragma: no mutate
SHELL_ENV_VAR = "SHAPEKIT_SHELL"  # pragma: no mutate

DEFAULT_ENCODING = "utf-8"
DEFAULT_READ_FLAG = "r"

WRITE_FLAG_CHARS = frozenset("wax+")
READ_FLAG_CHARS = frozenset("rbt")


def validate_encoding(encoding: str) -> str:
    """Return `encoding` unchanged if Python knows it.

    Raises:
        InvalidEncodingError: If `codecs` cannot look the encoding up.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidEncodingError(encoding) from e
    return encoding


def validate_read_flag(flag: str) -> str:
    """Return `flag` unchanged if it only opens files for reading.

    Raises:
        InvalidReadFlagError: If the flag could create, truncate or append,
            or is not a valid read mode such as `r`, `rb` or `rt`.
    """
    if WRITE_FLAG_CHARS.intersection(flag):
        raise InvalidReadFlagError(flag)
    chars = set(flag)
    if (
        not chars <= READ_FLAG_CHARS
        or flag.count("r") != 1
        or len(chars) != len(flag)
        or {"b", "t"} <= chars
    ):
        raise InvalidReadFlagError(flag)
    return flag


def get_default_encoding() -> str:
    """Get the text encoding used when none is given explicitly.

    Returns:
        The value of `SHAPEKIT_ENCODING`, or `utf-8` when it is not set.

    Raises:
        InvalidEncodingError: If `SHAPEKIT_ENCODING` names an unknown encoding.
    """
    if not (encoding := os.environ.get(ENCODING_ENV_VAR)):
        return DEFAULT_ENCODING
    return validate_encoding(encoding)


def get_default_read_flag() -> str:
    """Get the file flag used by the JSON loader when none is given.

    Returns:
        The value of `SHAPEKIT_READ_FLAG`, or `r` when it is not set.

    Raises:
        InvalidReadFlagError: If `SHAPEKIT_READ_FLAG` is not a read-only mode.
    """
    if not (flag := os.environ.get(READ_FLAG_ENV_VAR)):
        return DEFAULT_READ_FLAG
    return validate_read_flag(flag)


def get_shell_executable() -> str | None:
    """Get the shell used to run commands, or None for the platform default."""
    return os.environ.get(SHELL_ENV_VAR) or None
