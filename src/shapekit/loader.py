"""Load JSON files with an optional post-processing step."""

import json
import os
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn

from shapekit.config import (
    get_default_encoding,
    get_default_read_flag,
    validate_encoding,
    validate_read_flag,
)
from shapekit.errors import FileAccessError, ParseError

PathLike = str | os.PathLike[str]


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard JSON constant {name}")


def file_to_json(
    path: PathLike,
    process_function: Callable[[Any], Any] | None = None,
    *,
    encoding: str | None = None,
    flag: str | None = None,
) -> Any | Awaitable[Any]:
    """Read a JSON file and optionally post-process the parsed value.

    The file is read synchronously on the calling thread. When
    `process_function` is given, its return value is handed back untouched:
    an async function's coroutine is returned without being awaited, so the
    caller decides when to await it.

    Args:
        path: The file to read.
        process_function: Optional callable applied to the parsed value. It
            may be sync or async.
        encoding: Text encoding. Defaults to the configured encoding
            (`utf-8` unless `SHAPEKIT_ENCODING` is set).
        flag: File flag passed to `open`. Defaults to the configured read
            flag (`r` unless `SHAPEKIT_READ_FLAG` is set). Binary flags
            such as `rb` let the JSON decoder detect the encoding.

    Returns:
        The parsed value, or the result of `process_function`.

    Raises:
        FileAccessError: If the file cannot be opened or read.
        ParseError: If the contents cannot be decoded or are not valid JSON.
        InvalidEncodingError: If the encoding is unknown.
        InvalidReadFlagError: If the flag is not a read-only mode.

    Example:
        config = file_to_json("settings.json")
        names = await file_to_json("users.json", fetch_profiles)
    """
    flag = validate_read_flag(flag) if flag else get_default_read_flag()
    binary = "b" in flag
    if binary:
        text_encoding = None
    else:
        text_encoding = (
            validate_encoding(encoding) if encoding else get_default_encoding()
        )

    try:
        with open(path, flag, encoding=text_encoding) as f:
            contents = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(path, f"cannot decode as {text_encoding}: {e.reason}") from e
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    try:
        parsed = json.loads(contents, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(path, e.msg, e.lineno, e.colno) from e
    except ValueError as e:
        raise ParseError(path, str(e)) from e

    if process_function is None:
        return parsed
    return process_function(parsed)
