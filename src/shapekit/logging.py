"""Logging helpers for applications and tests that use shapekit.

shapekit modules only emit DEBUG records through `logging.getLogger(__name__)`
and never configure logging themselves. This module offers an opt-in Rich
console handler, a filter that tags third-party records with a short prefix,
and a parser for per-logger level overrides of the form NAME=LEVEL.
"""

from __future__ import annotations

import logging
import re
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "shapekit"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token such as "[asyncio]"; project records get an empty
    prefix. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "asyncio.base_events" -> "[asyncio]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""  # no prefix for shapekit records
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it logs at DEBUG and shows
    source paths and timestamps; otherwise third-party records get a short
    prefix.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Enable debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    # color=False turns off ANSI styling entirely, not just the palette
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    # debug mode always shows DEBUG records
    if debug_mode:
        level = logging.DEBUG

    # source paths only in debug mode
    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    # the filter fills %(prefix)s used by the plain format
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse NAME=LEVEL items into a logger name -> numeric level dict.

    Items may be separated by commas or whitespace, and a list of strings is
    accepted as well. LEVEL is a standard level name, case-insensitive.

    Args:
        value: The raw overrides, e.g. "asyncio=WARNING, shapekit.shell=DEBUG".

    Returns:
        Mapping of logger names to numeric logging levels.

    Raises:
        ValueError: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    items = [s for chunk in chunks for s in re.split(r"[,\s]+", chunk) if s]

    levels: dict[str, int] = {}
    for item in items:
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise ValueError(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = getattr(logging, level_str.strip().upper(), None)
        if not isinstance(lvl, int):
            raise ValueError(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels


def configure_logging(
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: dict[str, int] | None = None,
) -> RichHandler:
    """Attach a Rich console handler to the root logger.

    Args:
        level: Minimum level for console output.
        debug_mode: Enable debug formatting and DEBUG output.
        color: Enable color output when True.
        logger_levels: Per-logger level overrides, see `parse_logger_levels`.

    Returns:
        The handler that was attached, so callers can remove it later.
    """
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(handler.level)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    return handler
