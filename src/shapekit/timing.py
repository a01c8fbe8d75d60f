"""Unit-aware delays for asyncio code."""

import asyncio
import logging
from collections.abc import Coroutine
from numbers import Real
from typing import Any

from shapekit.dispatch import case
from shapekit.errors import InvalidInputError

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def to_milliseconds(value: float, unit: str) -> float:
    """Convert `value` expressed in `unit` into milliseconds.

    Recognized units are `ms`, `s`, `m` and `h`. Any other unit is treated
    as milliseconds, so `value` is returned unchanged.

    Raises:
        InvalidInputError: If `value` is not a real number. Bools are
            refused, and so is `Decimal`, which is not a `numbers.Real`.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(value, "Delay must be a real number")
    return case(
        unit,
        ("ms", lambda: value),
        ("s", lambda: value * MS_PER_SECOND),
        ("m", lambda: value * MS_PER_MINUTE),
        ("h", lambda: value * MS_PER_HOUR),
        lambda: value,
    )


def wait(value: float, unit: str = "ms") -> Coroutine[Any, Any, None]:
    """Return an awaitable that completes after the given duration.

    The duration is computed eagerly, so bad input is reported when `wait`
    is called. The returned awaitable itself never raises. Negative
    durations complete on the next loop iteration.

    Example:
        await wait(1.5, "s")  # resumes after 1500 ms
    """
    milliseconds = to_milliseconds(value, unit)
    logger.debug("Waiting %s ms (%s %s)", milliseconds, value, unit)
    return asyncio.sleep(max(milliseconds, 0) / MS_PER_SECOND)
