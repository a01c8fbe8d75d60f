"""Unit tests for shapekit.timing.

Conversions are checked directly. `wait` is checked against a fake
`asyncio.sleep` so these tests do not depend on the clock; a couple of
`slow` tests confirm real elapsed time.
"""

import asyncio
import time
from decimal import Decimal

import pytest

from shapekit import timing
from shapekit.errors import InvalidInputError
from shapekit.timing import to_milliseconds, wait

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("value", "unit", "expected"),
    [
        (1000, "ms", 1000),
        (1, "s", 1000),
        (1.5, "s", 1500),
        (2, "m", 120_000),
        (1, "h", 3_600_000),
        (0, "h", 0),
        (1, "bad", 1),
        (250, "", 250),
        (7, "S", 7),
    ],
)
def test_to_milliseconds(value, unit, expected):
    """Known units scale the value; anything else is milliseconds."""
    assert to_milliseconds(value, unit) == expected


@pytest.mark.parametrize("value", ["1", None, True, [1], Decimal("1.5")])
def test_to_milliseconds_rejects_non_numbers(value):
    """Only real numbers can be converted."""
    with pytest.raises(InvalidInputError, match="Delay must be a real number"):
        to_milliseconds(value, "ms")


@pytest.fixture
def recorded_sleeps(monkeypatch) -> list[float]:
    """Replace asyncio.sleep inside shapekit.timing with a recorder."""
    sleeps: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)

    monkeypatch.setattr(timing.asyncio, "sleep", fake_sleep)
    return sleeps


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("value", "unit", "seconds"),
    [(1000, "ms", 1.0), (1, "s", 1.0), (1, "bad", 0.001), (-5, "s", 0.0)],
)
async def test_wait_sleeps_for_converted_duration(recorded_sleeps, value, unit, seconds):
    """The awaitable sleeps for the converted duration, clamped at zero."""
    result = await wait(value, unit)
    assert result is None
    assert recorded_sleeps == [pytest.approx(seconds)]


def test_wait_reports_bad_input_eagerly():
    """Bad input raises when `wait` is called, before anything is awaited."""
    with pytest.raises(InvalidInputError):
        wait("soon", "s")


def test_wait_defaults_to_milliseconds(recorded_sleeps):
    """Without a unit, the value is taken as milliseconds."""
    asyncio.run(wait(20))
    assert recorded_sleeps == [pytest.approx(0.02)]


@pytest.mark.slow
@pytest.mark.asyncio
@pytest.mark.parametrize(("value", "unit"), [(200, "ms"), (0.2, "s")])
async def test_wait_elapses_real_time(value, unit):
    """Awaiting really suspends for at least the requested duration."""
    start = time.monotonic()
    await wait(value, unit)
    assert time.monotonic() - start >= 0.19
