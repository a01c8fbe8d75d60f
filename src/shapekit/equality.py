"""Strict equality tokens shared by the dispatcher and the duplicate remover.

Python's `==` treats `True == 1` and compares containers deeply. The helpers
here use a stricter notion instead:

- bools only equal bools;
- numbers compare by numeric value (`1` equals `1.0`);
- strings and bytes compare by value;
- `None` only equals `None`;
- everything else (lists, dicts, tuples, objects) compares by identity.

Identity tokens embed `id()`, so they are only valid while the compared
values are alive. Build and use them within a single call.
"""

from collections.abc import Hashable
from numbers import Number
from typing import Any

StrictKey = tuple[str, Hashable]


def strict_key(value: Any) -> StrictKey:
    """Return a hashable token such that equal tokens mean strictly equal values."""
    if value is None:
        return ("null", None)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, Number):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    if isinstance(value, bytes):
        return ("bytes", value)
    return ("ref", id(value))


def strictly_equal(left: Any, right: Any) -> bool:
    """Return True if `left` and `right` are strictly equal."""
    return strict_key(left) == strict_key(right)
