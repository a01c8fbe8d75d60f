"""Value-keyed dispatch with an optional fallback handler."""

from collections.abc import Callable, Sequence
from functools import partial
from typing import Any, NoReturn

from shapekit.equality import StrictKey, strict_key
from shapekit.errors import InvalidInputError, UnmatchedCaseError

Handler = Callable[[], Any]

PAIR_LENGTH = 2


def case(subject: Any, *pairs: Sequence[Any] | Handler) -> Any:
    """Run the handler whose case key strictly equals `subject`.

    Each positional argument after `subject` is a `(key, handler)` pair. A
    bare callable in last position acts as the fallback, run when no key
    matches. Without one, an unmatched subject raises `UnmatchedCaseError`.

    Handlers take no arguments; close over `subject` if a handler needs it.
    When several pairs share a key, the last one registered wins.

    Args:
        subject: The value to match against the case keys.
        *pairs: `(key, handler)` pairs, optionally followed by a fallback.

    Returns:
        Whatever the selected handler returns.

    Raises:
        UnmatchedCaseError: If nothing matches and no fallback was given.
        InvalidInputError: If a pair is not a two-item sequence.

    Example:
        >>> case("b", ("a", lambda: 1), ("b", lambda: 2), lambda: 0)
        2
    """
    candidates = list(pairs)
    fallback: Handler
    if candidates and callable(candidates[-1]):
        fallback = candidates.pop()
    else:
        fallback = partial(_raise_unmatched, subject)

    table: dict[StrictKey, Handler] = {}
    for pair in candidates:
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence):
            raise InvalidInputError(pair, "Case must be a (key, handler) pair")
        if len(pair) != PAIR_LENGTH:
            raise InvalidInputError(pair, "Case must be a (key, handler) pair")
        key, handler = pair
        table[strict_key(key)] = handler

    handler = table.get(strict_key(subject), fallback)
    return handler()


def _raise_unmatched(subject: Any) -> NoReturn:
    raise UnmatchedCaseError(subject)
