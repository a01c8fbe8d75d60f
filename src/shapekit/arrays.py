"""List helpers: de-duplication, recursive type filtering and insertion.

All helpers return new lists and leave their inputs untouched.
"""

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from numbers import Number, Real
from typing import Any

from shapekit.equality import StrictKey, strict_key
from shapekit.errors import InvalidInputError

SEQUENCE_TYPES = (list, tuple)

TypeTag = str | type

# Named tags recognized by `filter_array`, mapped to their predicates.
TYPE_TAGS: dict[str, Callable[[Any], bool]] = {
    "number": lambda v: isinstance(v, Number) and not isinstance(v, bool),
    "string": lambda v: isinstance(v, str),
    "boolean": lambda v: isinstance(v, bool),
    "null": lambda v: v is None,
    "object": lambda v: isinstance(v, Mapping),
    "function": callable,
    "bytes": lambda v: isinstance(v, bytes),
}


def remove_duplicates(array: Iterable[Any], except_: Iterable[Any] = ()) -> list[Any]:
    """Return `array` without repeated values, keeping first occurrences.

    Values listed in `except_` are exempt: every occurrence of them is kept.
    Values are compared with strict equality, so `True` and `1` are distinct
    and lists or dicts are only duplicates of themselves.

    Example:
        >>> remove_duplicates([1, 2, 3, 1, 2, 3, 4, 5], [1, 2])
        [1, 2, 3, 1, 2, 4, 5]
    """
    # keep exempt values referenced so their identity keys stay valid
    exempt_values = list(except_)
    exempt = {strict_key(value) for value in exempt_values}
    seen: set[StrictKey] = set()
    result = []
    for value in array:
        key = strict_key(value)
        if key in exempt or key not in seen:
            result.append(value)
        seen.add(key)
    return result


def filter_array(array: Sequence[Any], *type_tags: TypeTag) -> list[Any]:
    """Keep only elements matching one of `type_tags`, recursing into sublists.

    A tag is either a Python type, matched with `isinstance`, or one of the
    names in `TYPE_TAGS`. Nested lists and tuples are filtered recursively
    and always kept in place, even when nothing inside them matches, so the
    nesting shape survives.

    Args:
        array: The list to filter.
        *type_tags: Types or tag names to keep.

    Returns:
        A new, possibly nested, list.

    Raises:
        InvalidInputError: If a tag is neither a type nor a known tag name.

    Example:
        >>> filter_array([1, ["hello", 2, False], True, 3], "number")
        [1, [2], 3]
    """
    predicates = [_tag_predicate(tag) for tag in type_tags]

    def _filter(items: Sequence[Any]) -> list[Any]:
        kept = []
        for item in items:
            if isinstance(item, SEQUENCE_TYPES):
                kept.append(_filter(item))
            elif any(predicate(item) for predicate in predicates):
                kept.append(item)
        return kept

    return _filter(array)


def _tag_predicate(tag: TypeTag) -> Callable[[Any], bool]:
    if isinstance(tag, type):
        return lambda value: isinstance(value, tag)
    if isinstance(tag, str) and tag in TYPE_TAGS:
        return TYPE_TAGS[tag]
    raise InvalidInputError(tag, f"Unknown type tag {tag!r}")


def insert_at(array: Sequence[Any], index: float, *items: Any) -> list[Any]:
    """Return a copy of `array` with `items` inserted at `index`.

    A fractional index is floored, so `3.14` inserts exactly where `3` would.
    An index outside `[0, len(array)]` is ignored and the copy is returned
    unchanged; no clamping and no error.

    Raises:
        InvalidInputError: If `index` is not a real number. Bools are
            refused, and so is `Decimal`, which is not a `numbers.Real`.

    Example:
        >>> insert_at([1, 2, 3, 4], 3.14, "a", "b")
        [1, 2, 3, 'a', 'b', 4]
    """
    if isinstance(index, bool) or not isinstance(index, Real):
        raise InvalidInputError(index, "Index must be a real number")

    result = list(array)
    if not 0 <= index <= len(result):
        return result

    position = math.floor(index)
    result[position:position] = items
    return result
