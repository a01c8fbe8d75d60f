"""Helpers for walking mappings and converting them to and from pair lists.

The transcoders work on "nested containers": scalars, lists/tuples of nested
containers, and mappings of key to nested container. Cyclic structures are
not supported and will exhaust the recursion limit.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from shapekit.errors import IndexOutOfBoundsError, InvalidInputError

SEQUENCE_TYPES = (list, tuple)


def for_each_in_object(
    obj: Mapping[Any, Any], callback: Callable[[Any, Any], Any]
) -> None:
    """Call `callback(value, key)` for each key of `obj`, in iteration order.

    Nested mappings are not visited.
    """
    for key, value in obj.items():
        callback(value, key)


def object_to_array(obj: Mapping[Any, Any] | Sequence[Any]) -> Any:
    """Recursively convert a mapping into a list of `[key, value]` pairs.

    Nested mappings are converted too. Lists and tuples are treated as
    opaque leaves and returned as the same object, so mappings inside them
    are left untouched.

    Args:
        obj: A mapping, list or tuple.

    Returns:
        The pair-list form of `obj` (or `obj` itself for a list or tuple).

    Raises:
        InvalidInputError: If `obj` is None or any other non-container value.

    Example:
        >>> object_to_array({"a": [1, 2], "b": {"c": 3}})
        [['a', [1, 2]], ['b', [['c', 3]]]]
    """
    if not isinstance(obj, (Mapping, *SEQUENCE_TYPES)):
        raise InvalidInputError(obj)
    return _to_pairs(obj)


def _to_pairs(item: Any) -> Any:
    if isinstance(item, SEQUENCE_TYPES):
        return item
    if isinstance(item, Mapping):
        return [[key, _to_pairs(value)] for key, value in item.items()]
    return item


def array_to_object(
    array: Sequence[Sequence[Any]], key_index: int = 0
) -> dict[Any, Any]:
    """Build a dict from entries, taking each key from position `key_index`.

    The rest of each entry becomes the value: a single remaining item is
    unwrapped, no remaining items gives None, and several stay a list in
    their original order. When keys repeat, the last entry wins.

    Args:
        array: Entries, each a list or tuple, usually of two or more items.
        key_index: Position of the key inside every entry.

    Returns:
        A new dict.

    Raises:
        IndexOutOfBoundsError: If `key_index` is negative or not inside an entry.
        InvalidInputError: If a key is not hashable.

    Example:
        >>> array_to_object([["a", 10], ["b", 20]], 1)
        {10: 'a', 20: 'b'}
    """
    result: dict[Any, Any] = {}
    for entry in array:
        if key_index < 0 or key_index >= len(entry):
            raise IndexOutOfBoundsError(key_index, len(entry))

        key = entry[key_index]
        try:
            hash(key)
        except TypeError as e:
            raise InvalidInputError(key, "Key is not hashable") from e
        values = [*entry[:key_index], *entry[key_index + 1 :]]

        if len(values) > 1:
            result[key] = values
        elif values:
            result[key] = values[0]
        else:
            result[key] = None
    return result
