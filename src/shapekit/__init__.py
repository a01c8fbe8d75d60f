"""shapekit

Small, stateless helpers for reshaping nested data (dispatch tables,
object/pair-list transcoding, filtering, de-duplication and insertion)
and the strict equality they share, plus a few I/O conveniences: a JSON
file loader, unit-aware asyncio delays and shell commands wrapped as async
callables.
"""

from shapekit.arrays import filter_array, insert_at, remove_duplicates
from shapekit.dispatch import case
from shapekit.equality import strict_key, strictly_equal
from shapekit.loader import file_to_json
from shapekit.objects import array_to_object, for_each_in_object, object_to_array
from shapekit.shell import create_shell_commands
from shapekit.timing import to_milliseconds, wait

__all__ = [
    "__version__",
    "array_to_object",
    "case",
    "create_shell_commands",
    "file_to_json",
    "filter_array",
    "for_each_in_object",
    "insert_at",
    "object_to_array",
    "remove_duplicates",
    "strict_key",
    "strictly_equal",
    "to_milliseconds",
    "wait",
]
__version__ = "0.1.0"
