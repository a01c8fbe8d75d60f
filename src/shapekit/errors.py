"""Error definitions for shapekit.

Every helper reports failures by raising one of the errors below. Each error
formats its own message and keeps the offending inputs as attributes so
callers can inspect them without parsing strings.
"""

from typing import Any

# ============================================================================
#                               Base error
# ============================================================================


class ShapeKitError(Exception):
    """Base class for all shapekit errors."""


# ============================================================================
#                               Dispatch errors
# ============================================================================


class UnmatchedCaseError(ShapeKitError, LookupError):
    """Raised when no case key matches the subject and no fallback was given."""

    def __init__(self, subject: Any) -> None:
        super().__init__(f"No case found for key: {subject}")
        self.subject = subject


# ============================================================================
#                               Loader errors
# ============================================================================


class FileAccessError(ShapeKitError):
    """Raised when a file cannot be opened or read."""

    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(f"Cannot read file '{path}': {reason}")
        self.path = path
        self.reason = reason


class ParseError(ShapeKitError, ValueError):
    """Raised when file contents are not valid JSON text.

    Attributes:
        path: The file that was being parsed.
        reason: Short description of the problem.
        line: 1-based line of the problem, when known.
        column: 1-based column of the problem, when known.
    """

    def __init__(
        self,
        path: Any,
        reason: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Invalid JSON in '{path}'{location}: {reason}")
        self.path = path
        self.reason = reason
        self.line = line
        self.column = column


# ============================================================================
#                               Shell errors
# ============================================================================


class ShellCommandError(ShapeKitError):
    """Raised when a shell command exits with a non-zero status."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        name: str,
        command: str,
        returncode: int,
        stdout: str,
        stderr: str,
    ) -> None:
        message = f"Command '{name}' ({command}) failed with exit status {returncode}"
        if detail := stderr.strip():
            message = f"{message}: {detail}"
        super().__init__(message)
        self.name = name
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


# ============================================================================
#                               Input errors
# ============================================================================


class InvalidInputError(ShapeKitError, TypeError):
    """Raised when an argument does not have the expected shape or type."""

    def __init__(self, value: Any, message: str = "Input is not an object") -> None:
        super().__init__(f"{message}: got {type(value).__name__}")
        self.value = value


class IndexOutOfBoundsError(ShapeKitError, IndexError):
    """Raised when a key position falls outside an entry."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"Key index is out of bounds: {index} (entry length {length})"
        )
        self.index = index
        self.length = length


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidEncodingError(ShapeKitError, LookupError):
    """Raised when a text encoding name is not known to Python."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unknown text encoding: '{encoding}'")
        self.encoding = encoding


class InvalidReadFlagError(ShapeKitError, ValueError):
    """Raised when a file flag is not a valid read-only mode."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"File flag '{flag}' is not a read-only mode")
        self.flag = flag
