"""Turn named shell commands into async callables.

Each generated callable launches a fresh child process through the host
shell and resolves with its standard output. Nothing is queued or limited:
concurrent calls run as independent processes.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from contextlib import suppress

from shapekit.config import (
    get_default_encoding,
    get_shell_executable,
    validate_encoding,
)
from shapekit.errors import InvalidInputError, ShellCommandError

logger = logging.getLogger(__name__)

ShellCommand = Callable[[], Awaitable[str]]


def create_shell_commands(
    commands: Iterable[Mapping[str, str]],
    *,
    encoding: str | None = None,
    executable: str | None = None,
) -> dict[str, ShellCommand]:
    """Build a name -> async callable mapping from name -> command entries.

    Only the first entry of each mapping is used. Later duplicate names
    replace earlier ones.

    Cancelling a pending call kills its child process before the
    cancellation propagates, so `asyncio.wait_for` can bound a command.

    Args:
        commands: Mappings such as `{"status": "git status"}`.
        encoding: Encoding used to decode process output. Defaults to the
            configured encoding.
        executable: Shell to run commands with. Defaults to `SHAPEKIT_SHELL`,
            or the platform shell when unset.

    Returns:
        A fresh dict whose values take no arguments and return a coroutine
        resolving to the command's stdout.

    Raises:
        InvalidInputError: If an entry is not a non-empty mapping.

    Example:
        git = create_shell_commands([{"pull": "git pull"}, {"status": "git status"}])
        print(await git["status"]())
    """
    output_encoding = (
        validate_encoding(encoding) if encoding else get_default_encoding()
    )
    shell = executable or get_shell_executable()

    funcs: dict[str, ShellCommand] = {}
    for entry in commands:
        if not isinstance(entry, Mapping) or not entry:
            raise InvalidInputError(entry, "Command must be a non-empty mapping")
        name, command = next(iter(entry.items()))
        funcs[name] = _make_command(name, command, output_encoding, shell)
    return funcs


def _make_command(
    name: str, command: str, encoding: str, shell: str | None
) -> ShellCommand:
    async def run() -> str:
        logger.debug("Launching %s: %s", name, command)
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            executable=shell,
        )
        try:
            stdout_bytes, stderr_bytes = await process.communicate()
        except asyncio.CancelledError:
            # kill the child before propagating
            with suppress(ProcessLookupError):
                process.kill()
            await process.communicate()
            logger.debug("%s cancelled, child killed", name)
            raise
        stdout = stdout_bytes.decode(encoding, errors="replace")
        stderr = stderr_bytes.decode(encoding, errors="replace")
        logger.debug("%s exited with status %s", name, process.returncode)

        if process.returncode != 0:
            raise ShellCommandError(
                name, command, process.returncode, stdout, stderr
            )
        return stdout

    run.__name__ = str(name)
    run.__qualname__ = str(name)
    return run
