"""Console implementation over the process's standard streams."""

import logging
import sys
from typing import IO, Any

import anyio

from ..._errors import ConsoleClosedError
from . import Console

logger = logging.getLogger(__name__)


class StdioConsole(Console):
    """Console reading stdin and writing stdout through anyio file wrappers."""

    def __init__(
        self,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ):
        self._stdin: Any = anyio.wrap_file(stdin if stdin is not None else sys.stdin)
        self._stdout: Any = anyio.wrap_file(
            stdout if stdout is not None else sys.stdout
        )
        self._closed = False

    async def read_line(self, prompt: str) -> str | None:
        self._check_open()
        await self._stdout.write(prompt)
        await self._stdout.flush()

        try:
            line = await self._stdin.readline()
        except (OSError, ValueError) as e:
            # ValueError: I/O operation on closed file
            logger.debug("stdin unreadable, treating as end of input: %s", e)
            return None

        if not line:
            return None
        return line.rstrip("\r\n")

    async def write_line(self, text: str = "") -> None:
        self._check_open()
        await self._stdout.write(text + "\n")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._stdout.flush()

    def _check_open(self) -> None:
        if self._closed:
            raise ConsoleClosedError("Console is closed")
