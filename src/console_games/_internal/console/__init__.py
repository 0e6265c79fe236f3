"""Console interface for line-based terminal games."""

from abc import ABC, abstractmethod
from typing import Any


class Console(ABC):
    """Abstract line-oriented console.

    WARNING: This internal API is exposed for custom front ends and tests.
    It may change between releases.

    A console reads one line of user text at a time and writes one line of
    game output at a time. Reads suspend until a line is available.
    """

    @abstractmethod
    async def read_line(self, prompt: str) -> str | None:
        """Show the prompt and return the next line without its newline.

        Returns None once input is exhausted.
        """
        pass

    @abstractmethod
    async def write_line(self, text: str = "") -> None:
        """Write one line of output."""
        pass

    async def close(self) -> None:  # noqa: B027
        """Release console resources."""
        pass

    async def __aenter__(self) -> "Console":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        await self.close()
        return False


__all__ = ["Console"]
