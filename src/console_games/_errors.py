"""Error types for console-games."""

from typing import Any


class ConsoleGamesError(Exception):
    """Base exception for all console-games errors."""


class InvalidMoveError(ConsoleGamesError):
    """Raised when input is not one of rock, paper or scissors."""

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        if message is None:
            message = "Invalid choice! Please enter rock, paper, or scissors."
        super().__init__(message)


class ConsoleClosedError(ConsoleGamesError):
    """Raised when a console is used after it was closed."""
