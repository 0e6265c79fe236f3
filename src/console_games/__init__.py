"""Terminal games: Rock, Paper, Scissors and FizzBuzz."""

from ._errors import ConsoleClosedError, ConsoleGamesError, InvalidMoveError
from ._internal.console import Console
from ._internal.console.stdio import StdioConsole
from ._internal.opponent import FixedMoveProvider, MoveProvider, RandomMoveProvider
from ._internal.rules import parse_move, resolve
from ._version import __version__
from .fizzbuzz import fizzbuzz, iter_fizzbuzz, print_fizzbuzz
from .session import GameSession
from .types import (
    MOVES,
    GameOptions,
    Move,
    Outcome,
    RoundResult,
    SessionState,
)

__all__ = [
    # Game
    "GameSession",
    "GameOptions",
    "SessionState",
    "RoundResult",
    "Move",
    "Outcome",
    "MOVES",
    "resolve",
    "parse_move",
    # Opponent
    "MoveProvider",
    "RandomMoveProvider",
    "FixedMoveProvider",
    # Console
    "Console",
    "StdioConsole",
    # FizzBuzz
    "fizzbuzz",
    "iter_fizzbuzz",
    "print_fizzbuzz",
    # Errors
    "ConsoleGamesError",
    "InvalidMoveError",
    "ConsoleClosedError",
    "__version__",
]
