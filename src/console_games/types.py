"""Type definitions for console-games."""

from dataclasses import dataclass
from typing import Literal

# Moves, in the order the opponent draws from
Move = Literal["rock", "paper", "scissors"]
MOVES: tuple[Move, ...] = ("rock", "paper", "scissors")

# Round outcomes, from the player's point of view
Outcome = Literal["player", "computer", "tie"]

DEFAULT_PROMPT = "Enter your move (rock/paper/scissors): "


@dataclass
class SessionState:
    """Running tally of a single game session.

    Ties are derived from the other counters and never stored.
    """

    games_played: int = 0
    player_wins: int = 0
    computer_wins: int = 0

    @property
    def ties(self) -> int:
        return self.games_played - self.player_wins - self.computer_wins

    def record(self, outcome: Outcome) -> None:
        """Count one finished round."""
        self.games_played += 1
        if outcome == "player":
            self.player_wins += 1
        elif outcome == "computer":
            self.computer_wins += 1


@dataclass(frozen=True)
class RoundResult:
    """Moves and outcome of one played round."""

    player_move: Move
    opponent_move: Move
    outcome: Outcome


@dataclass
class GameOptions:
    """Options for a Rock, Paper, Scissors session."""

    prompt: str = DEFAULT_PROMPT
    seed: int | None = None  # None draws from system entropy
    show_banner: bool = True
