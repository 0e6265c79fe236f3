"""Beats-relation for Rock, Paper, Scissors."""

from typing import Any

from .._errors import InvalidMoveError
from ..types import MOVES, Move, Outcome

# winner -> loser
BEATS: dict[Move, Move] = {
    "rock": "scissors",
    "paper": "rock",
    "scissors": "paper",
}


def resolve(player_move: Move, opponent_move: Move) -> Outcome:
    """Decide a round from the player's side."""
    if player_move == opponent_move:
        return "tie"
    if BEATS[player_move] == opponent_move:
        return "player"
    return "computer"


def parse_move(text: Any) -> Move:
    """
    Normalize raw input into a Move.

    Args:
        text: Raw text as typed by the user

    Returns:
        The matching Move

    Raises:
        InvalidMoveError: If the text is not rock, paper or scissors
    """
    if not isinstance(text, str):
        raise InvalidMoveError(text)
    candidate = text.strip().lower()
    for move in MOVES:
        if move == candidate:
            return move
    raise InvalidMoveError(text)
