"""Move providers used to pick the computer's move."""

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from itertools import cycle

from ..types import MOVES, Move

logger = logging.getLogger(__name__)


class MoveProvider(ABC):
    """Source of opponent moves."""

    @abstractmethod
    def next_move(self) -> Move:
        """Return the opponent's next move."""
        pass


class RandomMoveProvider(MoveProvider):
    """Uniform random moves, optionally seeded for reproducible sessions."""

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._random = random.Random(seed)
        if seed is not None:
            logger.debug("Seeded opponent with %d", seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def next_move(self) -> Move:
        return self._random.choice(MOVES)


class FixedMoveProvider(MoveProvider):
    """Replays a fixed move, or cycles through a sequence of moves."""

    def __init__(self, moves: Move | Iterable[Move]):
        if isinstance(moves, str):
            moves = [moves]
        sequence = list(moves)
        if not sequence:
            raise ValueError("FixedMoveProvider needs at least one move")
        invalid = [m for m in sequence if m not in MOVES]
        if invalid:
            raise ValueError(f"Unknown moves: {invalid}")
        self._moves = cycle(sequence)

    def next_move(self) -> Move:
        return next(self._moves)
