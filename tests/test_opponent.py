"""Tests for opponent move providers."""

from collections import Counter

import pytest

from console_games import MOVES, FixedMoveProvider, RandomMoveProvider


class TestRandomMoveProvider:
    """Test the random opponent."""

    def test_moves_are_uniform(self):
        """Test that each move shows up about a third of the time."""
        provider = RandomMoveProvider(seed=1234)
        draws = 10_000

        counts = Counter(provider.next_move() for _ in range(draws))

        assert set(counts) == set(MOVES)
        for move in MOVES:
            # ~7 standard deviations at p=1/3, n=10000
            assert abs(counts[move] / draws - 1 / 3) < 0.035

    def test_same_seed_same_sequence(self):
        """Test that seeding makes sessions reproducible."""
        first = RandomMoveProvider(seed=42)
        second = RandomMoveProvider(seed=42)

        assert [first.next_move() for _ in range(50)] == [
            second.next_move() for _ in range(50)
        ]
        assert first.seed == 42

    def test_unseeded_provider(self):
        """Test that an unseeded provider still returns valid moves."""
        provider = RandomMoveProvider()
        assert provider.seed is None
        assert all(provider.next_move() in MOVES for _ in range(20))


class TestFixedMoveProvider:
    """Test the scripted opponent."""

    def test_single_move_repeats(self):
        """Test that a single move is returned forever."""
        provider = FixedMoveProvider("scissors")
        assert [provider.next_move() for _ in range(3)] == ["scissors"] * 3

    def test_sequence_cycles(self):
        """Test that a sequence wraps around."""
        provider = FixedMoveProvider(["rock", "paper"])
        assert [provider.next_move() for _ in range(5)] == [
            "rock",
            "paper",
            "rock",
            "paper",
            "rock",
        ]

    def test_rejects_empty_sequence(self):
        """Test that an empty sequence is refused."""
        with pytest.raises(ValueError, match="at least one move"):
            FixedMoveProvider([])

    def test_rejects_unknown_moves(self):
        """Test that invalid moves are refused up front."""
        with pytest.raises(ValueError, match="Unknown moves"):
            FixedMoveProvider(["rock", "lizard"])
