"""
Pytest configuration and shared fixtures.
"""
import random

import pytest

from game import Board, HighScoreStore


class FirstPositionRandom:
    """Stand-in RNG that always draws the first remaining position"""

    def randrange(self, stop):
        return 0


@pytest.fixture
def rng():
    """Seeded RNG so random layouts are reproducible within a test"""
    return random.Random(1234)


@pytest.fixture
def first_position_rng():
    return FirstPositionRandom()


@pytest.fixture
def score_file(tmp_path):
    return tmp_path / "scores" / "high_scores.json"


@pytest.fixture
def score_store(score_file):
    """High score store backed by a temporary file"""
    return HighScoreStore(str(score_file))


@pytest.fixture
def center_mine_board():
    """3x3 board with its only mine in the middle"""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def wall_board():
    """5x5 board with a vertical wall of mines at x == 2"""
    return Board.from_mines(5, 5, [(2, y) for y in range(5)])
