"""
Game package initialization
"""

from .board import Board, Cell, CellState, GameState, InvalidConfiguration, InvalidCoordinate
from .difficulty import Difficulty
from .highscores import HighScore, HighScoreStore
from .session import GameSession

__all__ = [
    'Board',
    'Cell',
    'CellState',
    'GameState',
    'InvalidConfiguration',
    'InvalidCoordinate',
    'Difficulty',
    'HighScore',
    'HighScoreStore',
    'GameSession',
]
