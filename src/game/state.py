"""
Minesweeper Board State Export
Read-only numpy views and JSON export of a board, for tooling and analysis
"""

import json
from typing import Any, Dict

import numpy as np

from .board import Board, CellState

# Visible board encoding
HIDDEN = -3
FLAGGED = -2
MINE = -1


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def visible_board(board: Board) -> np.ndarray:
    """
    Get what the player can see as an int8 array of shape (width, height)

    Codes: -3 hidden, -2 flagged, -1 revealed mine, 0-8 revealed number
    """
    visible = np.full((board.width, board.height), HIDDEN, dtype=np.int8)
    for x, y, cell in board.cells():
        if cell.state == CellState.REVEALED:
            visible[x, y] = MINE if cell.has_mine else cell.adjacent_mines
        elif cell.state == CellState.FLAGGED:
            visible[x, y] = FLAGGED
    return _read_only(visible)


def mine_mask(board: Board) -> np.ndarray:
    """Boolean array marking every mine position"""
    mask = np.zeros((board.width, board.height), dtype=bool)
    for x, y in board.mine_positions():
        mask[x, y] = True
    return _read_only(mask)


def adjacency_map(board: Board) -> np.ndarray:
    """Adjacent mine counts for every cell; mines hold 0"""
    counts = np.zeros((board.width, board.height), dtype=np.int8)
    for x, y, cell in board.cells():
        counts[x, y] = cell.adjacent_mines
    return _read_only(counts)


def game_state(board: Board) -> Dict[str, Any]:
    """
    Get the complete observable game state

    Returns:
        Plain dictionary safe to serialize as JSON
    """
    return {
        'board_size': [board.width, board.height],
        'total_mines': board.mine_count,
        'game_state': board.get_verdict().value,
        'cells_revealed': board.revealed_count(),
        'flags_used': board.flagged_count(),
        'visible_board': visible_board(board).tolist(),
        'is_game_over': board.is_finished(),
    }


def export_game_state(board: Board) -> str:
    """Export current game state as JSON string"""
    return json.dumps(game_state(board), indent=2)
