"""
Unit tests for the Cell value type
"""

import dataclasses

import pytest
from game.board import Cell, CellState


class TestCell:
    """Test cases for the Cell class"""

    def test_cell_defaults(self):
        """Test that cell initializes hidden, mine-free and with no neighbours"""
        cell = Cell()

        assert cell.has_mine is False
        assert cell.state == CellState.HIDDEN
        assert cell.adjacent_mines == 0

    def test_cell_is_immutable(self):
        """Test that a cell cannot be changed in place"""
        cell = Cell()

        with pytest.raises(dataclasses.FrozenInstanceError):
            cell.state = CellState.REVEALED

    def test_replace_produces_new_value(self):
        """Test that replacing a field leaves the original untouched"""
        cell = Cell(adjacent_mines=2)
        revealed = dataclasses.replace(cell, state=CellState.REVEALED)

        assert cell.state == CellState.HIDDEN
        assert revealed.state == CellState.REVEALED
        assert revealed.adjacent_mines == 2

    @pytest.mark.parametrize("state,hidden,revealed,flagged", [
        (CellState.HIDDEN, True, False, False),
        (CellState.REVEALED, False, True, False),
        (CellState.FLAGGED, False, False, True),
    ])
    def test_state_predicates(self, state, hidden, revealed, flagged):
        cell = Cell(state=state)

        assert cell.is_hidden() is hidden
        assert cell.is_revealed() is revealed
        assert cell.is_flagged() is flagged

    def test_value_equality(self):
        assert Cell(has_mine=True) == Cell(has_mine=True)
        assert Cell(has_mine=True) != Cell()
