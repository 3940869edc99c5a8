"""
Minesweeper Game - Core Game Logic
Implements mine placement, reveal propagation and win/loss detection
"""

from dataclasses import dataclass, replace
from enum import Enum
import logging
import random
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a board cannot be built with the requested dimensions"""


class InvalidCoordinate(IndexError):
    """Raised when a cell operation addresses a position outside the grid"""


class GameState(Enum):
    """Enumeration for the board verdict"""
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


class CellState(Enum):
    """Enumeration for cell states"""
    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"


@dataclass(frozen=True)
class Cell:
    """Represents a single cell on the minesweeper board"""
    has_mine: bool = False
    state: CellState = CellState.HIDDEN
    adjacent_mines: int = 0

    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED


NEIGHBOR_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class Board:
    """Manages the minesweeper grid, its mine layout and the game verdict.

    The grid is indexed ``[x][y]`` with x in ``[0, width)`` and y in
    ``[0, height)``. Cells are immutable; every change swaps a new Cell into
    the grid.
    """

    def __init__(self, width: int, height: int, mine_count: int, rng=None,
                 layout: Optional[Iterable[Tuple[int, int]]] = None):
        self._validate(width, height, mine_count)
        self.width = width
        self.height = height
        self.mine_count = mine_count
        self.verdict = GameState.ONGOING
        self._rng = rng or random
        self._grid: List[List[Cell]] = [[Cell() for _ in range(height)] for _ in range(width)]

        if layout is None:
            self._place_mines()
        else:
            self._place_layout(layout)
        self._calculate_adjacent_mines()
        logger.debug("Created %dx%d board with %d mines", width, height, mine_count)

    @classmethod
    def from_mines(cls, width: int, height: int, mines: Iterable[Tuple[int, int]]) -> 'Board':
        """Build a board with an explicit mine layout instead of a random one"""
        positions = set(mines)
        return cls(width, height, len(positions), layout=positions)

    @staticmethod
    def _validate(width: int, height: int, mine_count: int):
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(f"Board dimensions must be positive, got {width}x{height}")
        if mine_count < 0:
            raise InvalidConfiguration("Mine count must be non-negative")
        if mine_count >= width * height:
            raise InvalidConfiguration(
                f"Mine count must be less than total number of cells ({width * height})"
            )

    def _place_mines(self):
        """Draw mine positions uniformly from a shrinking pool of unused flat indices"""
        available = list(range(self.width * self.height))
        for _ in range(self.mine_count):
            position = available.pop(self._rng.randrange(len(available)))
            x, y = divmod(position, self.height)
            self._set_cell(x, y, replace(self._grid[x][y], has_mine=True))

    def _place_layout(self, layout: Iterable[Tuple[int, int]]):
        positions = set(layout)
        if len(positions) != self.mine_count:
            raise InvalidConfiguration(
                f"Layout has {len(positions)} distinct mines, expected {self.mine_count}"
            )
        for x, y in positions:
            self._check_bounds(x, y)
            self._set_cell(x, y, replace(self._grid[x][y], has_mine=True))

    def _calculate_adjacent_mines(self):
        """Calculate the number of adjacent mines for each non-mine cell"""
        for x in range(self.width):
            for y in range(self.height):
                cell = self._grid[x][y]
                if cell.has_mine:
                    continue
                count = sum(1 for nx, ny in self.neighbors(x, y) if self._grid[nx][ny].has_mine)
                self._set_cell(x, y, replace(cell, adjacent_mines=count))

    def _set_cell(self, x: int, y: int, cell: Cell):
        self._grid[x][y] = cell

    def _check_bounds(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(f"Position ({x}, {y}) is outside a {self.width}x{self.height} board")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yield the in-bounds Moore neighbours of (x, y)"""
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def get_cell(self, x: int, y: int) -> Cell:
        """Get cell at specified position"""
        self._check_bounds(x, y)
        return self._grid[x][y]

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only snapshot of the grid, indexed [x][y]"""
        return tuple(tuple(column) for column in self._grid)

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for x, column in enumerate(self._grid):
            for y, cell in enumerate(column):
                yield x, y, cell

    def mine_positions(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y, cell in self.cells() if cell.has_mine]

    def revealed_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_revealed())

    def flagged_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_flagged())

    def get_verdict(self) -> GameState:
        return self.verdict

    def is_finished(self) -> bool:
        return self.verdict != GameState.ONGOING

    def reveal_cell(self, x: int, y: int) -> bool:
        """
        Reveal a cell and cascade through zero-adjacency regions
        Returns True if a reveal actually occurred
        """
        self._check_bounds(x, y)
        if self.is_finished() or not self._grid[x][y].is_hidden():
            return False

        self._reveal(x, y)
        if self._grid[x][y].has_mine:
            self.verdict = GameState.LOST
            self._reveal_all_mines()
            logger.info("Mine revealed at (%d, %d), game lost", x, y)
            return True

        if self._grid[x][y].adjacent_mines == 0:
            self._flood_reveal(x, y)

        self._check_win_condition()
        return True

    def _reveal(self, x: int, y: int):
        self._set_cell(x, y, replace(self._grid[x][y], state=CellState.REVEALED))

    def _flood_reveal(self, x: int, y: int):
        """Reveal the connected zero region around (x, y) and its numbered border"""
        stack = [(x, y)]
        revealed = 0
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors(cx, cy):
                neighbor = self._grid[nx][ny]
                if not neighbor.is_hidden():
                    continue
                self._reveal(nx, ny)
                revealed += 1
                # Neighbours of a zero cell are never mines.
                if neighbor.adjacent_mines == 0:
                    stack.append((nx, ny))
        logger.debug("Cascade from (%d, %d) revealed %d cells", x, y, revealed)

    def _reveal_all_mines(self):
        """Reveal every mine, flagged ones included, when the game is lost"""
        for x, y in self.mine_positions():
            if not self._grid[x][y].is_revealed():
                self._reveal(x, y)

    def toggle_flag(self, x: int, y: int):
        """Toggle flag on a cell; the verdict of a finished board stays put"""
        self._check_bounds(x, y)
        cell = self._grid[x][y]
        if cell.is_revealed():
            return

        new_state = CellState.HIDDEN if cell.is_flagged() else CellState.FLAGGED
        self._set_cell(x, y, replace(cell, state=new_state))
        self._check_win_condition()

    def _check_win_condition(self):
        """Latch WON once every safe cell is revealed and no mine is"""
        if self.is_finished():
            return
        for _, _, cell in self.cells():
            if cell.has_mine == cell.is_revealed():
                return
        self.verdict = GameState.WON
        logger.info("All safe cells revealed, game won")

    def __repr__(self) -> str:
        return (f"Board(width={self.width}, height={self.height}, "
                f"mine_count={self.mine_count}, verdict={self.verdict.value})")
