"""
Minesweeper Game Session
Wraps one board per playthrough together with the flag counter, the elapsed
time clock and the high score check on a win
"""

import logging
from typing import List, Optional

from .board import Board, CellState, GameState
from .difficulty import Difficulty
from .highscores import HighScore, HighScoreStore

logger = logging.getLogger(__name__)


class GameSession:
    """Single-owner game state driven by player actions and a one second tick.

    All methods are expected to run on one thread of control (the Tk event
    loop in the GUI), so the counters need no locking.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.EASY,
                 score_store: Optional[HighScoreStore] = None, rng=None):
        self.difficulty = difficulty
        self.score_store = score_store if score_store is not None else HighScoreStore()
        self._rng = rng

        self.board: Board = self._new_board()
        self.game_state = GameState.ONGOING
        self.remaining_flags = difficulty.mines
        self.elapsed_seconds = 0
        self.clock_running = False
        self.first_action_taken = False
        self.high_score_pending = False
        self.high_score_rank: Optional[int] = None
        self.top_scores: List[HighScore] = []

        self._load_top_scores()

    def _new_board(self) -> Board:
        return Board(self.difficulty.width, self.difficulty.height, self.difficulty.mines, rng=self._rng)

    def _load_top_scores(self):
        self.top_scores = self.score_store.get_top_scores(self.difficulty)

    def _start_clock_on_first_action(self):
        if not self.first_action_taken:
            self.first_action_taken = True
            self.elapsed_seconds = 0
            self.clock_running = True

    def stop_clock(self):
        """Stop the elapsed time clock; safe to call repeatedly"""
        self.clock_running = False

    def tick(self):
        """Advance the clock by one second while a started game is ongoing"""
        if self.clock_running and self.game_state == GameState.ONGOING:
            self.elapsed_seconds += 1

    def on_primary_action(self, x: int, y: int) -> bool:
        """Reveal a cell. Returns False when the action was ignored."""
        if self.game_state != GameState.ONGOING:
            return False
        if self.board.get_cell(x, y).state == CellState.FLAGGED:
            return False

        self._start_clock_on_first_action()
        self.board.reveal_cell(x, y)
        self._sync_game_state()
        return True

    def on_secondary_action(self, x: int, y: int) -> bool:
        """Toggle a flag, spending or refunding one of the remaining flags"""
        if self.game_state != GameState.ONGOING:
            return False
        cell = self.board.get_cell(x, y)
        if cell.state == CellState.REVEALED:
            return False

        self._start_clock_on_first_action()
        if cell.state == CellState.HIDDEN and self.remaining_flags > 0:
            self.board.toggle_flag(x, y)
            self.remaining_flags -= 1
        elif cell.state == CellState.FLAGGED:
            self.board.toggle_flag(x, y)
            self.remaining_flags += 1

        self._sync_game_state()
        return True

    def _sync_game_state(self):
        previous = self.game_state
        self.game_state = self.board.get_verdict()
        if previous != GameState.ONGOING or self.game_state == GameState.ONGOING:
            return

        self.stop_clock()
        if self.game_state == GameState.LOST:
            logger.info("Lost %s game after %ds", self.difficulty.key, self.elapsed_seconds)
            return

        logger.info("Won %s game in %ds", self.difficulty.key, self.elapsed_seconds)
        rank = self.score_store.would_be_top_score(self.elapsed_seconds, self.difficulty)
        if rank is not None:
            self.high_score_pending = True
            self.high_score_rank = rank

    def change_difficulty(self, difficulty: Difficulty) -> bool:
        """Switch tiers; refused while a started game is still in progress"""
        if self.game_state == GameState.ONGOING and self.first_action_taken:
            logger.info("Ignoring difficulty change to %s during an active game", difficulty.key)
            return False

        self.difficulty = difficulty
        self.reset()
        self._load_top_scores()
        self.score_store.set_last_difficulty(difficulty)
        return True

    def reset(self):
        """Discard the current board and start over on the current tier"""
        self.stop_clock()
        self.board = self._new_board()
        self.game_state = GameState.ONGOING
        self.remaining_flags = self.difficulty.mines
        self.elapsed_seconds = 0
        self.first_action_taken = False
        self.high_score_pending = False
        self.high_score_rank = None

    def add_high_score(self, name: str):
        """Record the finished game's time under the given name"""
        if not self.high_score_pending:
            return
        name = name.strip() or self.score_store.get_player_name()
        self.score_store.add_score(name, self.elapsed_seconds, self.difficulty)
        self.score_store.set_player_name(name)
        self._load_top_scores()
        self.high_score_pending = False

    def dismiss_high_score(self):
        self.high_score_pending = False

    @staticmethod
    def format_time(seconds: int) -> str:
        minutes, remaining = divmod(seconds, 60)
        return f"{minutes:02d}:{remaining:02d}"
