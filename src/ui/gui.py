"""
Minesweeper GUI - tkinter Interface
Renders a game session and forwards clicks to it
"""

import logging
import tkinter as tk
from tkinter import messagebox, Menu
from typing import Callable, List, Optional

from game import Cell, CellState, Difficulty, GameSession, GameState, HighScoreStore
from .leaderboard import ask_player_name, show_leaderboard

logger = logging.getLogger(__name__)

CELL_BG = '#c0c0c0'


class DigitalDisplay(tk.Label):
    """Red-on-black counter used for remaining flags and elapsed time"""

    def __init__(self, parent, width=3):
        super().__init__(parent, bg='black', fg='red', font=('Courier', 18, 'bold'),
                         relief='sunken', bd=3, padx=3, width=width)
        self.width = width
        self.value = 0
        self.set_value(0)

    def _format_number(self, num: int) -> str:
        """Format number with leading zeros for digital display"""
        if num < 0:
            return '-' + f"{min(abs(num), 10**(self.width - 1) - 1):0{self.width - 1}d}"
        if num >= 10**self.width:
            return '9' * self.width
        return f"{num:0{self.width}d}"

    def set_value(self, value: int):
        self.value = value
        self.config(text=self._format_number(value))


class SmileyButton(tk.Button):
    """Smiley face button that shows game state and starts a new game"""

    FACES = {
        GameState.ONGOING: '🙂',
        GameState.WON: '😎',
        GameState.LOST: '😵',
    }

    def __init__(self, parent, command=None):
        super().__init__(parent, relief='raised', bd=2, command=command,
                         font=('Arial', 14), width=2)
        self.set_state(GameState.ONGOING)

    def set_state(self, state: GameState):
        self.config(text=self.FACES.get(state, '🙂'))


class CellButton(tk.Label):
    """Individual cell on the minesweeper grid"""

    NUMBER_COLORS = {
        1: 'blue',
        2: 'green',
        3: 'red',
        4: 'purple',
        5: 'maroon',
        6: 'turquoise',
        7: 'black',
        8: 'gray'
    }

    def __init__(self, parent, x: int, y: int, click_callback: Callable,
                 right_click_callback: Callable):
        super().__init__(parent, width=2, height=1, relief='raised', bd=2, bg=CELL_BG,
                         font=('Arial', 10, 'bold'))
        self.x = x
        self.y = y
        self.click_callback = click_callback
        self.right_click_callback = right_click_callback

        self.bind('<Button-1>', self._on_left_click)
        self.bind('<Button-3>', self._on_right_click)
        # macOS reports the secondary button as Button-2
        self.bind('<Button-2>', self._on_right_click)

    def _on_left_click(self, event):
        self.click_callback(self.x, self.y)
        return "break"

    def _on_right_click(self, event):
        self.right_click_callback(self.x, self.y)
        return "break"

    def update_display(self, cell: Cell):
        """Update appearance based on cell state"""
        if cell.state == CellState.REVEALED:
            if cell.has_mine:
                self.config(relief='sunken', bd=1, text='💣', bg='red', fg='black')
            elif cell.adjacent_mines > 0:
                self.config(relief='sunken', bd=1, text=str(cell.adjacent_mines), bg=CELL_BG,
                            fg=self.NUMBER_COLORS.get(cell.adjacent_mines, 'black'))
            else:
                self.config(relief='sunken', bd=1, text='', bg=CELL_BG)
        elif cell.state == CellState.FLAGGED:
            self.config(relief='raised', bd=2, text='🚩', bg=CELL_BG, fg='red')
        else:
            self.config(relief='raised', bd=2, text='', bg=CELL_BG)


class MinesweeperGUI:
    """Main GUI class for the minesweeper game"""

    def __init__(self, session: Optional[GameSession] = None, score_store: Optional[HighScoreStore] = None):
        self.root = tk.Tk()
        self.root.title('Minesweeper')
        self.root.resizable(False, False)

        if session is None:
            store = score_store or HighScoreStore()
            session = GameSession(store.get_last_difficulty(), store)
        self.session = session

        self.cell_buttons: List[List[CellButton]] = []
        self.game_timer_id: Optional[str] = None

        self.flag_display: Optional[DigitalDisplay] = None
        self.timer_display: Optional[DigitalDisplay] = None
        self.smiley_button: Optional[SmileyButton] = None
        self.game_frame: Optional[tk.Frame] = None
        self._setup_gui()
        self._rebuild_grid()

    def _setup_gui(self):
        main_frame = tk.Frame(self.root, bg='lightgray', relief='raised', bd=3)
        main_frame.pack(padx=5, pady=5)

        top_frame = tk.Frame(main_frame, bg='lightgray')
        top_frame.pack(fill='x', padx=5, pady=5)

        self.flag_display = DigitalDisplay(top_frame)
        self.flag_display.pack(side='left')

        smiley_frame = tk.Frame(top_frame, bg='lightgray')
        smiley_frame.pack(side='left', expand=True)
        self.smiley_button = SmileyButton(smiley_frame, command=self._restart_game)
        self.smiley_button.pack()

        self.timer_display = DigitalDisplay(top_frame)
        self.timer_display.pack(side='right')

        self.game_frame = tk.Frame(main_frame, bg='lightgray')
        self.game_frame.pack(padx=5, pady=5)

        self._setup_menu()

    def _setup_menu(self):
        menubar = Menu(self.root)
        self.root.config(menu=menubar)

        game_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Game", menu=game_menu)
        game_menu.add_command(label="New Game", command=self._restart_game)
        game_menu.add_separator()
        for difficulty in Difficulty:
            game_menu.add_command(
                label=f"{difficulty.display_name} ({difficulty.width}x{difficulty.height}, "
                      f"{difficulty.mines} mines)",
                command=lambda d=difficulty: self._change_difficulty(d)
            )
        game_menu.add_separator()
        game_menu.add_command(label="High Scores", command=self._show_leaderboard)
        game_menu.add_separator()
        game_menu.add_command(label="Exit", command=self.root.quit)

        help_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="How to Play", command=self._show_help)

    def _rebuild_grid(self):
        """Recreate cell widgets when the board size changes, otherwise just redraw"""
        board = self.session.board
        current_size = (len(self.cell_buttons), len(self.cell_buttons[0])) if self.cell_buttons else (0, 0)
        if current_size != (board.width, board.height):
            for widget in self.game_frame.winfo_children():
                widget.destroy()
            self.cell_buttons = []
            for x in range(board.width):
                column = []
                for y in range(board.height):
                    button = CellButton(self.game_frame, x, y, self._on_cell_click,
                                        self._on_cell_right_click)
                    button.grid(row=y, column=x, padx=0, pady=0)
                    column.append(button)
                self.cell_buttons.append(column)
        self._update_display()

    def _restart_game(self):
        self._cancel_timer()
        self.session.reset()
        self._rebuild_grid()

    def _change_difficulty(self, difficulty: Difficulty):
        if not self.session.change_difficulty(difficulty):
            messagebox.showinfo("Minesweeper", "Finish or restart the current game before changing difficulty.")
            return
        self._cancel_timer()
        self._rebuild_grid()

    def _on_cell_click(self, x: int, y: int):
        if self.session.on_primary_action(x, y):
            self._after_action()

    def _on_cell_right_click(self, x: int, y: int):
        if self.session.on_secondary_action(x, y):
            self._after_action()

    def _after_action(self):
        if self.session.clock_running and self.game_timer_id is None:
            self.game_timer_id = self.root.after(1000, self._tick)
        self._update_display()
        if self.session.game_state != GameState.ONGOING:
            self._end_game()

    def _tick(self):
        """Advance the session clock once per second on the Tk event loop"""
        self.game_timer_id = None
        self.session.tick()
        self.timer_display.set_value(min(self.session.elapsed_seconds, 999))
        if self.session.clock_running:
            self.game_timer_id = self.root.after(1000, self._tick)

    def _cancel_timer(self):
        if self.game_timer_id:
            self.root.after_cancel(self.game_timer_id)
            self.game_timer_id = None

    def _update_display(self):
        self.flag_display.set_value(self.session.remaining_flags)
        self.timer_display.set_value(min(self.session.elapsed_seconds, 999))
        self.smiley_button.set_state(self.session.game_state)

        for x, column in enumerate(self.session.board.grid):
            for y, cell in enumerate(column):
                self.cell_buttons[x][y].update_display(cell)

    def _end_game(self):
        self._cancel_timer()
        if not self.session.high_score_pending:
            return

        name = ask_player_name(
            self.root,
            self.session.difficulty,
            self.session.format_time(self.session.elapsed_seconds),
            self.session.high_score_rank,
            self.session.score_store.get_player_name(),
        )
        if name is None:
            self.session.dismiss_high_score()
        else:
            self.session.add_high_score(name)
            self._show_leaderboard()

    def _show_leaderboard(self):
        show_leaderboard(self.root, self.session.score_store, self.session.difficulty)

    def _show_help(self):
        help_text = """How to Play Minesweeper:

Objective: Find all mines without detonating any

Controls:
- Left click: Reveal a cell
- Right click: Flag/unflag a cell

Numbers show how many mines are adjacent to that cell.
Empty cells auto-reveal their neighbours.
You have one flag per mine.

Win by revealing all non-mine cells!"""

        messagebox.showinfo("How to Play", help_text)

    def run(self):
        """Start the GUI main loop"""
        logger.info("Starting %s game", self.session.difficulty.key)
        self.root.mainloop()
