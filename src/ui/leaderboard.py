"""
Minesweeper Leaderboard Dialogs
Shows best times per difficulty and asks for a name after a placing win
"""

import tkinter as tk
from tkinter import Toplevel, Label, Button, Listbox, Scrollbar, Frame, simpledialog
from tkinter import ttk
from typing import List, Optional

from game import Difficulty, HighScore, HighScoreStore


def format_entries(entries: List[HighScore]) -> List[str]:
    """Format leaderboard rows as fixed-width lines"""
    if not entries:
        return ["                 No times recorded yet"]

    lines = []
    for i, entry in enumerate(entries, 1):
        # Format: "  1.   01:23   2024-12-07   Player"
        rank = f"{i:2d}."
        date_str = entry.date.split()[0] if ' ' in entry.date else entry.date[:10]
        player_str = entry.name[:15]
        lines.append(f"  {rank:<4} {entry.format_time():<8} {date_str:<12} {player_str}")
    return lines


class LeaderboardDialog:
    """Dialog window to display leaderboard"""

    def __init__(self, parent, score_store: HighScoreStore, difficulty: Difficulty):
        self.score_store = score_store
        self.current_difficulty = difficulty

        self.dialog = Toplevel(parent)
        self.dialog.title("High Scores")
        self.dialog.geometry("400x460")
        self.dialog.resizable(False, False)
        self.dialog.transient(parent)
        self.dialog.grab_set()
        self.dialog.geometry("+%d+%d" % (parent.winfo_rootx() + 50, parent.winfo_rooty() + 50))

        self._create_widgets()
        self._update_display()

    def _create_widgets(self):
        Label(self.dialog, text="Best Times", font=("Arial", 16, "bold")).pack(pady=10)

        difficulty_frame = Frame(self.dialog)
        difficulty_frame.pack(pady=5)
        Label(difficulty_frame, text="Difficulty:", font=("Arial", 10)).pack(side="left", padx=5)

        self.difficulty_var = tk.StringVar(value=self.current_difficulty.display_name)
        self.difficulty_combo = ttk.Combobox(
            difficulty_frame,
            textvariable=self.difficulty_var,
            values=[d.display_name for d in Difficulty],
            state="readonly",
            width=15
        )
        self.difficulty_combo.pack(side="left", padx=5)
        self.difficulty_combo.bind("<<ComboboxSelected>>", self._on_difficulty_changed)

        list_frame = Frame(self.dialog)
        list_frame.pack(fill="both", expand=True, padx=20, pady=10)

        self.listbox = Listbox(list_frame, font=("Courier", 10), height=12)
        scrollbar = Scrollbar(list_frame, orient="vertical", command=self.listbox.yview)
        self.listbox.configure(yscrollcommand=scrollbar.set)
        self.listbox.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        Button(self.dialog, text="Close", command=self.dialog.destroy, font=("Arial", 10)).pack(pady=10)

    def _on_difficulty_changed(self, event=None):
        selected = self.difficulty_var.get()
        self.current_difficulty = next(d for d in Difficulty if d.display_name == selected)
        self._update_display()

    def _update_display(self):
        self.listbox.delete(0, tk.END)
        for line in format_entries(self.score_store.get_top_scores(self.current_difficulty)):
            self.listbox.insert(tk.END, line)


def show_leaderboard(parent, score_store: HighScoreStore, difficulty: Difficulty):
    """Show leaderboard dialog"""
    LeaderboardDialog(parent, score_store, difficulty)


def ask_player_name(parent, difficulty: Difficulty, time_text: str, rank: int,
                    default_name: str) -> Optional[str]:
    """Congratulate a placing win and ask for the name to record; None if cancelled"""
    if rank == 0:
        message = f"New record for {difficulty.display_name}!\nTime: {time_text}\n\nEnter your name:"
    else:
        message = (f"You made #{rank + 1} on the {difficulty.display_name} leaderboard!\n"
                   f"Time: {time_text}\n\nEnter your name:")
    return simpledialog.askstring("High Score", message, initialvalue=default_name, parent=parent)
