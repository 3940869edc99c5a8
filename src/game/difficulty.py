"""
Difficulty presets for minesweeper
"""

from enum import Enum


class Difficulty(Enum):
    """Difficulty tiers as (width, height, mines, display name)"""
    EASY = (9, 9, 10, "Easy")
    MEDIUM = (10, 10, 15, "Medium")
    HARD = (11, 11, 20, "Hard")

    def __init__(self, width: int, height: int, mines: int, display_name: str):
        self.width = width
        self.height = height
        self.mines = mines
        self.display_name = display_name

    @property
    def key(self) -> str:
        """Lowercase name used in storage and on the command line"""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> 'Difficulty':
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(d.key for d in cls)
            raise ValueError(f"Unknown difficulty '{name}' (choose from {choices})") from None
