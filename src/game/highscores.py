"""
Minesweeper High Score Store
Persists the best completion times per difficulty and a few player preferences
"""

import json
import logging
import os
from bisect import bisect_right
from datetime import datetime
from typing import Dict, List, Optional

from .difficulty import Difficulty

logger = logging.getLogger(__name__)

MAX_SCORES = 10


class HighScore:
    """Represents a single leaderboard entry"""

    def __init__(self, name: str, time_seconds: int, difficulty: Difficulty, date: str = None):
        self.name = name
        self.time_seconds = time_seconds
        self.difficulty = difficulty
        self.date = date or datetime.now().strftime("%Y-%m-%d %H:%M")

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "name": self.name,
            "time_seconds": self.time_seconds,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Dict, difficulty: Difficulty) -> 'HighScore':
        """Create from dictionary"""
        return cls(
            name=str(data.get("name", "Player")),
            time_seconds=int(data["time_seconds"]),
            difficulty=difficulty,
            date=data.get("date", ""),
        )

    def format_time(self) -> str:
        """Format time as MM:SS"""
        minutes = self.time_seconds // 60
        seconds = self.time_seconds % 60
        return f"{minutes:02d}:{seconds:02d}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, HighScore):
            return NotImplemented
        return (self.name, self.time_seconds, self.difficulty, self.date) == \
            (other.name, other.time_seconds, other.difficulty, other.date)

    def __repr__(self) -> str:
        return f"HighScore({self.name!r}, {self.time_seconds}, {self.difficulty.key})"


class HighScoreStore:
    """Manages high score data and persistence in a single JSON file.

    Every read goes back to the file, so several stores pointed at the same
    path always agree. A missing or corrupt file reads as empty.
    """

    def __init__(self, data_file: str = None):
        # Default data file location
        if data_file is None:
            data_dir = os.path.join(os.path.expanduser("~"), ".minesweeper")
            data_file = os.path.join(data_dir, "high_scores.json")

        self.data_file = data_file

    def _get_default_data(self) -> Dict:
        """Get default data structure"""
        return {
            "leaderboards": {difficulty.key: [] for difficulty in Difficulty},
            "preferences": {
                "last_difficulty": Difficulty.EASY.key,
                "player_name": "Player",
            },
        }

    def _load_data(self) -> Dict:
        """Load data from file or return the default structure"""
        default_data = self._get_default_data()
        if not os.path.exists(self.data_file):
            return default_data

        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Error loading high score data from %s: %s", self.data_file, e)
            return default_data

        if not isinstance(data, dict):
            logger.warning("Ignoring malformed high score data in %s", self.data_file)
            return default_data

        # Ensure all required keys exist
        for key in default_data:
            if not isinstance(data.get(key), dict):
                data[key] = default_data[key]
        for key in default_data["leaderboards"]:
            if not isinstance(data["leaderboards"].get(key), list):
                data["leaderboards"][key] = []
        return data

    def _save_data(self, data: Dict):
        """Save data to file"""
        try:
            directory = os.path.dirname(self.data_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.data_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning("Error saving high score data to %s: %s", self.data_file, e)

    def _entries(self, data: Dict, difficulty: Difficulty) -> List[HighScore]:
        entries = []
        for item in data["leaderboards"][difficulty.key]:
            try:
                entries.append(HighScore.from_dict(item, difficulty))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping malformed %s score %r: %s", difficulty.key, item, e)
        entries.sort(key=lambda entry: entry.time_seconds)
        return entries

    def get_top_scores(self, difficulty: Difficulty, limit: int = MAX_SCORES) -> List[HighScore]:
        """Get the fastest times for a difficulty, best first"""
        return self._entries(self._load_data(), difficulty)[:limit]

    def add_score(self, name: str, time_seconds: int, difficulty: Difficulty) -> bool:
        """
        Add a new score to the leaderboard
        Returns True if it made the top 10, False otherwise
        """
        data = self._load_data()
        entry = HighScore(name, time_seconds, difficulty)

        entries = self._entries(data, difficulty)
        rank = bisect_right([e.time_seconds for e in entries], time_seconds)
        entries.insert(rank, entry)
        entries = entries[:MAX_SCORES]

        data["leaderboards"][difficulty.key] = [e.to_dict() for e in entries]
        self._save_data(data)
        logger.info("Recorded %s time %ds for %s", difficulty.key, time_seconds, name)

        return rank < MAX_SCORES

    def would_be_top_score(self, time_seconds: int, difficulty: Difficulty) -> Optional[int]:
        """Return the 0-based rank a time would take, or None if it would not place"""
        times = [entry.time_seconds for entry in self.get_top_scores(difficulty)]
        rank = bisect_right(times, time_seconds)
        if rank >= MAX_SCORES:
            return None
        return rank

    def get_last_difficulty(self) -> Difficulty:
        """Get the last played difficulty"""
        name = self._load_data()["preferences"].get("last_difficulty", Difficulty.EASY.key)
        try:
            return Difficulty.from_name(str(name))
        except ValueError:
            return Difficulty.EASY

    def set_last_difficulty(self, difficulty: Difficulty):
        """Set the last played difficulty"""
        data = self._load_data()
        data["preferences"]["last_difficulty"] = difficulty.key
        self._save_data(data)

    def get_player_name(self) -> str:
        """Get the remembered player name"""
        return str(self._load_data()["preferences"].get("player_name", "Player"))

    def set_player_name(self, name: str):
        """Set the player name"""
        data = self._load_data()
        data["preferences"]["player_name"] = name
        self._save_data(data)
