"""
Minesweeper Game - Main Entry Point
"""

import argparse
import logging
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from game import Difficulty, GameSession, HighScoreStore
from ui.gui import MinesweeperGUI


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play minesweeper")
    parser.add_argument(
        "--difficulty",
        choices=[d.key for d in Difficulty],
        help="Difficulty to start with (defaults to the last one played)"
    )
    parser.add_argument("--scores-file", help="Path of the high score JSON file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the minesweeper game"""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    store = HighScoreStore(args.scores_file)
    if args.difficulty:
        difficulty = Difficulty.from_name(args.difficulty)
    else:
        difficulty = store.get_last_difficulty()

    try:
        game = MinesweeperGUI(GameSession(difficulty, store))
        game.run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
