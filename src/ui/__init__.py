"""
UI package initialization
"""

from .gui import MinesweeperGUI

__all__ = ['MinesweeperGUI']
