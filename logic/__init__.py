"""
Logic module for TicTacToe.
Handles game state, rules, and the computer opponent.
"""

from .config import GameConfig
from .errors import TicTacToeError, IllegalMoveError, LogicFaultError
from .game_state import GameState, GameMode, GameOutcome, Mark, Outcome
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .engine import GameEngine

__version__ = "1.0.0"
