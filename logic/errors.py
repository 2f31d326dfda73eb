"""
Exceptions raised by the TicTacToe game logic.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for game logic errors."""


class IllegalMoveError(TicTacToeError):
    """
    A move was rejected (out of range, occupied, or game over).
    
    Recoverable - the driver should report it and ask again.
    The game state is never changed by a rejected move.
    """
    
    def __init__(self, position, reason: Optional[str] = None):
        self.position = position
        self.reason = reason or f"Position {position} is already taken or out of range."
        super().__init__(self.reason)


class LogicFaultError(TicTacToeError):
    """An internal invariant was broken. Not meant to be caught."""
