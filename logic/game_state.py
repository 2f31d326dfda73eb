"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the moves made so far.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"
    
    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X
    
    @property
    def glyph(self) -> str:
        """Symbol used when drawing the board."""
        return GameConfig.MARK_GLYPHS[self.value]
    
    @property
    def player_number(self) -> int:
        """1 for the player who moves first, 2 for the other."""
        return 1 if self.value == GameConfig.FIRST_MARK else 2


class GameMode(Enum):
    """How the game is played. Fixed for the lifetime of a game."""
    SINGLE_PLAYER = 1   # Human (X) vs Computer (O)
    TWO_PLAYER = 2      # Two humans taking turns


class GameOutcome(Enum):
    """Status part of an Outcome."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.
    
    winner is only set when status is WIN.
    """
    status: GameOutcome
    winner: Optional[Mark] = None
    
    @property
    def is_terminal(self) -> bool:
        return self.status != GameOutcome.IN_PROGRESS
    
    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameOutcome.IN_PROGRESS)
    
    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameOutcome.DRAW)
    
    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(GameOutcome.WIN, mark)


def is_valid_position(position) -> bool:
    """True if position is an int naming one of the 9 cells."""
    # bool is an int subclass, but True/False are not positions
    if not isinstance(position, int) or isinstance(position, bool):
        return False
    return GameConfig.FIRST_POSITION <= position <= GameConfig.LAST_POSITION


def position_to_cell(position: int) -> Tuple[int, int]:
    """
    Convert a 1-9 position to a (row, col) pair.
    
    Args:
        position: Board position (1-9).
    
    Returns:
        (row, col), both 0-2.
    """
    return divmod(position - GameConfig.FIRST_POSITION, GameConfig.BOARD_SIZE)


def all_positions() -> range:
    return range(GameConfig.FIRST_POSITION, GameConfig.LAST_POSITION + 1)


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    position: int           # Position (1-9)
    move_number: int        # 0 for the first move of the game


@dataclass
class GameState:
    """
    The board and turn state of one TicTacToe game.
    
    Tracks:
    - The 3x3 board (None means empty, otherwise the Mark)
    - Whose turn it is
    - Move history
    
    The outcome is never stored here - WinChecker works it out from the board.
    """
    
    # The 3x3 board - None means empty
    board: List[List[Optional[Mark]]] = field(
        default_factory=lambda: [
            [None for _ in range(GameConfig.BOARD_SIZE)]
            for _ in range(GameConfig.BOARD_SIZE)
        ]
    )
    
    # Mark whose player moves next
    current_mark: Mark = Mark(GameConfig.FIRST_MARK)
    
    # Move history
    moves: List[Move] = field(default_factory=list)
    
    def get_cell(self, position: int) -> Optional[Mark]:
        """Get the mark at a position, or None if empty."""
        row, col = position_to_cell(position)
        return self.board[row][col]
    
    def set_cell(self, position: int, mark: Optional[Mark]):
        """Write a cell directly. Does not touch the turn."""
        row, col = position_to_cell(position)
        self.board[row][col] = mark
    
    def is_empty(self, position: int) -> bool:
        return self.get_cell(position) is None
    
    def make_move(self, position: int):
        """
        Place the current mark at position and pass the turn.
        
        The position must already be validated (see MoveValidator).
        
        Args:
            position: Board position (1-9).
        """
        self.set_cell(position, self.current_mark)
        self.moves.append(Move(
            mark=self.current_mark,
            position=position,
            move_number=len(self.moves),
        ))
        self.current_mark = self.current_mark.opposite()
    
    def get_empty_positions(self) -> List[int]:
        """
        Get all empty positions on the board.
        
        Returns:
            List of positions (1-9) in ascending order.
        """
        return [p for p in all_positions() if self.is_empty(p)]
    
    def is_full(self) -> bool:
        return not self.get_empty_positions()
    
    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=[[cell for cell in row] for row in self.board],
            current_mark=self.current_mark,
            moves=list(self.moves),
        )
