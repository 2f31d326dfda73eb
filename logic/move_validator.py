"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, is_valid_position
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Rules:
    1. Position must be one of the 9 cells (1-9)
    2. Can only place on empty cells
    3. Game must not be over (checked by the engine, which knows the outcome)
    """
    
    def validate_move(self, game_state: GameState, position) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            position: Position to place the mark (1-9).
        
        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if position is in range
        if not is_valid_position(position):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid position {position!r}. Must be "
                    f"{GameConfig.FIRST_POSITION}-{GameConfig.LAST_POSITION}."
                )
            )
        
        # Check if cell is empty
        occupant = game_state.get_cell(position)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Position {position} is already taken by {occupant.glyph}."
            )
        
        return ValidationResult(is_valid=True)
    
    def is_legal_move(self, game_state: GameState, position) -> bool:
        """Shortcut for validate_move(...).is_valid."""
        return self.validate_move(game_state, position).is_valid
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.
        
        Args:
            game_state: Current game state.
        
        Returns:
            List of valid positions (1-9).
        """
        return game_state.get_empty_positions()
