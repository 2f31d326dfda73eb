"""
Game engine for TicTacToe.
The one object a driver talks to: it owns the game state and routes
every move through validation.
"""

import random
from typing import Optional, List, Tuple

from .game_state import GameState, GameMode, GameOutcome, Mark, Outcome
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .config import GameConfig
from .errors import IllegalMoveError


class GameEngine:
    """
    Board and turn state for a single game, plus the rules around it.
    
    apply_move() is the only way gameplay changes the board, so the turn
    always flips exactly once per accepted move.
    """
    
    def __init__(self, mode: GameMode = GameMode.TWO_PLAYER, rng: Optional[random.Random] = None):
        """
        Initialize a new game.
        
        Args:
            mode: SINGLE_PLAYER (vs computer) or TWO_PLAYER.
            rng: Random source for the computer's tie-breaks.
        """
        self._mode = mode
        self._state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Mark(GameConfig.COMPUTER_MARK), rng=rng)
    
    # ==================== READ ACCESSORS ====================
    
    @property
    def mode(self) -> GameMode:
        return self._mode
    
    @property
    def current_mark(self) -> Mark:
        """Mark of the player who moves next."""
        return self._state.current_mark
    
    @property
    def board(self) -> List[List[Optional[Mark]]]:
        """Copy of the 3x3 board."""
        return [list(row) for row in self._state.board]
    
    @property
    def move_count(self) -> int:
        return len(self._state.moves)
    
    def cell(self, position: int) -> Optional[Mark]:
        """Mark at position (1-9), or None if empty."""
        return self._state.get_cell(position)
    
    def empty_positions(self) -> List[int]:
        return self.validator.get_valid_moves(self._state)
    
    def current_player_number(self) -> int:
        return self.current_mark.player_number
    
    # ==================== MOVES ====================
    
    def is_legal_move(self, position) -> bool:
        """
        Check if position can be played right now.
        
        Out-of-range positions are just illegal, never an error.
        Nothing is legal once the game is won or drawn.
        """
        if self.evaluate_outcome().is_terminal:
            return False
        return self.validator.is_legal_move(self._state, position)
    
    def apply_move(self, position):
        """
        Place the current player's mark and pass the turn.
        
        Args:
            position: Board position (1-9).
        
        Raises:
            IllegalMoveError: If the move is not legal. Nothing changes.
        """
        if self.evaluate_outcome().is_terminal:
            raise IllegalMoveError(position, "Game is already over!")
        
        result = self.validator.validate_move(self._state, position)
        if not result.is_valid:
            raise IllegalMoveError(position, result.error_message)
        
        self._state.make_move(position)
    
    def evaluate_outcome(self) -> Outcome:
        """Work out the current outcome from the board."""
        return self.win_checker.evaluate(self._state)
    
    def would_win(self, mark: Mark, position) -> bool:
        """True if mark playing at position would win. Board is untouched."""
        return self.win_checker.would_win(self._state, mark, position)
    
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self._state)
    
    def winner_player_number(self) -> Optional[int]:
        outcome = self.evaluate_outcome()
        if outcome.status != GameOutcome.WIN:
            return None
        return outcome.winner.player_number
    
    # ==================== COMPUTER ====================
    
    def is_computer_turn(self) -> bool:
        return self._mode == GameMode.SINGLE_PLAYER and self.current_mark == self.ai.mark
    
    def select_computer_move(self) -> int:
        """
        Pick the computer's move using the AI's priorities.
        
        The AI always plays its own mark (O), whoever is to move, so its
        win check and block check never swap.
        
        Raises:
            LogicFaultError: If the board is full.
        """
        return self.ai.get_best_move(self._state)
    
    def play_computer_move(self) -> int:
        """
        Select and apply the computer's move.
        
        Returns:
            The position played.
        """
        position = self.select_computer_move()
        self.apply_move(position)
        return position
    
    def reset(self):
        """Start a new game with the same mode."""
        self._state = GameState()
