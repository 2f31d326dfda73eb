"""
AI player for TicTacToe.
Picks moves from a fixed list of priorities - no game-tree search.
"""

import random
from typing import Optional, Sequence
from .game_state import GameState, Mark
from .win_checker import WinChecker
from .config import GameConfig
from .errors import LogicFaultError


class AIPlayer:
    """
    An AI that plays TicTacToe using a simple priority list.
    
    First rule that applies wins:
    1. Win now if possible
    2. Block the opponent's win
    3. Take the center
    4. Take a random empty corner
    5. Take a random empty side
    
    This is NOT perfect play - it can be beaten by a fork.
    """
    
    def __init__(self, mark: Mark = Mark(GameConfig.COMPUTER_MARK), rng: Optional[random.Random] = None):
        """
        Initialize the AI player.
        
        Args:
            mark: Which mark the AI plays (default: O)
            rng: Random source for corner/side choice. A fresh unseeded
                one is used if not given.
        """
        self.mark = mark
        self.win_checker = WinChecker()
        self.rng = rng if rng is not None else random.Random()
        
        # Which rule picked the last move (for debugging)
        self.last_reason: Optional[str] = None
    
    def get_best_move(self, game_state: GameState) -> int:
        """
        Get the move for the current position.
        
        Args:
            game_state: Current game state.
        
        Returns:
            Position (1-9) of the chosen move.
        
        Raises:
            LogicFaultError: If the board has no empty cell.
        """
        empty = game_state.get_empty_positions()
        if not empty:
            raise LogicFaultError("Computer asked to move on a full board")
        
        mark = self.mark
        opponent = mark.opposite()
        
        for position in empty:
            if self.win_checker.would_win(game_state, mark, position):
                self.last_reason = "win"
                return position
        
        for position in empty:
            if self.win_checker.would_win(game_state, opponent, position):
                self.last_reason = "block"
                return position
        
        if game_state.is_empty(GameConfig.CENTER_POSITION):
            self.last_reason = "center"
            return GameConfig.CENTER_POSITION
        
        corner = self._random_empty(game_state, GameConfig.CORNER_POSITIONS)
        if corner is not None:
            self.last_reason = "corner"
            return corner
        
        side = self._random_empty(game_state, GameConfig.SIDE_POSITIONS)
        if side is not None:
            self.last_reason = "side"
            return side
        
        # Center, corners and sides cover every cell
        raise LogicFaultError(f"No move found for empty cells {empty}")
    
    def _random_empty(self, game_state: GameState, positions: Sequence[int]) -> Optional[int]:
        """Pick uniformly among the empty members of positions."""
        candidates = [p for p in positions if game_state.is_empty(p)]
        if not candidates:
            return None
        return self.rng.choice(candidates)
