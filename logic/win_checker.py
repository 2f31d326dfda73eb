"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, List, Tuple
from .game_state import GameState, Mark, Outcome, position_to_cell, is_valid_position
from .errors import LogicFaultError


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """
    
    # All possible winning lines (as positions 1-9)
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (1, 2, 3),
        (4, 5, 6),
        (7, 8, 9),
        # Columns
        (1, 4, 7),
        (2, 5, 8),
        (3, 6, 9),
        # Diagonals
        (1, 5, 9),
        (3, 5, 7),
    ]
    
    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.
        
        Args:
            game_state: The current game state.
        
        Returns:
            The winning Mark, or None if no winner yet.
        
        Raises:
            LogicFaultError: If both marks own a complete line. That can't
                happen through alternating play.
        """
        winners = set()
        for line in self.WINNING_LINES:
            winner = self._check_line(game_state.board, line)
            if winner is not None:
                winners.add(winner)
        
        if len(winners) > 1:
            raise LogicFaultError("Both marks have a complete line - board is corrupt")
        
        return winners.pop() if winners else None
    
    def _check_line(
        self,
        board: List[List[Optional[Mark]]],
        line: Tuple[int, int, int]
    ) -> Optional[Mark]:
        """
        Check if a single line has a winner.
        
        Returns:
            The Mark if all 3 cells hold it, None otherwise.
        """
        marks = []
        for position in line:
            row, col = position_to_cell(position)
            mark = board[row][col]
            if mark is None:
                return None  # Empty cell, no winner on this line
            marks.append(mark)
        
        if marks[0] == marks[1] == marks[2]:
            return marks[0]
        
        return None
    
    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.
        
        Args:
            game_state: The current game state.
        
        Returns:
            True if the board is full and nobody won.
        """
        # Win beats full board (the last move can complete a line)
        if self.check_winner(game_state) is not None:
            return False
        
        return game_state.is_full()
    
    def evaluate(self, game_state: GameState) -> Outcome:
        """
        Work out the outcome of a board.
        
        Args:
            game_state: The game state.
        
        Returns:
            Outcome with status IN_PROGRESS, WIN (with winner), or DRAW.
        """
        winner = self.check_winner(game_state)
        
        if winner is not None:
            return Outcome.win(winner)
        if self.check_draw(game_state):
            return Outcome.draw()
        return Outcome.in_progress()
    
    def would_win(self, game_state: GameState, mark: Mark, position) -> bool:
        """
        Check if placing mark at position would win the game.
        
        Works on a copy - game_state is never changed.
        
        Args:
            game_state: The current game state.
            mark: The mark to try.
            position: Position to try (1-9).
        
        Returns:
            True if position is empty and the move completes a line for mark.
        """
        if not is_valid_position(position) or not game_state.is_empty(position):
            return False
        
        scratch = game_state.copy()
        scratch.set_cell(position, mark)
        
        return any(
            self._check_line(scratch.board, line) == mark
            for line in self.WINNING_LINES
        )
    
    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.
        
        Args:
            game_state: The game state.
        
        Returns:
            The winning line as positions, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(game_state.board, line) is not None:
                return line
        return None
