"""
Console driver for TicTacToe.

This script ties together:
- Prompts (game mode, positions)
- Board display
- The game engine (rules and computer opponent)

Run this script to play TicTacToe in the terminal!
"""

import os
import random
from typing import Callable, Optional

from logic.engine import GameEngine
from logic.errors import IllegalMoveError
from logic.game_state import GameMode, GameOutcome, Mark, all_positions
from logic.config import GameConfig


def format_board(engine: GameEngine) -> str:
    """
    Draw the board as text. Empty cells show their position number.
    
    Args:
        engine: The game to draw.
    
    Returns:
        The board, one line per text row.
    """
    size = GameConfig.BOARD_SIZE
    labels = []
    for position in all_positions():
        mark = engine.cell(position)
        labels.append(mark.glyph if mark is not None else str(position))
    
    lines = []
    for row in range(size):
        cells = labels[row * size:(row + 1) * size]
        lines.append("     |     |     ")
        lines.append("  " + "  |  ".join(cells) + "  ")
        if row < size - 1:
            lines.append("_____|_____|_____")
        else:
            lines.append("     |     |     ")
    return "\n".join(lines)


def select_mode(input_func: Optional[Callable[[str], str]] = None) -> GameMode:
    """Ask which mode to play until the answer is 1 or 2."""
    input_func = input_func or input
    print("Welcome to Tic-Tac-Toe!\n")
    print("Select game mode:")
    print("1. Single Player (vs Computer)")
    print("2. Two Players")
    
    answer = input_func("Enter your choice (1 or 2): ")
    while answer.strip() not in ("1", "2"):
        answer = input_func("Invalid input! Please enter 1 or 2: ")
    
    return GameMode(int(answer.strip()))


class TicTacToeGame:
    """
    Main controller for a console game.
    
    Game flow:
    1. Show the board
    2. Human enters a position, or the computer picks one
    3. Engine applies the move (illegal moves are reported and retried)
    4. Repeat until someone wins or it's a draw
    """
    
    def __init__(
        self,
        mode: GameMode,
        seed: Optional[int] = None,
        clear_screen: bool = True,
        pause: bool = True,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the game.
        
        Args:
            mode: SINGLE_PLAYER or TWO_PLAYER.
            seed: Seed for the computer's random corner/side choice.
            clear_screen: Clear the terminal before drawing the board.
            pause: Wait for Enter after errors and computer moves.
            input_func: Where answers come from (input() by default).
        """
        self.mode = mode
        self.clear_screen = clear_screen
        self.pause = pause
        self.input_func = input_func or input
        
        rng = random.Random(seed) if seed is not None else None
        self.engine = GameEngine(mode, rng=rng)
    
    def start(self) -> GameOutcome:
        """
        Play one full game.
        
        Returns:
            The final outcome status.
        """
        self._game_loop()
        return self._show_game_result()
    
    def _game_loop(self):
        """Main game loop."""
        while not self.engine.evaluate_outcome().is_terminal:
            self.display_board()
            
            if self.engine.is_computer_turn():
                self._computer_move()
            else:
                self._human_move()
    
    def _human_move(self):
        """Ask the current player for a position and try to play it."""
        player = self.engine.current_player_number()
        position = self._read_position(f"Player {player}, enter a position (1-9): ")
        
        try:
            self.engine.apply_move(position)
        except IllegalMoveError:
            print(f"Invalid move! Position {position} is already taken or out of range.")
            self._wait("Press Enter to try again...")
    
    def _computer_move(self):
        """Let the computer pick and play its move."""
        position = self.engine.play_computer_move()
        print(f"Computer chooses position {position}")
        self._wait("Press Enter to continue...")
    
    def _read_position(self, prompt: str) -> int:
        """Read answers until one is a whole number."""
        answer = self.input_func(prompt)
        while True:
            try:
                return int(answer.strip())
            except ValueError:
                answer = self.input_func(
                    "Invalid input! Please enter a number between 1 and 9: "
                )
    
    def _wait(self, prompt: str):
        if self.pause:
            self.input_func(prompt)
    
    def display_board(self):
        """Print the board with the player legend."""
        if self.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")
        
        opponent = "Computer" if self.mode == GameMode.SINGLE_PLAYER else "Player 2"
        print("\n\n\tTic Tac Toe\n")
        print(f"Player 1 ({Mark.X.glyph}) - {opponent} ({Mark.O.glyph})\n")
        print(format_board(self.engine))
        print()
    
    def _show_game_result(self) -> GameOutcome:
        """Show the final board and announce the result."""
        self.display_board()
        
        outcome = self.engine.evaluate_outcome()
        if outcome.status == GameOutcome.WIN:
            if self.mode == GameMode.SINGLE_PLAYER:
                computer = Mark(GameConfig.COMPUTER_MARK)
                print("Computer wins!" if outcome.winner == computer else "You win!")
            else:
                print(f"Player {outcome.winner.player_number} wins!")
        else:
            print("Game is a draw!")
        
        return outcome.status


def main(argv=None):
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe in the terminal")
    parser.add_argument(
        "--mode",
        type=int,
        choices=[1, 2],
        help="1 = single player vs computer, 2 = two players (asked if omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the computer's random corner/side choice"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between turns"
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Don't wait for Enter after errors and computer moves"
    )
    
    args = parser.parse_args(argv)
    
    try:
        mode = GameMode(args.mode) if args.mode else select_mode()
        
        game = TicTacToeGame(
            mode,
            seed=args.seed,
            clear_screen=not args.no_clear,
            pause=not args.no_pause
        )
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
