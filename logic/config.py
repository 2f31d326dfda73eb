"""
Game configuration for TicTacToe.
Board layout, marks, and the cell groups the computer uses.
"""


class GameConfig:
    """
    Configuration class for game settings.
    
    Positions are numbered 1-9, left to right and top to bottom:
         
         1 | 2 | 3
        ---+---+---
         4 | 5 | 6
        ---+---+---
         7 | 8 | 9
    """
    
    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9
    FIRST_POSITION = 1
    LAST_POSITION = NUM_CELLS
    
    # ==================== MARKS ====================
    # Glyph shown for each mark (keyed by Mark.value)
    MARK_GLYPHS = {
        "X": "X",
        "O": "O",
    }
    
    # Player 1 always plays X and moves first
    FIRST_MARK = "X"
    
    # In single player mode the computer is player 2
    COMPUTER_MARK = "O"
    
    # ==================== CELL GROUPS ====================
    # Used by the computer's move priorities
    CENTER_POSITION = 5
    CORNER_POSITIONS = (1, 3, 7, 9)
    SIDE_POSITIONS = (2, 4, 6, 8)
