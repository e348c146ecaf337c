"""
Game configuration for the TicTacToe engine.
Turn order, default mode and difficulty, and debug output.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Values are plain strings so they can be read before the enums load.
    """
    
    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 in row-major order
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE
    
    # ==================== PLAYERS ====================
    FIRST_PLAYER = "X"      # X always opens a fresh game
    COMPUTER_MARK = "O"     # The computer plays O in computer mode
    
    # ==================== DEFAULTS ====================
    DEFAULT_MODE = "two-player"   # "two-player" or "computer"
    DEFAULT_DIFFICULTY = "medium" # "easy", "medium", "hard", "expert"
    
    # Delay the presentation layer should wait before asking for the
    # computer's reply (milliseconds). The engine itself never sleeps.
    COMPUTER_MOVE_DELAY_MS = 500
    
    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
