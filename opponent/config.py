"""
Opponent configuration for the TicTacToe engine.
Settings for the heuristic tiers and the minimax search.
"""


class OpponentConfig:
    """
    Configuration class for the computer opponent.
    """
    
    # ==================== BOARD POSITIONS ====================
    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    
    # ==================== EASY ====================
    # Chance that Easy plays a Medium move instead of a random one
    EASY_SMART_MOVE_CHANCE = 0.3
    
    # ==================== EXPERT (MINIMAX) ====================
    # A win scores WIN_SCORE minus its depth, a loss the negative.
    # Depth never exceeds 8, so wins stay above draws and draws above losses.
    WIN_SCORE = 10
    DRAW_SCORE = 0
    
    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
