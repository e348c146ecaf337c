"""
Errors raised by the TicTacToe engine.
"""


class InvalidMove(ValueError):
    """
    A move was rejected: out-of-range index, occupied cell, wrong mark,
    or the game is already over. The game state is left unchanged.
    """
    
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NoMoveAvailable(RuntimeError):
    """The opponent was asked for a move on a board with no empty cell."""
