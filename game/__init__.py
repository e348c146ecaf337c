"""
TicTacToe Engine
================
Game state machine for TicTacToe: board, rules, and turn control.
The computer opponent lives in the opponent package.

Cells are numbered 0-8 in row-major order. X always moves first.
"""

__version__ = "1.0.0"

from .errors import InvalidMove, NoMoveAvailable
from .board import Board, Mark
from .game_state import GameState, Difficulty, GameMode, GameStatus, Move
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .turn_controller import TurnController, GameListener
