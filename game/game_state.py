"""
Game state for the TicTacToe engine.
Tracks the board, whose turn it is, the result, and the selected mode.
"""

from enum import Enum
from typing import Optional, List, Tuple, Union
from dataclasses import dataclass, field

from .board import Board, Mark
from .config import GameConfig


class Difficulty(Enum):
    """Computer opponent difficulty levels."""
    EASY = "easy"        # Mostly random
    MEDIUM = "medium"    # Win, block, center, corners
    HARD = "hard"        # Medium plus threat-making corners
    EXPERT = "expert"    # Full minimax

    @classmethod
    def from_value(cls, value: Union["Difficulty", str, None]) -> "Difficulty":
        """
        Look up a difficulty by value.

        Anything unrecognized falls back to MEDIUM.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MEDIUM


class GameMode(Enum):
    """Who plays O."""
    TWO_PLAYER = "two-player"
    COMPUTER = "computer"


class GameStatus(Enum):
    """Turn controller states."""
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # 0 for the opening move


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board
    - Current mark to move
    - Move history
    - Game status (ongoing, won, draw)
    - Selected mode and difficulty
    """

    board: Board = field(default_factory=Board)

    # Current mark's turn
    current_player: Mark = Mark(GameConfig.FIRST_PLAYER)

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False
    is_game_over: bool = False

    # Settings carried across resets
    difficulty: Difficulty = Difficulty(GameConfig.DEFAULT_DIFFICULTY)
    mode: GameMode = GameMode(GameConfig.DEFAULT_MODE)

    @property
    def status(self) -> GameStatus:
        return GameStatus.GAME_OVER if self.is_game_over else GameStatus.AWAITING_MOVE

    @classmethod
    def fresh(
        cls,
        difficulty: Optional[Difficulty] = None,
        mode: Optional[GameMode] = None
    ) -> "GameState":
        """A new game: empty board, first player to move."""
        state = cls()
        if difficulty is not None:
            state.difficulty = difficulty
        if mode is not None:
            state.mode = mode
        return state

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.clone(),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
            difficulty=self.difficulty,
            mode=self.mode
        )

    def print_board(self):
        """Print the board and game info to console."""
        self.board.print_board()

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
