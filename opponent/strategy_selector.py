"""
Strategy selector for the TicTacToe engine.
Picks the computer's move according to the configured difficulty.
"""

import random
from typing import Optional, Union

from game.board import Board, Mark
from game.errors import NoMoveAvailable
from game.game_state import Difficulty
from .ai_player import AIPlayer
from .config import OpponentConfig
from .heuristics import HeuristicPlayer


class StrategySelector:
    """
    Dispatches to one of the four opponent strategies.

    Easy   -> mostly random, sometimes Medium
    Medium -> win / block / center / corners
    Hard   -> Medium plus threat-making corners
    Expert -> minimax

    Unknown difficulties play Medium.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[OpponentConfig] = None
    ):
        self.config = config or OpponentConfig()
        self.heuristics = HeuristicPlayer(rng, self.config)

        # Minimax players, one per mark
        self._ai_players = {}

    @property
    def rng(self) -> random.Random:
        return self.heuristics.rng

    def choose_move(
        self,
        board: Board,
        ai_mark: Mark,
        difficulty: Union[Difficulty, str]
    ) -> int:
        """
        Choose the computer's next cell.

        Args:
            board: Current board. It is not modified.
            ai_mark: Mark the computer plays.
            difficulty: Difficulty level (enum or its string value).

        Returns:
            Index of an empty cell.

        Raises:
            NoMoveAvailable: If the board is full. The turn controller never
                asks on a finished game, so this is a programming error.
        """
        if board.is_full():
            raise NoMoveAvailable("Opponent asked to move on a full board")

        level = Difficulty.from_value(difficulty)

        if level == Difficulty.EASY:
            move = self.heuristics.easy_move(board, ai_mark)
        elif level == Difficulty.HARD:
            move = self.heuristics.hard_move(board, ai_mark)
        elif level == Difficulty.EXPERT:
            move = self._ai_player(ai_mark).get_best_move(board)
        else:
            move = self.heuristics.medium_move(board, ai_mark)

        if self.config.DEBUG_MODE:
            print(f"Opponent ({level.value}) plays {ai_mark.value} at {move}")

        return move

    def _ai_player(self, mark: Mark) -> AIPlayer:
        if mark not in self._ai_players:
            self._ai_players[mark] = AIPlayer(mark, self.config)
        return self._ai_players[mark]
