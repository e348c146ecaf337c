"""
Heuristic opponents for the TicTacToe engine (Easy, Medium and Hard).
Rule-of-thumb move selection without a full search.
"""

import random
from typing import Optional, List

from game.board import Board, Mark
from game.win_checker import WinChecker
from .config import OpponentConfig


def find_winning_move(board: Board, mark: Mark) -> Optional[int]:
    """
    Find a cell that completes a line for a mark.

    Lines are scanned in WinChecker order. A line qualifies when it holds
    two of the mark and one empty cell.

    Args:
        board: Board to look at.
        mark: Mark that would complete the line.

    Returns:
        Index of the empty cell, or None if no line can be completed.
    """
    for line in WinChecker.WINNING_LINES:
        values = [board[index] for index in line]

        if values.count(mark) == 2 and values.count(None) == 1:
            for index in line:
                if board[index] is None:
                    return index

    return None


def would_create_threat(board: Board, index: int, mark: Mark) -> bool:
    """
    Check if placing a mark makes two in a line with the third cell empty.

    The check runs on a copy; the given board is not touched.
    """
    test_board = board.clone()
    test_board.place(index, mark)

    return find_winning_move(test_board, mark) is not None


class HeuristicPlayer:
    """
    Easy, Medium and Hard computer opponents.

    Medium and Hard share one ordered policy, first rule that applies wins:
    1. Complete our own line (win)
    2. Complete the opponent's line (block)
    3. Take the center
    4. (Hard only) Take a corner that sets up two in a line
    5. Take a random corner
    6. Take a random cell

    Easy plays Medium some of the time and a random cell otherwise.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[OpponentConfig] = None
    ):
        """
        Args:
            rng: Random source for tie-breaking. Pass a seeded one in tests.
            config: Opponent configuration.
        """
        self.rng = rng or random.Random()
        self.config = config or OpponentConfig()

    def easy_move(self, board: Board, mark: Mark) -> int:
        """Random cell, with a chance of a Medium move."""
        if self.rng.random() < self.config.EASY_SMART_MOVE_CHANCE:
            return self.medium_move(board, mark)

        return self._random_cell(board)

    def medium_move(self, board: Board, mark: Mark) -> int:
        return self._policy_move(board, mark, prefer_threats=False)

    def hard_move(self, board: Board, mark: Mark) -> int:
        return self._policy_move(board, mark, prefer_threats=True)

    def _policy_move(self, board: Board, mark: Mark, prefer_threats: bool) -> int:
        # Try to win
        move = find_winning_move(board, mark)
        if move is not None:
            return move

        # Block opponent
        move = find_winning_move(board, mark.opposite())
        if move is not None:
            return move

        # Take center
        if not board.is_occupied(self.config.CENTER):
            return self.config.CENTER

        corners = self._empty_corners(board)

        if prefer_threats and corners:
            threats = [corner for corner in corners
                       if would_create_threat(board, corner, mark)]
            if threats:
                return self.rng.choice(threats)

        if corners:
            return self.rng.choice(corners)

        return self._random_cell(board)

    def _empty_corners(self, board: Board) -> List[int]:
        return [corner for corner in self.config.CORNERS if not board.is_occupied(corner)]

    def _random_cell(self, board: Board) -> int:
        return self.rng.choice(board.empty_cells())
