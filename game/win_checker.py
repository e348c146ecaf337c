"""
Win checker for the TicTacToe engine.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .board import Board, Mark
from .game_state import GameState

Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in the order they are checked
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        On a synthetic board with more than one complete line, the first
        line in WINNING_LINES decides.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as an index triple, or None.
        """
        cells = board.cells
        for line in self.WINNING_LINES:
            a, b, c = line
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        # First check if there's a winner - if so, not a draw
        if self.check_winner(board) is not None:
            return False

        return board.is_full()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        line = self.get_winning_line(game_state.board)

        if line is not None:
            game_state.winner = game_state.board[line[0]]
            game_state.winning_line = line
            game_state.is_game_over = True
        elif game_state.board.is_full():
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state
