"""
AI player for the TicTacToe engine (Expert difficulty).
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional

from game.board import Board, Mark
from game.errors import NoMoveAvailable
from game.win_checker import WinChecker
from .config import OpponentConfig


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI searches the whole game tree, so it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Wins are scored higher the sooner they happen and losses lower the
    sooner they happen.
    """

    def __init__(self, player: Mark = Mark.O, config: Optional[OpponentConfig] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            config: Opponent configuration.
        """
        self.player = player
        self.config = config or OpponentConfig()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Cells are tried in ascending order and only a strictly better
        score replaces the current pick, so ties go to the lowest index.

        Args:
            board: Current board. It is not modified.

        Returns:
            Index of the best move.

        Raises:
            NoMoveAvailable: If the board has no empty cell.
        """
        self.moves_evaluated = 0

        valid_moves = board.empty_cells()

        if not valid_moves:
            raise NoMoveAvailable("No empty cell left for the AI")

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            # Try this move
            new_board = board.clone()
            new_board.place(index, self.player)

            score = self.minimax(new_board, depth=0, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = index

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm.

        Args:
            board: Position to evaluate.
            depth: Moves played since the root move.
            is_maximizing: True if it's the AI's turn.

        Returns:
            The score of the position for the AI.
        """
        self.moves_evaluated += 1

        # A winner here was made by the side that just moved
        if self.win_checker.check_winner(board) is not None:
            if is_maximizing:
                return -self.config.WIN_SCORE + depth
            return self.config.WIN_SCORE - depth

        valid_moves = board.empty_cells()

        if not valid_moves:
            return self.config.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for index in valid_moves:
                new_board = board.clone()
                new_board.place(index, self.player)
                score = self.minimax(new_board, depth + 1, False)
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = float('inf')
            opponent = self.player.opposite()
            for index in valid_moves:
                new_board = board.clone()
                new_board.place(index, opponent)
                score = self.minimax(new_board, depth + 1, True)
                min_score = min(min_score, score)
            return min_score
