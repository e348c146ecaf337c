"""
Tests for the computer opponent: heuristic tiers, minimax and dispatch.
"""

import random
from functools import lru_cache

import pytest

from game.board import Board, Mark
from game.errors import NoMoveAvailable
from game.game_state import Difficulty
from game.win_checker import WinChecker
from opponent import (
    AIPlayer, HeuristicPlayer, OpponentConfig, StrategySelector,
    find_winning_move, would_create_threat,
)

CORNERS = {0, 2, 6, 8}


class FixedRandom:
    """random() always returns the same value; choice() stays seeded."""

    def __init__(self, value, seed=0):
        self.value = value
        self._rng = random.Random(seed)

    def random(self):
        return self.value

    def choice(self, seq):
        return self._rng.choice(seq)


@lru_cache(maxsize=None)
def expert_move(cells, mark):
    return AIPlayer(mark).get_best_move(Board(cells))


def expert_never_loses(board, to_move, expert_mark, checker=WinChecker()):
    """Play every opponent reply against Expert; False if any line loses."""
    winner = checker.check_winner(board)
    if winner is not None:
        return winner == expert_mark
    if board.is_full():
        return True

    if to_move == expert_mark:
        replies = [expert_move(board.cells, expert_mark)]
    else:
        replies = board.empty_cells()

    for index in replies:
        child = board.clone()
        child.place(index, to_move)
        if not expert_never_loses(child, to_move.opposite(), expert_mark, checker):
            return False
    return True


# ==================== find_winning_move ====================

def test_find_winning_move_completes_line():
    board = Board.from_cells(["X", "X", "", "", "", "", "", "", ""])
    assert find_winning_move(board, Mark.X) == 2

    board = Board.from_cells(["", "", "", "O", "O", "", "", "", ""])
    assert find_winning_move(board, Mark.O) == 5

    board = Board.from_cells(["X", "", "X", "", "", "", "", "", ""])
    assert find_winning_move(board, Mark.X) == 1


def test_find_winning_move_ignores_blocked_lines():
    board = Board.from_cells(["X", "X", "O", "", "", "", "", "", ""])

    assert find_winning_move(board, Mark.X) is None
    assert find_winning_move(Board(), Mark.O) is None


def test_would_create_threat():
    board = Board.from_cells(["O", "", "", "", "X", "", "", "", ""])

    assert would_create_threat(board, 2, Mark.O)
    assert not would_create_threat(Board(), 0, Mark.O)
    # The board itself is untouched
    assert not board.is_occupied(2)


# ==================== Medium ====================

def test_medium_takes_win_before_block():
    board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])
    player = HeuristicPlayer(random.Random(0))

    assert player.medium_move(board, Mark.O) == 2
    assert player.medium_move(board, Mark.X) == 5


def test_medium_blocks():
    board = Board.from_cells(["X", "X", "", "", "O", "", "", "", ""])
    player = HeuristicPlayer(random.Random(0))

    assert player.medium_move(board, Mark.O) == 2


def test_medium_takes_center():
    player = HeuristicPlayer(random.Random(0))

    assert player.medium_move(Board(), Mark.O) == 4


@pytest.mark.parametrize("seed", range(20))
def test_medium_answers_center_with_corner(seed):
    board = Board.from_cells(["", "", "", "", "X", "", "", "", ""])
    player = HeuristicPlayer(random.Random(seed))

    assert player.medium_move(board, Mark.O) in CORNERS


# ==================== Hard ====================

def test_hard_prefers_threat_corners():
    # X center and bottom edge, O top edge: only 0 and 2 line up with O
    board = Board.from_cells(["", "O", "", "", "X", "", "", "X", ""])

    hard_moves = {HeuristicPlayer(random.Random(seed)).hard_move(board, Mark.O)
                  for seed in range(50)}
    medium_moves = {HeuristicPlayer(random.Random(seed)).medium_move(board, Mark.O)
                    for seed in range(50)}

    assert hard_moves == {0, 2}
    assert medium_moves == CORNERS


def test_hard_still_wins_and_blocks():
    player = HeuristicPlayer(random.Random(0))

    win = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])
    assert player.hard_move(win, Mark.O) == 2

    block = Board.from_cells(["X", "X", "", "", "O", "", "", "", ""])
    assert player.hard_move(block, Mark.O) == 2


# ==================== Easy ====================

def test_easy_smart_branch_plays_medium():
    player = HeuristicPlayer(FixedRandom(0.1))

    assert player.easy_move(Board(), Mark.O) == 4


def test_easy_random_branch_plays_any_empty_cell():
    board = Board.from_cells(["X", "X", "", "", "O", "", "", "", ""])
    player = HeuristicPlayer(FixedRandom(0.9))
    moves = {player.easy_move(board, Mark.O) for _ in range(200)}

    assert moves <= set(board.empty_cells())
    # Misses the block at least sometimes
    assert len(moves) > 1


def test_easy_smart_chance_comes_from_config():
    class AlwaysSmart(OpponentConfig):
        EASY_SMART_MOVE_CHANCE = 1.0

    player = HeuristicPlayer(random.Random(0), AlwaysSmart())
    board = Board.from_cells(["X", "X", "", "", "O", "", "", "", ""])

    assert all(player.easy_move(board, Mark.O) == 2 for _ in range(20))


# ==================== Expert (minimax) ====================

def test_expert_takes_own_win_over_block():
    board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])

    assert AIPlayer(Mark.O).get_best_move(board) == 2


def test_expert_blocks():
    board = Board.from_cells(["X", "X", "", "", "O", "", "", "", ""])

    assert AIPlayer(Mark.O).get_best_move(board) == 2


def test_expert_opening_move_is_pinned():
    ai = AIPlayer(Mark.X)
    board = Board()

    assert ai.get_best_move(board) == 0
    assert ai.moves_evaluated > 0
    # Search never touches the given board
    assert board.is_empty()


def test_expert_prefers_faster_win():
    # O wins now at 6 (column 0); 4 and 8 also force a win, one turn later
    board = Board.from_cells(["O", "X", "X", "O", "", "", "", "X", ""])

    assert AIPlayer(Mark.O).get_best_move(board) == 6


def test_minimax_scores():
    ai = AIPlayer(Mark.O)
    config = OpponentConfig()

    won = Board.from_cells(["O", "O", "O", "X", "X", "", "", "", ""])
    assert ai.minimax(won, 0, False) == config.WIN_SCORE

    lost = Board.from_cells(["X", "X", "X", "O", "O", "", "", "", ""])
    assert ai.minimax(lost, 3, True) == -config.WIN_SCORE + 3

    drawn = Board.from_cells("XOXXOOOXX")
    assert ai.minimax(drawn, 8, True) == config.DRAW_SCORE


@pytest.mark.parametrize("depth", range(9))
def test_win_draw_loss_never_collide(depth):
    config = OpponentConfig()
    win = config.WIN_SCORE - depth
    loss = -config.WIN_SCORE + depth

    assert win > config.DRAW_SCORE > loss


def test_expert_never_loses_as_o():
    assert expert_never_loses(Board(), Mark.X, Mark.O)


def test_expert_never_loses_as_x():
    assert expert_never_loses(Board(), Mark.X, Mark.X)


def test_expert_vs_expert_draws():
    checker = WinChecker()
    board = Board()
    mark = Mark.X

    while not board.is_full() and checker.check_winner(board) is None:
        board.place(expert_move(board.cells, mark), mark)
        mark = mark.opposite()

    assert checker.check_draw(board)


# ==================== Strategy selector ====================

def test_selector_rejects_full_board():
    selector = StrategySelector(random.Random(0))

    with pytest.raises(NoMoveAvailable):
        selector.choose_move(Board.from_cells("XOXXOOOXX"), Mark.O, Difficulty.EXPERT)


def test_selector_dispatch():
    selector = StrategySelector(random.Random(0))
    board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])

    for difficulty in (Difficulty.MEDIUM, Difficulty.HARD, Difficulty.EXPERT):
        assert selector.choose_move(board, Mark.O, difficulty) == 2

    # Easy always returns an empty cell
    for _ in range(20):
        assert selector.choose_move(board, Mark.O, Difficulty.EASY) in board.empty_cells()


def test_selector_unknown_difficulty_plays_medium():
    selector = StrategySelector(random.Random(0))

    assert selector.choose_move(Board(), Mark.O, "nightmare") == 4
    assert Difficulty.from_value("nightmare") == Difficulty.MEDIUM
    assert Difficulty.from_value(None) == Difficulty.MEDIUM
    assert Difficulty.from_value(" EXPERT ") == Difficulty.EXPERT


def test_selector_does_not_touch_board():
    selector = StrategySelector(random.Random(0))
    board = Board.from_cells(["X", "", "", "", "", "", "", "", ""])

    for difficulty in Difficulty:
        selector.choose_move(board, Mark.O, difficulty)

    assert board == Board.from_cells(["X", "", "", "", "", "", "", "", ""])


def test_selector_is_reproducible_with_seed():
    board = Board.from_cells(["", "", "", "", "X", "", "", "", ""])

    first = [StrategySelector(random.Random(11)).choose_move(board, Mark.O, Difficulty.EASY)
             for _ in range(5)]
    second = [StrategySelector(random.Random(11)).choose_move(board, Mark.O, Difficulty.EASY)
              for _ in range(5)]

    assert first == second
