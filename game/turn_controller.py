"""
Turn controller for the TicTacToe engine.

Owns the single live GameState and is the only thing that changes it.

Game flow:
1. A player submits a move for the mark whose turn it is
2. The move is validated and placed
3. The win checker decides: win, draw, or next turn
4. In computer mode, O's reply comes from the strategy selector and is
   submitted the same way as a player move
"""

import random
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from .board import Board, Mark, to_mark
from .config import GameConfig
from .errors import InvalidMove
from .game_state import Difficulty, GameMode, GameState, GameStatus, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker

if TYPE_CHECKING:
    from opponent.strategy_selector import StrategySelector


class GameListener:
    """
    Receives game events. Override the hooks you need.
    """

    def move_applied(self, index: int, mark: Mark):
        pass

    def game_won(self, mark: Mark, winning_line: Tuple[int, int, int]):
        pass

    def game_draw(self):
        pass

    def turn_changed(self, mark: Mark):
        pass

    def invalid_move(self, reason: str):
        pass


class TurnController:
    """
    State machine for one TicTacToe table.

    States:
    - AWAITING_MOVE: current_player may move
    - GAME_OVER: won or drawn, only reset() leaves it

    Rejected moves raise InvalidMove and leave the state untouched.
    """

    def __init__(
        self,
        selector: Optional["StrategySelector"] = None,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None,
        auto_reply: bool = False
    ):
        """
        Initialize the controller.

        Args:
            selector: Opponent used in computer mode.
            rng: Random source for the default selector.
            config: Game configuration.
            auto_reply: If True, the computer answers right after an
                accepted human move instead of waiting for computer_move().
        """
        if selector is None:
            # opponent imports game, so load it only when needed
            from opponent.strategy_selector import StrategySelector
            selector = StrategySelector(rng)

        self.config = config or GameConfig()
        self.selector = selector
        self.auto_reply = auto_reply
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.computer_mark = Mark(self.config.COMPUTER_MARK)

        self.listeners: List[GameListener] = []
        self.state = GameState.fresh(
            difficulty=Difficulty.from_value(self.config.DEFAULT_DIFFICULTY),
            mode=GameMode(self.config.DEFAULT_MODE)
        )

    # ==================== LISTENERS ====================

    def add_listener(self, listener: GameListener):
        self.listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        self.listeners.remove(listener)

    def _emit(self, event: str, *args):
        for listener in list(self.listeners):
            getattr(listener, event)(*args)

    # ==================== READ-ONLY VIEW ====================

    @property
    def board(self) -> Board:
        """Copy of the live board."""
        return self.state.board.clone()

    @property
    def current_player(self) -> Mark:
        return self.state.current_player

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def winner(self) -> Optional[Mark]:
        return self.state.winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.state.winning_line

    @property
    def mode(self) -> GameMode:
        return self.state.mode

    @property
    def difficulty(self) -> Difficulty:
        return self.state.difficulty

    @property
    def is_computer_turn(self) -> bool:
        """True when the computer should move next."""
        return (
            self.state.mode == GameMode.COMPUTER
            and not self.state.is_game_over
            and self.state.current_player == self.computer_mark
        )

    # ==================== COMMANDS ====================

    def submit_move(self, index: int, mark: Union[Mark, str, None] = None) -> GameState:
        """
        Submit a player move.

        Args:
            index: Cell to place in (0-8).
            mark: Mark being placed. Defaults to the mark whose turn it is.

        Returns:
            Copy of the game state after the move (and after the computer's
            reply when auto_reply is on).

        Raises:
            InvalidMove: If the move breaks a rule. State is unchanged.
        """
        if self.is_computer_turn:
            self._reject("It's the computer's turn")

        try:
            mark = to_mark(mark)
        except ValueError:
            self._reject(f"Unknown mark {mark!r}")

        self._apply_move(index, mark or self.state.current_player)

        if self.auto_reply and self.is_computer_turn:
            self.computer_move()

        return self.state.copy()

    def computer_move(self) -> int:
        """
        Let the computer play its turn.

        Returns:
            The cell the computer played.

        Raises:
            InvalidMove: If it is not the computer's turn.
        """
        if not self.is_computer_turn:
            self._reject("It's not the computer's turn")

        index = self.selector.choose_move(
            self.state.board.clone(),
            self.computer_mark,
            self.state.difficulty
        )
        self._apply_move(index, self.computer_mark)
        return index

    def reset(self) -> GameState:
        """Start a new game, keeping mode and difficulty."""
        self.state = GameState.fresh(
            difficulty=self.state.difficulty,
            mode=self.state.mode
        )

        if self.config.DEBUG_MODE:
            print("Game reset!")

        self._emit("turn_changed", self.state.current_player)
        return self.state.copy()

    def set_mode(self, mode: Union[GameMode, str]) -> GameState:
        """Switch between two-player and computer mode. Starts a new game."""
        self.state.mode = GameMode(mode)
        return self.reset()

    def toggle_mode(self) -> GameState:
        if self.state.mode == GameMode.TWO_PLAYER:
            return self.set_mode(GameMode.COMPUTER)
        return self.set_mode(GameMode.TWO_PLAYER)

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> GameState:
        """Change the computer's difficulty. Starts a new game."""
        self.state.difficulty = Difficulty.from_value(difficulty)
        return self.reset()

    # ==================== INTERNALS ====================

    def _reject(self, reason: str):
        if self.config.DEBUG_MODE:
            print(f"Invalid move: {reason}")
        self._emit("invalid_move", reason)
        raise InvalidMove(reason)

    def _apply_move(self, index: int, mark: Mark):
        result = self.validator.validate_move(self.state, index, mark)
        if not result.is_valid:
            self._reject(result.error_message)

        state = self.state
        state.board.place(index, mark)
        state.moves.append(Move(mark=mark, index=index, move_number=len(state.moves)))

        self.win_checker.update_game_state(state)
        if not state.is_game_over:
            state.current_player = mark.opposite()

        # State is final before any listener runs
        if self.config.DEBUG_MODE:
            print(f"{mark.value} moves to {index}")
            if state.is_game_over:
                state.print_board()

        self._emit("move_applied", index, mark)

        if state.winner is not None:
            self._emit("game_won", state.winner, state.winning_line)
        elif state.is_draw:
            self._emit("game_draw")
        else:
            self._emit("turn_changed", state.current_player)
