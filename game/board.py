"""
Board for the TicTacToe engine.
Nine cells in row-major order:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from .config import GameConfig
from .errors import InvalidMove


class Mark(Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


Cell = Optional[Mark]


def to_mark(value: Union[Mark, str, None]) -> Cell:
    """
    Convert a loose cell value into a Mark.

    Accepts Mark, "X"/"O" (any case), or None/""/" " for an empty cell.
    """
    if value is None or isinstance(value, Mark):
        return value

    text = str(value).strip().upper()
    if text == "":
        return None

    try:
        return Mark(text)
    except ValueError:
        raise ValueError(f"Unknown cell value: {value!r}")


class Board:
    """
    The 3x3 TicTacToe board.

    None means empty, otherwise the Mark in that cell.
    """

    def __init__(self, cells: Optional[Iterable[Cell]] = None):
        if cells is None:
            self._cells: List[Cell] = [None] * GameConfig.CELL_COUNT
        else:
            self._cells = list(cells)
            if len(self._cells) != GameConfig.CELL_COUNT:
                raise ValueError(
                    f"Board needs {GameConfig.CELL_COUNT} cells, got {len(self._cells)}"
                )

    @classmethod
    def from_cells(cls, cells: Iterable[Union[Mark, str, None]]) -> "Board":
        """Build a board from a sequence like ["X", "O", "", ...]."""
        return cls([to_mark(value) for value in cells])

    @staticmethod
    def in_range(index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < GameConfig.CELL_COUNT

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return "Board(%r)" % ("".join(cell.value if cell else "." for cell in self._cells))

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Snapshot of all nine cells."""
        return tuple(self._cells)

    def is_occupied(self, index: int) -> bool:
        """False for empty cells and for indices outside 0-8."""
        return self.in_range(index) and self._cells[index] is not None

    def place(self, index: int, mark: Mark) -> None:
        """
        Put a mark in an empty cell.

        Args:
            index: Cell index (0-8).
            mark: Mark to place.

        Raises:
            InvalidMove: If the index is out of range or the cell is taken.
        """
        if not self.in_range(index):
            raise InvalidMove(f"Invalid position {index!r}. Must be 0-8.")

        if self._cells[index] is not None:
            raise InvalidMove(
                f"Cell {index} is already occupied by {self._cells[index].value}"
            )

        self._cells[index] = mark

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def is_empty(self) -> bool:
        return all(cell is None for cell in self._cells)

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Indices in ascending order.
        """
        return [index for index, cell in enumerate(self._cells) if cell is None]

    def clone(self) -> "Board":
        """Copy of the board for hypothetical moves."""
        return Board(self._cells)

    def print_board(self):
        """Print the board to console."""
        size = GameConfig.BOARD_SIZE
        print()
        for row in range(size):
            row_cells = self._cells[row * size:(row + 1) * size]
            print(" " + " | ".join(cell.value if cell else " " for cell in row_cells))
            if row < size - 1:
                print("---+---+---")
