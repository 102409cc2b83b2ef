"""The Game board holds the marks placed so far. It knows nothing about turns or winning lines."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Self

from src.core.exceptions import IllegalMoveError, OutOfRangeError
from src.core.shared_types import Mark
from src.tictactoe.cell import ALL_CELLS, BOARD_DIMENSIONS, Cell
from src.tictactoe.marks import CellState


def _empty_grid() -> list[list[CellState]]:
    num_rows, num_cols = BOARD_DIMENSIONS
    return [[CellState.EMPTY for _ in range(num_cols)] for _ in range(num_rows)]


@dataclass
class Board:
    grid: list[list[CellState]] = field(default_factory=_empty_grid)

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> Self:
        """Construct a board from snapshot tokens, one list of 3 tokens per row.

        ex. [["X", "X", "-"], ["O", "O", "-"], ["-", "-", "-"]]
        """
        grid = [[CellState.from_token(token) for token in row] for row in rows]
        return cls(grid)

    def to_rows(self) -> list[list[str]]:
        return [[state.to_token() for state in row] for row in self.grid]

    def cell_at(self, row: int, col: int) -> CellState:
        return self.state(Cell(row, col))

    def state(self, cell: Cell) -> CellState:
        self._assert_within_bounds(cell)
        return self.grid[cell.row][cell.col]

    def place(self, cell: Cell, mark: Mark) -> None:
        """Put the mark on an empty cell"""
        if self.state(cell) != CellState.EMPTY:
            raise IllegalMoveError(
                f"Cell ({cell.row}, {cell.col}) is already taken by {self.state(cell).name}."
            )
        self.grid[cell.row][cell.col] = CellState.from_mark(mark)

    @classmethod
    def from_cells(cls, cells: tuple[CellState, ...]) -> Self:
        """Inverse of `cells`"""
        num_cols = BOARD_DIMENSIONS[1]
        return cls(
            [list(cells[start : start + num_cols]) for start in range(0, len(cells), num_cols)]
        )

    def cells(self) -> tuple[CellState, ...]:
        """Row-major, hashable snapshot of the grid"""
        return tuple(state for row in self.grid for state in row)

    def clear(self) -> None:
        self.grid = _empty_grid()

    def clone(self) -> Self:
        """Independent copy. Search explores hypothetical lines on copies, never on the live board."""
        return deepcopy(self)

    def empty_cells(self) -> list[Cell]:
        """Row-major order. The search engine relies on this order for its tie-break."""
        return [cell for cell in ALL_CELLS if self.state(cell) == CellState.EMPTY]

    def is_full(self) -> bool:
        return not self.empty_cells()

    def count(self, mark: Mark) -> int:
        target = CellState.from_mark(mark)
        return sum(row.count(target) for row in self.grid)

    def is_consistent(self) -> bool:
        """X always moves first: there are as many X's as O's, or exactly one X more."""
        return self.count(Mark.X) - self.count(Mark.O) in (0, 1)

    def _assert_within_bounds(self, cell: Cell) -> None:
        if not cell.is_within_bounds():
            raise OutOfRangeError(
                f"Cell ({cell.row}, {cell.col}) is outside of the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )
