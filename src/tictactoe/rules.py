"""
Win / draw detection. All functions are pure: they only read the board.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.cell import Cell

Line = tuple[Cell, Cell, Cell]

# 3 rows, 3 columns, 2 diagonals. Checked in this order.
LINES: tuple[Line, ...] = (
    *((Cell(row, 0), Cell(row, 1), Cell(row, 2)) for row in range(3)),
    *((Cell(0, col), Cell(1, col), Cell(2, col)) for col in range(3)),
    (Cell(0, 0), Cell(1, 1), Cell(2, 2)),
    (Cell(0, 2), Cell(1, 1), Cell(2, 0)),
)


@dataclass(frozen=True)
class Outcome:
    """Derived from a board whenever needed, never stored."""

    status: Status
    winner: Optional[Mark] = None

    @classmethod
    def ongoing(cls) -> Self:
        return cls(Status.ONGOING)

    @classmethod
    def draw(cls) -> Self:
        return cls(Status.DRAW)

    @classmethod
    def win(cls, mark: Mark) -> Self:
        return cls(Status.WIN, mark)

    @property
    def is_terminal(self) -> bool:
        return self.status != Status.ONGOING


def winning_line(board: Board) -> Optional[Line]:
    """First line whose three cells carry the same mark"""
    for line in LINES:
        first, second, third = (board.state(cell) for cell in line)
        if first.mark is not None and first == second == third:
            return line
    return None


def winner(board: Board) -> Optional[Mark]:
    line = winning_line(board)
    if line is None:
        return None
    return board.state(line[0]).mark


def is_draw(board: Board) -> bool:
    return board.is_full() and winner(board) is None


def outcome(board: Board) -> Outcome:
    """Win takes precedence over Draw over Ongoing"""
    mark = winner(board)
    if mark is not None:
        return Outcome.win(mark)
    if board.is_full():
        return Outcome.draw()
    return Outcome.ongoing()
