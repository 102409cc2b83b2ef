"""Unit tests for /src/tictactoe/board.py"""

from typing import Callable

import pytest

from src.core.exceptions import IllegalMoveError, OutOfRangeError
from src.core.shared_types import Mark
from src.tictactoe.board import Board
from src.tictactoe.cell import ALL_CELLS, Cell
from src.tictactoe.marks import CellState


# -- CREATION LOGIC ---
def test_new_board_is_empty() -> None:
    board = Board()
    for cell in ALL_CELLS:
        assert board.state(cell) == CellState.EMPTY
    assert board.empty_cells() == list(ALL_CELLS)
    assert not board.is_full()


def test_board_from_rows() -> None:
    """Snapshot tokens map onto cell states, rows top to bottom"""
    board = Board.from_rows([["X", "X", "-"], ["O", "O", "-"], ["-", "-", "-"]])
    assert board.cell_at(0, 0) == CellState.X
    assert board.cell_at(0, 1) == CellState.X
    assert board.cell_at(0, 2) == CellState.EMPTY
    assert board.cell_at(1, 0) == CellState.O
    assert board.cell_at(1, 1) == CellState.O
    assert board.cell_at(2, 2) == CellState.EMPTY


def test_to_rows_reverses_from_rows() -> None:
    rows = [["X", "O", "-"], ["-", "X", "-"], ["O", "-", "-"]]
    assert Board.from_rows(rows).to_rows() == rows


def test_cells_reverses_from_cells(board_from_picture: Callable[[str], Board]) -> None:
    board = board_from_picture("XO-/-X-/O--")
    assert Board.from_cells(board.cells()) == board
    assert board.cells()[0] == CellState.X
    assert board.cells()[4] == CellState.X
    assert board.cells()[6] == CellState.O


def test_unknown_token_is_rejected() -> None:
    with pytest.raises(KeyError):
        Board.from_rows([["Q", "-", "-"], ["-", "-", "-"], ["-", "-", "-"]])


# -- PLACING MARKS ---
def test_place_mark() -> None:
    board = Board()
    board.place(Cell(1, 2), Mark.O)
    assert board.cell_at(1, 2) == CellState.O
    assert board.state(Cell(1, 2)).mark == Mark.O
    assert Cell(1, 2) not in board.empty_cells()


def test_place_on_occupied_cell(board_from_picture: Callable[[str], Board]) -> None:
    """Occupied cell: IllegalMoveError and the mark that was there stays"""
    board = board_from_picture("X--/---/---")
    with pytest.raises(IllegalMoveError):
        board.place(Cell(0, 0), Mark.O)
    assert board.cell_at(0, 0) == CellState.X


@pytest.mark.parametrize("cell", [Cell(3, 0), Cell(0, 3), Cell(-1, 1)])
def test_place_out_of_range(cell: Cell) -> None:
    board = Board()
    with pytest.raises(OutOfRangeError):
        board.place(cell, Mark.X)
    assert board == Board()


def test_cell_at_out_of_range() -> None:
    with pytest.raises(OutOfRangeError):
        Board().cell_at(1, 7)


def test_is_full(board_from_picture: Callable[[str], Board]) -> None:
    assert board_from_picture("XOX/XOO/OXX").is_full()
    assert not board_from_picture("XOX/XOO/OX-").is_full()


def test_clear(board_from_picture: Callable[[str], Board]) -> None:
    board = board_from_picture("XOX/XOO/OXX")
    board.clear()
    assert board == Board()


# -- COPIES ---
def test_clone_is_independent(board_from_picture: Callable[[str], Board]) -> None:
    """Changing the copy never leaks into the original (and the other way around)"""
    board = board_from_picture("X--/-O-/---")
    copy = board.clone()
    assert copy == board

    copy.place(Cell(2, 2), Mark.X)
    assert board.cell_at(2, 2) == CellState.EMPTY

    board.place(Cell(0, 1), Mark.X)
    assert copy.cell_at(0, 1) == CellState.EMPTY


# -- COUNTING ---
@pytest.mark.parametrize(
    "picture, x_count, o_count, consistent",
    [
        ("---/---/---", 0, 0, True),
        ("X--/---/---", 1, 0, True),
        ("X--/-O-/---", 1, 1, True),
        ("XX-/-O-/---", 2, 1, True),
        ("XX-/---/--X", 3, 0, False),
        ("O--/---/---", 0, 1, False),
    ],
)
def test_count_and_consistency(
    board_from_picture: Callable[[str], Board],
    picture: str,
    x_count: int,
    o_count: int,
    consistent: bool,
) -> None:
    board = board_from_picture(picture)
    assert board.count(Mark.X) == x_count
    assert board.count(Mark.O) == o_count
    assert board.is_consistent() == consistent
