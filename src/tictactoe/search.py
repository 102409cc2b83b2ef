"""
Adversarial move selection for the computer player.
----

Plain minimax over the full game tree (no pruning, no depth limit).

Scores are seen from the computer's side:
* +1 the computer has three in a row
* -1 the opponent has three in a row
*  0 draw

NOTE: the recursion works on immutable, row-major tuples of cell states, so every hypothetical line gets its own copy
and the live board can never be touched. The same position is reached through many move orders, so values are cached
per (position, player to move, computer mark). A 3x3 board has only a few thousand reachable positions.
"""

import logging
from functools import lru_cache

from src.core.exceptions import NoMovesAvailableError
from src.core.shared_types import Mark
from src.tictactoe.board import Board
from src.tictactoe.cell import Cell
from src.tictactoe.marks import CellState, opponent
from src.tictactoe.rules import winner

logger = logging.getLogger(__name__)

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0

Position = tuple[CellState, ...]


def best_move(board: Board, computer: Mark) -> Cell:
    """
    Optimal move for `computer`, who is to move on `board`.

    Candidates are tried in row-major order and only a strictly better score replaces the current best,
    so ties go to the earliest cell.
    """
    candidates = board.empty_cells()
    if not candidates:
        raise NoMovesAvailableError("Cannot pick a move: the board is full.")

    best_cell = candidates[0]
    best_score = LOSS_SCORE - 1
    for cell in candidates:
        hypothetical = board.clone()
        hypothetical.place(cell, computer)
        score = minimax(hypothetical, opponent(computer), computer)

        if score > best_score:
            best_score = score
            best_cell = cell

    logger.debug(
        "computer %s picks (%d, %d) with score %d",
        computer,
        best_cell.row,
        best_cell.col,
        best_score,
    )
    return best_cell


def minimax(board: Board, to_move: Mark, computer: Mark) -> int:
    """Value of the position for `computer`, with `to_move` about to play."""
    return _position_value(board.cells(), to_move, computer)


@lru_cache(maxsize=None)
def _position_value(position: Position, to_move: Mark, computer: Mark) -> int:
    board = Board.from_cells(position)
    terminal_score = _terminal_score(board, computer)
    if terminal_score is not None:
        return terminal_score

    scores = [
        _position_value(_with_mark(position, cell, to_move), opponent(to_move), computer)
        for cell in board.empty_cells()
    ]
    # maximizing on the computer's turn, minimizing on the opponent's
    return max(scores) if to_move == computer else min(scores)


def _terminal_score(board: Board, computer: Mark) -> int | None:
    """Score of a finished game, None while the game is still going"""
    mark = winner(board)
    if mark == computer:
        return WIN_SCORE
    if mark is not None:
        return LOSS_SCORE
    if board.is_full():
        return DRAW_SCORE
    return None


def _with_mark(position: Position, cell: Cell, mark: Mark) -> Position:
    """Copy of the position with one extra mark"""
    index = cell.to_index()
    return position[:index] + (CellState.from_mark(mark),) + position[index + 1 :]
