"""
A single cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Tic-tac-toe is always played on 3x3 here. (rows, columns)
BOARD_DIMENSIONS = (3, 3)


@dataclass(frozen=True)
class Cell:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Cell:
        """Row-major index: 0 - 8 get converted to (0,0) - (2,2)"""
        return cls(index // BOARD_DIMENSIONS[1], index % BOARD_DIMENSIONS[1])

    def to_index(self) -> int:
        return self.row * BOARD_DIMENSIONS[1] + self.col

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )


# Every cell, in the row-major order used whenever the board gets scanned
ALL_CELLS: tuple[Cell, ...] = tuple(
    Cell(row, col)
    for row in range(BOARD_DIMENSIONS[0])
    for col in range(BOARD_DIMENSIONS[1])
)
