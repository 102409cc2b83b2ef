"""Defines what can occupy a cell"""

from enum import Enum, auto
from typing import Optional, Self

from src.core.shared_types import Mark


class CellState(Enum):
    EMPTY = auto()
    X = auto()
    O = auto()

    @classmethod
    def from_mark(cls, mark: Mark) -> Self:
        return cls[mark.name]

    @classmethod
    def from_token(cls, token: str) -> Self:
        """Raises KeyError for anything but "-", "X" or "O"."""
        return cls(TOKEN_TO_STATE[token].value)

    def to_token(self) -> str:
        return STATE_TO_TOKEN[self]

    @property
    def mark(self) -> Optional[Mark]:
        """The player owning this cell (None for an empty cell)"""
        if self == CellState.EMPTY:
            return None
        return Mark[self.name]


# Tokens used in the textual snapshot of a board
TOKEN_TO_STATE: dict[str, CellState] = {
    "-": CellState.EMPTY,
    "X": CellState.X,
    "O": CellState.O,
}

STATE_TO_TOKEN: dict[CellState, str] = {
    value: key for key, value in TOKEN_TO_STATE.items()
}


def opponent(mark: Mark) -> Mark:
    return Mark.O if mark == Mark.X else Mark.X
