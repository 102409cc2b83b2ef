"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


# --- Mark does NOT contain an option for empty cells. That lives in src/tictactoe/marks.py
# --- NOTE the same name is used in both places, let the imports show which version is used where


class Mark(StrEnum):
    X = "X"
    O = "O"
