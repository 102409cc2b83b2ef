"""
Boundary layer data model.

The domain layer hands a match to the service in this shape, so the response models never depend on
how the domain represents it internally.
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
MarkName = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a match used between the domain and Service layers."""

    board_rows: list[list[str]]
    current_player: MarkName
    scores: dict[MarkName, int]
    player_names: dict[MarkName, PlayerName]
    single_player: bool
