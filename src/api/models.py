"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark, Status
from src.tictactoe.snapshot import is_storable_name

MarkName = str
PlayerName = str


# --- REQUEST MODELS ---
class NewMatchRequest(BaseModel):
    player_x_name: Optional[str] = None
    player_o_name: Optional[str] = None
    single_player: bool = False

    @field_validator(*["player_x_name", "player_o_name"])
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not is_storable_name(value):
            raise InvalidRequestError(
                f"Player name {value!r} may not contain commas or line breaks."
            )
        return value


class MoveRequest(BaseModel):
    row: int
    col: int


class PresetRequest(BaseModel):
    preset_name: str


class CustomizeThemeRequest(BaseModel):
    """What the customization dialogs hand back. Font size is the raw text the user typed."""

    background_color: Optional[int] = None
    button_color: Optional[int] = None
    font_name: Optional[str] = None
    font_size: Optional[str] = None


# --- RESPONSE MODELS ---
class MatchResponse(BaseModel):
    board: list[list[str]]
    current_player: Mark
    scores: dict[MarkName, int]
    player_names: dict[MarkName, PlayerName]
    single_player: bool


class RoundResultResponse(BaseModel):
    status: Status
    winner: Optional[Mark]
    final_board: list[list[str]]
    scores: dict[MarkName, int]


class MoveResponse(BaseModel):
    match: MatchResponse
    status: Status
    winner: Optional[Mark]
    round_results: list[RoundResultResponse]


class ThemeResponse(BaseModel):
    background_color: int
    button_color: int
    font_name: str
    font_size: int
