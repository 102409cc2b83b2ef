"""Orchestration of communication from the presentation shell to the domain and persistence layers (and the reverse direction)."""

import logging
from typing import Optional

import src.tictactoe.theme as th
from src.api.models import (
    CustomizeThemeRequest,
    MatchResponse,
    MoveRequest,
    MoveResponse,
    NewMatchRequest,
    PresetRequest,
    RoundResultResponse,
    ThemeResponse,
)
from src.core.exceptions import (
    CorruptSnapshotError,
    GameError,
    MissingPreferencesError,
    NoSavedGameError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Mark
from src.db.repository import SnapshotRepository, ThemeRepository
from src.tictactoe.board import Board
from src.tictactoe.cell import Cell
from src.tictactoe.match import MatchState, RoundResult
from src.tictactoe.rules import Outcome
from src.tictactoe.search import best_move
from src.tictactoe.snapshot import deserialize_game, serialize_game

logger = logging.getLogger(__name__)


# -- Core-facing functions (for shells that manage the MatchState themselves) ---
def new_match(
    player_x_name: Optional[str], player_o_name: Optional[str], single_player: bool
) -> MatchState:
    return MatchState.new(player_x_name, player_o_name, single_player)


def apply_move(state: MatchState, row: int, col: int) -> tuple[MatchState, Outcome]:
    """Raises IllegalMoveError / OutOfRangeError with `state` left as it was."""
    result = state.apply_move(Cell(row, col))
    return state, result


def compute_computer_move(board: Board, computer_mark: Mark) -> tuple[int, int]:
    cell = best_move(board, computer_mark)
    return cell.row, cell.col


def serialize_theme(
    background_color: int, button_color: int, font_name: str, font_size: int
) -> str:
    return th.serialize_theme(
        th.Theme(background_color, button_color, font_name, font_size)
    )


def deserialize_theme(text: str) -> tuple[int, int, str, int]:
    """Raises MissingPreferencesError"""
    return th.deserialize_theme(text).as_tuple()


class GameService:
    """
    Orchestration of layers for one running match.
    ----

    The service owns the MatchState for its lifetime. The shell sends requests and renders the responses;
    it never changes the state itself.
    """

    def __init__(
        self, snapshots: SnapshotRepository, themes: ThemeRepository
    ) -> None:
        self.snapshots = snapshots
        self.themes = themes
        self.match: Optional[MatchState] = None
        self.theme: th.Theme = th.Theme.default()
        self._round_results: list[RoundResult] = []

    # -- Match logic ---
    def new_match(self, request: NewMatchRequest) -> MatchResponse:
        """Players entered their names and picked a mode."""
        self._start(
            MatchState.new(
                request.player_x_name, request.player_o_name, request.single_player
            )
        )
        logger.info(
            "new %s match: %s vs %s",
            "single player" if request.single_player else "two player",
            self._match.player_x_name,
            self._match.player_o_name,
        )
        return self.get_match()

    def get_match(self) -> MatchResponse:
        return self._create_match_response(self._match.to_model())

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        A player clicked a cell.

        An occupied cell raises IllegalMoveError. Nothing changes, the shell ignores the click and waits for the next one.
        """
        self._round_results.clear()
        result = self._match.apply_move(Cell(request.row, request.col))
        return self._create_move_response(result)

    def computer_move(self) -> MoveResponse:
        """Let the computer play when it is up (ex. right after loading a game saved on the computer's turn)."""
        match = self._match
        if not match.is_computer_turn:
            raise GameError(
                f"It is not the computer's turn. Waiting for {match.player_name(match.current_player)}."
            )
        self._round_results.clear()
        result = match.play_computer_move()
        return self._create_move_response(result)

    def reset_round(self) -> MatchResponse:
        """Replay button: clear the board, keep the scores."""
        self._match.reset_round()
        return self.get_match()

    # -- Saved game ---
    def save_game(self) -> str:
        snapshot = serialize_game(self._match)
        self.snapshots.save(snapshot)
        return snapshot

    def load_game(self) -> MatchResponse:
        """
        Replace the running match with the saved one.

        Raises NoSavedGameError when there is nothing (usable) to load. The running match is kept as it was.
        """
        try:
            snapshot = self.snapshots.load()
        except RepositoryError as e:
            logger.warning("cannot read saved game, keeping current match: %s", e)
            raise NoSavedGameError("No saved game found.") from e
        if snapshot is None:
            raise NoSavedGameError("No saved game found.")

        try:
            loaded = deserialize_game(snapshot)
        except CorruptSnapshotError as e:
            logger.warning("saved game is corrupt, keeping current match: %s", e)
            raise NoSavedGameError("No saved game found.") from e

        self._start(loaded)
        logger.info("loaded saved game")
        return self.get_match()

    # -- Theme ---
    def load_theme(self) -> ThemeResponse:
        """Read stored preferences. Falls back to the default theme when they are missing or unreadable."""
        try:
            preferences = self.themes.load()
        except RepositoryError as e:
            logger.warning("Cannot read theme preferences, using default theme: %s", e)
            preferences = None
        if preferences is None:
            logger.info("No theme preferences found. Using default theme.")
            self.theme = th.Theme.default()
            return self._create_theme_response()

        try:
            self.theme = th.deserialize_theme(preferences)
        except MissingPreferencesError as e:
            logger.warning("Theme preferences unreadable, using default theme: %s", e)
            self.theme = th.Theme.default()
        return self._create_theme_response()

    def save_theme(self) -> None:
        self.themes.save(th.serialize_theme(self.theme))

    def apply_preset(self, request: PresetRequest) -> ThemeResponse:
        self._update_theme(th.apply_preset(self.theme, request.preset_name))
        return self._create_theme_response()

    def customize_theme(self, request: CustomizeThemeRequest) -> ThemeResponse:
        """Raises InvalidThemeError (ex. font size 'big'). The previous theme stays in place."""
        self._update_theme(
            th.customize_theme(
                self.theme,
                background_color=request.background_color,
                button_color=request.button_color,
                font_name=request.font_name,
                font_size=request.font_size,
            )
        )
        return self._create_theme_response()

    # -- Internal helpers --
    @property
    def _match(self) -> MatchState:
        """The running match. Raise an error if none was started or loaded."""
        if self.match is None:
            raise GameError("No match in progress. Start a new match or load a saved one.")
        return self.match

    def _start(self, match: MatchState) -> None:
        match.on_round_end = self._round_results.append
        self.match = match

    def _update_theme(self, theme: th.Theme) -> None:
        """Every change of theme is stored right away"""
        self.theme = theme
        self.save_theme()

    def _create_match_response(self, model: GameModel) -> MatchResponse:
        """Convert info in GameModel to a MatchResponse"""
        return MatchResponse(
            board=model.board_rows,
            current_player=Mark(model.current_player),
            scores=model.scores,
            player_names=model.player_names,
            single_player=model.single_player,
        )

    def _create_move_response(self, result: Outcome) -> MoveResponse:
        return MoveResponse(
            match=self.get_match(),
            status=result.status,
            winner=result.winner,
            round_results=[
                RoundResultResponse(
                    status=round_result.outcome.status,
                    winner=round_result.outcome.winner,
                    final_board=round_result.final_board.to_rows(),
                    scores={Mark.X: round_result.score_x, Mark.O: round_result.score_o},
                )
                for round_result in self._round_results
            ],
        )

    def _create_theme_response(self) -> ThemeResponse:
        return ThemeResponse(
            background_color=self.theme.background_color,
            button_color=self.theme.button_color,
            font_name=self.theme.font_name,
            font_size=self.theme.font_size,
        )
