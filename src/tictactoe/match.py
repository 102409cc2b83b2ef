"""
The MatchState is the entrypoint into the domain layer for the service layer.
It is the single source of truth for a running match: the board, whose turn it is, the scores and the players.
The presentation shell only renders it.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Self

from src.core.config import DEFAULT_PLAYER_O_NAME, DEFAULT_PLAYER_X_NAME
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.cell import Cell
from src.tictactoe.marks import opponent
from src.tictactoe.rules import Outcome, outcome
from src.tictactoe.search import best_move

logger = logging.getLogger(__name__)

# In single player mode the human always plays X (and therefore always opens a round)
COMPUTER_MARK = Mark.O


@dataclass(frozen=True)
class RoundResult:
    """Sent to the round listener once a round is decided, before the board gets cleared."""

    outcome: Outcome
    final_board: Board
    score_x: int
    score_o: int


RoundListener = Callable[[RoundResult], None]


@dataclass
class MatchState:
    board: Board
    current_player: Mark
    score_x: int
    score_o: int
    player_x_name: str
    player_o_name: str
    single_player: bool
    on_round_end: Optional[RoundListener] = field(
        default=None, compare=False, repr=False
    )

    @classmethod
    def new(
        cls,
        player_x_name: Optional[str] = None,
        player_o_name: Optional[str] = None,
        single_player: bool = False,
    ) -> Self:
        """Fresh match: empty board, X to move, no points. Blank names fall back to 'Player X' / 'Player O'."""
        return cls(
            board=Board(),
            current_player=Mark.X,
            score_x=0,
            score_o=0,
            player_x_name=_name_or_default(player_x_name, DEFAULT_PLAYER_X_NAME),
            player_o_name=_name_or_default(player_o_name, DEFAULT_PLAYER_O_NAME),
            single_player=single_player,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board_rows=self.board.to_rows(),
            current_player=str(self.current_player),
            scores={Mark.X: self.score_x, Mark.O: self.score_o},
            player_names={Mark.X: self.player_x_name, Mark.O: self.player_o_name},
            single_player=self.single_player,
        )

    @property
    def computer_mark(self) -> Mark:
        return COMPUTER_MARK

    @property
    def is_computer_turn(self) -> bool:
        return self.single_player and self.current_player == self.computer_mark

    def score(self, mark: Mark) -> int:
        return self.score_x if mark == Mark.X else self.score_o

    def player_name(self, mark: Mark) -> str:
        return self.player_x_name if mark == Mark.X else self.player_o_name

    def apply_move(self, cell: Cell) -> Outcome:
        """
        Current player puts a mark on `cell`
        ----

        1. place the mark (raises IllegalMoveError / OutOfRangeError before anything changed)
        2. decided? update the score, notify the listener, start a new round
        3. otherwise switch turns
        4. single player and the computer is up? let it answer right away

        Returns the outcome of the last mark placed during this call (the computer's, if it answered).
        """
        result = self._play(cell)
        if not result.is_terminal and self.is_computer_turn:
            return self.play_computer_move()
        return result

    def play_computer_move(self) -> Outcome:
        """Let the search engine pick the move for the player to move and apply it like any other move."""
        cell = best_move(self.board, self.current_player)
        logger.debug("computer plays (%d, %d)", cell.row, cell.col)
        return self.apply_move(cell)

    def reset_round(self) -> None:
        """Empty board, X to move. Scores are kept."""
        self.board = Board()
        self.current_player = Mark.X

    def switch_player(self) -> None:
        self.current_player = opponent(self.current_player)

    # -- PRIVATE HELPERS ---
    def _play(self, cell: Cell) -> Outcome:
        self.board.place(cell, self.current_player)

        result = outcome(self.board)
        if result.status == Status.WIN:
            assert result.winner is not None
            self._award_point(result.winner)
            self._finish_round(result)
        elif result.status == Status.DRAW:
            self._finish_round(result)
        else:
            self.switch_player()
        return result

    def _award_point(self, mark: Mark) -> None:
        if mark == Mark.X:
            self.score_x += 1
        else:
            self.score_o += 1

    def _finish_round(self, result: Outcome) -> None:
        """detect -> notify -> reset"""
        if result.winner is not None:
            logger.info(
                "%s (%s) wins the round. Score %s %d - %d %s",
                self.player_name(result.winner),
                result.winner,
                self.player_x_name,
                self.score_x,
                self.score_o,
                self.player_o_name,
            )
        else:
            logger.info("Round ends in a draw")

        if self.on_round_end is not None:
            self.on_round_end(
                RoundResult(
                    outcome=result,
                    final_board=self.board.clone(),
                    score_x=self.score_x,
                    score_o=self.score_o,
                )
            )
        self.reset_round()


def _name_or_default(name: Optional[str], default: str) -> str:
    if name is None or not name.strip():
        return default
    return name
