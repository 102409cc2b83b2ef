"""Unit tests for src/tictactoe/snapshot.py"""

import pytest

from src.core.exceptions import CorruptSnapshotError, InvalidRequestError
from src.core.shared_types import Mark
from src.tictactoe.board import Board
from src.tictactoe.cell import Cell
from src.tictactoe.match import MatchState
from src.tictactoe.snapshot import (
    deserialize_game,
    is_storable_name,
    is_valid_flag,
    is_valid_names,
    is_valid_player,
    is_valid_row,
    is_valid_scores,
    is_valid_snapshot,
    serialize_game,
)

SAMPLE_SNAPSHOT = "Ann,Bob\n2,1\nO\n1\n-,-,-,\n-,X,-,\n-,-,-,\n"


@pytest.fixture
def sample_match() -> MatchState:
    """The match encoded by SAMPLE_SNAPSHOT"""
    board = Board()
    board.place(Cell(1, 1), Mark.X)
    return MatchState(
        board=board,
        current_player=Mark.O,
        score_x=2,
        score_o=1,
        player_x_name="Ann",
        player_o_name="Bob",
        single_player=True,
    )


# -- FIELD VALIDATORS ---
@pytest.mark.parametrize(
    "line, expected",
    [("Ann,Bob", True), ("Ann,", True), ("Ann", False), ("Ann,Bob,Cid", False)],
)
def test_is_valid_names(line: str, expected: bool) -> None:
    assert is_valid_names(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("0,0", True),
        ("12,7", True),
        ("1", False),
        ("1,2,3", False),
        ("-1,0", False),
        ("one,two", False),
        ("1.5,0", False),
        (",", False),
        ("9" * 5000 + ",0", False),
    ],
)
def test_is_valid_scores(line: str, expected: bool) -> None:
    assert is_valid_scores(line) == expected


@pytest.mark.parametrize(
    "line, expected", [("X", True), ("O", True), ("x", False), ("-", False), ("", False)]
)
def test_is_valid_player(line: str, expected: bool) -> None:
    assert is_valid_player(line) == expected


@pytest.mark.parametrize(
    "line, expected", [("1", True), ("0", True), ("2", False), ("true", False)]
)
def test_is_valid_flag(line: str, expected: bool) -> None:
    assert is_valid_flag(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("X,O,-,", True),
        ("-,-,-,", True),
        ("X,O,-", True),  # trailing comma is optional when reading
        ("X,O,", False),
        ("X,O,-,X,", False),
        ("X,Q,-,", False),
        ("", False),
    ],
)
def test_is_valid_row(line: str, expected: bool) -> None:
    assert is_valid_row(line) == expected


@pytest.mark.parametrize(
    "name, expected",
    [("Ann", True), ("", True), ("Ann Smith", True), ("Ann,Bob", False), ("Ann\nBob", False)],
)
def test_is_storable_name(name: str, expected: bool) -> None:
    assert is_storable_name(name) == expected


# -- SERIALIZE ---
def test_serialize_game(sample_match: MatchState) -> None:
    assert serialize_game(sample_match) == SAMPLE_SNAPSHOT


def test_serialize_new_match() -> None:
    text = serialize_game(MatchState.new())
    assert text.splitlines() == [
        "Player X,Player O",
        "0,0",
        "X",
        "0",
        "-,-,-,",
        "-,-,-,",
        "-,-,-,",
    ]


def test_serialize_is_deterministic(sample_match: MatchState) -> None:
    assert serialize_game(sample_match) == serialize_game(sample_match)


def test_serialize_rejects_unstorable_name(sample_match: MatchState) -> None:
    sample_match.player_o_name = "Bob, the builder"
    with pytest.raises(InvalidRequestError):
        serialize_game(sample_match)


# -- DESERIALIZE ---
def test_deserialize_game(sample_match: MatchState) -> None:
    assert is_valid_snapshot(SAMPLE_SNAPSHOT)
    assert deserialize_game(SAMPLE_SNAPSHOT) == sample_match


def test_deserialize_tolerates_trailing_blank_lines(sample_match: MatchState) -> None:
    assert deserialize_game(SAMPLE_SNAPSHOT + "\n\n") == sample_match


def test_deserialize_rows_without_trailing_comma(sample_match: MatchState) -> None:
    text = "Ann,Bob\n2,1\nO\n1\n-,-,-\n-,X,-\n-,-,-\n"
    assert deserialize_game(text) == sample_match


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Ann,Bob\n2,1\nO\n1\n-,-,-,\n-,X,-,\n",  # a row missing
        "Ann,Bob\n2,1\nO\n-,-,-,\n-,X,-,\n-,-,-,\n",  # flag missing
        "Ann\n2,1\nO\n1\n-,-,-,\n-,X,-,\n-,-,-,\n",  # one name only
        "Ann,Bob\ntwo,1\nO\n1\n-,-,-,\n-,X,-,\n-,-,-,\n",  # non-integer score
        "Ann,Bob\n-2,1\nO\n1\n-,-,-,\n-,X,-,\n-,-,-,\n",  # negative score
        "Ann,Bob\n2,1\nZ\n1\n-,-,-,\n-,X,-,\n-,-,-,\n",  # unknown player
        "Ann,Bob\n2,1\nO\nyes\n-,-,-,\n-,X,-,\n-,-,-,\n",  # unknown flag
        "Ann,Bob\n2,1\nO\n1\n-,-,-,\n-,Q,-,\n-,-,-,\n",  # unknown cell token
        "Ann,Bob\n2,1\nO\n1\n-,-,\n-,X,-,\n-,-,-,\n",  # short row
        "Ann,Bob\n2,1\nO\n1\n-,-,-,\n-,X,-,\n-,-,-,\n-,-,-,\n",  # extra row
        "Ann,Bob\n" + "9" * 5000 + ",0\nX\n0\n-,-,-,\n-,-,-,\n-,-,-,\n",  # score too long to convert
    ],
)
def test_deserialize_corrupt_snapshot(text: str) -> None:
    assert not is_valid_snapshot(text)
    with pytest.raises(CorruptSnapshotError):
        deserialize_game(text)


# -- ROUND TRIP ---
@pytest.mark.parametrize(
    "match",
    [
        MatchState.new(),
        MatchState.new("Ann", "Bob", single_player=True),
        MatchState(
            board=Board.from_rows([["X", "O", "X"], ["-", "O", "-"], ["X", "-", "-"]]),
            current_player=Mark.O,
            score_x=10,
            score_o=0,
            player_x_name="Ann Smith",
            player_o_name="Computer",
            single_player=True,
        ),
    ],
)
def test_round_trip(match: MatchState) -> None:
    assert deserialize_game(serialize_game(match)) == match
