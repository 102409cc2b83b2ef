"""
Textual snapshot of a match in progress. Written to / read from the saved game file.
----

The layout is line oriented:

    <player X name>,<player O name>
    <score X>,<score O>
    <player to move: X or O>
    <single player flag: 1 or 0>
    <row 0: cell,cell,cell,>
    <row 1: cell,cell,cell,>
    <row 2: cell,cell,cell,>

Empty cells are written as '-'. Every row ends with a trailing comma.

ex) A match between Ann and Bob, 2-1 up for Ann, in single player mode, with O to move after X took the centre:

    Ann,Bob
    2,1
    O
    1
    -,-,-,
    -,X,-,
    -,-,-,
"""

from src.core.exceptions import CorruptSnapshotError, InvalidRequestError
from src.core.shared_types import Mark
from src.tictactoe.board import Board
from src.tictactoe.cell import BOARD_DIMENSIONS
from src.tictactoe.marks import TOKEN_TO_STATE
from src.tictactoe.match import MatchState

NUM_HEADER_LINES = 4
NUM_SNAPSHOT_LINES = NUM_HEADER_LINES + BOARD_DIMENSIONS[0]
FIELD_SEPARATOR = ","
SINGLE_PLAYER_FLAGS = {"1": True, "0": False}


def is_valid_snapshot(text: str) -> bool:
    """
    Check if given text follows the snapshot layout.
    """
    lines = _snapshot_lines(text)
    if len(lines) != NUM_SNAPSHOT_LINES:
        return False

    names, scores, player, flag, *rows = lines
    if not is_valid_names(names):
        return False

    if not is_valid_scores(scores):
        return False

    if not is_valid_player(player):
        return False

    if not is_valid_flag(flag):
        return False

    return all(is_valid_row(row) for row in rows)


def is_valid_names(line: str) -> bool:
    """Exactly two names, separated by a single comma"""
    return len(line.split(FIELD_SEPARATOR)) == 2


def is_storable_name(name: str) -> bool:
    """A name must fit on its half of the first line: no commas, no line breaks"""
    return FIELD_SEPARATOR not in name and "".join(name.splitlines()) == name


def is_valid_scores(line: str) -> bool:
    """Two non-negative integers"""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != 2:
        return False
    return all(_is_count(part) for part in parts)


def is_valid_player(line: str) -> bool:
    return line.strip() in Mark.__members__


def is_valid_flag(line: str) -> bool:
    return line.strip() in SINGLE_PLAYER_FLAGS


def is_valid_row(line: str) -> bool:
    """Three cell tokens, each followed by a comma. (The trailing comma is optional when reading.)"""
    tokens = _row_tokens(line)
    if len(tokens) != BOARD_DIMENSIONS[1]:
        return False
    return all(token in TOKEN_TO_STATE for token in tokens)


def serialize_game(state: MatchState) -> str:
    """Deterministic: the same state always produces the same text"""
    for name in (state.player_x_name, state.player_o_name):
        if not is_storable_name(name):
            raise InvalidRequestError(
                f"Player name {name!r} cannot be saved: no commas or line breaks allowed."
            )

    lines = [
        f"{state.player_x_name},{state.player_o_name}",
        f"{state.score_x},{state.score_o}",
        str(state.current_player),
        "1" if state.single_player else "0",
    ]
    lines.extend(
        "".join(f"{token}{FIELD_SEPARATOR}" for token in row)
        for row in state.board.to_rows()
    )
    return "\n".join(lines) + "\n"


def deserialize_game(text: str) -> MatchState:
    """Parse the snapshot into a MatchState. Nothing is created unless every line checks out."""

    # raise an exception if the text cannot be a snapshot
    if not is_valid_snapshot(text):
        raise CorruptSnapshotError(f"Cannot interpret supplied text as a saved game: {text!r}")

    names, scores, player, flag, *rows = _snapshot_lines(text)
    player_x_name, player_o_name = names.split(FIELD_SEPARATOR)
    score_x, score_o = (int(score) for score in scores.split(FIELD_SEPARATOR))

    return MatchState(
        board=Board.from_rows([_row_tokens(row) for row in rows]),
        current_player=Mark(player.strip()),
        score_x=score_x,
        score_o=score_o,
        player_x_name=player_x_name,
        player_o_name=player_o_name,
        single_player=SINGLE_PLAYER_FLAGS[flag.strip()],
    )


def _snapshot_lines(text: str) -> list[str]:
    """Split into lines, ignoring blank lines at the end of the file"""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _row_tokens(line: str) -> list[str]:
    tokens = [token.strip() for token in line.strip().split(FIELD_SEPARATOR)]
    if tokens and tokens[-1] == "":
        # trailing comma
        tokens.pop()
    return tokens


def _is_count(part: str) -> bool:
    """Non-negative integer that int() accepts (very long digit strings hit the conversion limit)"""
    part = part.strip()
    if not part.isdecimal():
        return False
    try:
        int(part)
    except ValueError:
        return False
    return True
