"""Exceptions raised by the domain layer and translated (or passed on) by the service layer."""


class GameError(Exception):
    """Base class for anything that goes wrong while playing / storing a game."""


class IllegalMoveError(GameError):
    """Target cell is already occupied. Recoverable: the state is left unchanged."""


class OutOfRangeError(GameError):
    """Move coordinates fall outside the 3x3 grid."""


class NoMovesAvailableError(GameError):
    """The search engine was asked for a move on a full board. Programming error on the caller's side."""


class CorruptSnapshotError(GameError):
    """A game-state snapshot is missing a line or holds a field that cannot be parsed."""


class MissingPreferencesError(GameError):
    """Theme preferences are absent or cannot be parsed."""


class InvalidThemeError(GameError):
    """User supplied theme customization that cannot be applied (ex. non-numeric font size)."""


class InvalidRequestError(GameError):
    """Request data failed validation at the service boundary."""


class RepositoryError(GameError):
    """Persistence layer could not deliver what was asked for."""


class NoSavedGameError(RepositoryError):
    """No (usable) saved game exists. The shell shows 'no saved game' and keeps the current match."""
