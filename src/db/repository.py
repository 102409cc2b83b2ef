"""Protocol repositories (implemented with plain text files and with SQLAlchemy)"""

from typing import Protocol


class SnapshotRepository(Protocol):
    """Persistence of the saved game. Stores the snapshot text, knows nothing about its layout."""

    def load(self) -> str | None:
        """Get the stored snapshot, if one exists."""
        ...

    def save(self, snapshot: str) -> None:
        """Store the snapshot, replacing any previous one."""
        ...

    def delete(self) -> None:
        """Remove the stored snapshot (no-op if there is none)."""
        ...


class ThemeRepository(Protocol):
    """Persistence of the theme preferences."""

    def load(self) -> str | None:
        """Get the stored preferences, if they exist."""
        ...

    def save(self, preferences: str) -> None:
        """Store the preferences, replacing previous ones."""
        ...
