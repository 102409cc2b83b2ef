"""Implementation of the repositories using one text file each (paths from src.core.config by default)"""

import logging
from pathlib import Path

from src.core.config import GAME_STATE_FILE, THEME_FILE
from src.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class TextFileStore:
    """Whole-file reads and writes. A missing file is not an error: load() simply returns None."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> str | None:
        if not self.path.exists():
            logger.info("%s does not exist (yet)", self.path)
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise RepositoryError(f"Cannot read {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise RepositoryError(f"{self.path} is not UTF-8 text: {e}") from e

    def save(self, text: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise RepositoryError(f"Cannot write {self.path}: {e}") from e
        logger.info("wrote %s", self.path)

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


class FileSnapshotRepository(TextFileStore):
    """Saved game stored in a single text file"""

    def __init__(self, path: str | Path = GAME_STATE_FILE) -> None:
        super().__init__(path)


class FileThemeRepository(TextFileStore):
    """Theme preferences stored in a single text file"""

    def __init__(self, path: str | Path = THEME_FILE) -> None:
        super().__init__(path)
