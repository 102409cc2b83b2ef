"""Implementation of SnapshotRepository using SQLAlchemy. Allows several named save slots in one database."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.schema import DBSavedGame

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "default"


class SQLSnapshotRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session, slot: str = DEFAULT_SLOT) -> None:
        self.db = db_session
        self.slot = slot

    def load(self) -> str | None:
        """Get the snapshot in this slot, if record exists."""
        saved_db = self._fetch_slot(self.slot)
        if saved_db:
            return saved_db.snapshot
        return None

    def save(self, snapshot: str) -> None:
        """Create the slot, or overwrite what it holds."""
        saved_db = self._fetch_slot(self.slot)
        if saved_db is None:
            self.db.add(DBSavedGame(slot=self.slot, snapshot=snapshot))
        else:
            saved_db.snapshot = snapshot
        self.db.commit()
        logger.info("saved game in slot %r", self.slot)

    def delete(self) -> None:
        """Remove the slot's record."""
        saved_db = self._fetch_slot(self.slot)
        if not saved_db:
            return
        self.db.delete(saved_db)
        self.db.commit()

    def list_slots(self) -> list[str]:
        """All slot names, most recently saved first"""
        query = select(DBSavedGame.slot).order_by(
            DBSavedGame.updated_at.desc(), DBSavedGame.slot
        )
        return list(self.db.scalars(query))

    def _fetch_slot(self, slot: str) -> DBSavedGame | None:
        query = select(DBSavedGame).where(DBSavedGame.slot == slot)
        return self.db.scalar(query)
