"""Repository for the ``validations`` table."""

from __future__ import annotations

import logging
from typing import Optional

from business_ideas.db.database import Database
from business_ideas.db.idea_repo import mark_status
from business_ideas.models.idea import IdeaStatus
from business_ideas.models.validation import Validation

logger = logging.getLogger(__name__)


class ValidationRepository:
    """Single-Responsibility repository for validation persistence."""

    def __init__(self, db: Database):
        self._db = db

    def create(self, validation: Validation) -> Validation:
        """Insert and flip the parent idea to ``validated`` in one transaction."""
        row = validation.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """INSERT INTO validations (idea_id, validation_data, score)
                   VALUES (?, ?, ?)""",
                (row["idea_id"], row["validation_data"], row["score"]),
            )
            mark_status(conn, validation.idea_id, IdeaStatus.VALIDATED.value)
        logger.info("Created validation %s for idea %s", cursor.lastrowid, validation.idea_id)
        return self.get_by_id(cursor.lastrowid)

    def get_by_id(self, validation_id: int) -> Optional[Validation]:
        row = self._db.fetchone("SELECT * FROM validations WHERE id = ?", (validation_id,))
        return Validation.from_row(row) if row else None

    def get_latest_for_idea(self, idea_id: int) -> Optional[Validation]:
        row = self._db.fetchone(
            """SELECT * FROM validations WHERE idea_id = ?
               ORDER BY created_at DESC, id DESC LIMIT 1""",
            (idea_id,),
        )
        return Validation.from_row(row) if row else None

    def update(self, validation_id: int, validation: Validation) -> Optional[Validation]:
        row = validation.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                "UPDATE validations SET validation_data = ?, score = ? WHERE id = ?",
                (row["validation_data"], row["score"], validation_id),
            )
        if cursor.rowcount == 0:
            return None
        logger.info("Updated validation %s", validation_id)
        return self.get_by_id(validation_id)

    def delete(self, validation_id: int) -> bool:
        with self._db.transaction() as conn:
            cursor = conn.execute("DELETE FROM validations WHERE id = ?", (validation_id,))
        if cursor.rowcount > 0:
            logger.info("Deleted validation %s", validation_id)
        return cursor.rowcount > 0
