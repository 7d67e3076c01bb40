"""Repository for the ``ideas`` table: full CRUD with ACID transactions."""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from business_ideas.db.database import Database, utc_now
from business_ideas.models.idea import Idea

logger = logging.getLogger(__name__)


def mark_status(conn: sqlite3.Connection, idea_id: int, status: str) -> None:
    """Set an idea's status inside a caller-owned transaction."""
    conn.execute(
        "UPDATE ideas SET status = ?, updated_at = ? WHERE id = ?",
        (status, utc_now(), idea_id),
    )


class IdeaRepository:
    """Single-Responsibility repository for idea persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, idea: Idea) -> Idea:
        row = idea.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """INSERT INTO ideas
                   (summary, description, bullet_points, status, company_name, is_active)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    row["summary"], row["description"], row["bullet_points"],
                    row["status"], row["company_name"], row["is_active"],
                ),
            )
        logger.info("Created idea %s", cursor.lastrowid)
        return self.get_by_id(cursor.lastrowid)

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, idea_id: int) -> Optional[Idea]:
        row = self._db.fetchone("SELECT * FROM ideas WHERE id = ?", (idea_id,))
        return Idea.from_row(row) if row else None

    def exists(self, idea_id: int) -> bool:
        return self._db.fetchone("SELECT 1 AS found FROM ideas WHERE id = ?", (idea_id,)) is not None

    # -- List ------------------------------------------------------------------

    def list_active(self) -> list[Idea]:
        """Active ideas, newest first."""
        rows = self._db.fetchall(
            "SELECT * FROM ideas WHERE is_active = 1 ORDER BY created_at DESC, id DESC"
        )
        return [Idea.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(self, idea_id: int, idea: Idea) -> Optional[Idea]:
        """Replace every mutable field; ``None`` when the idea does not exist."""
        row = idea.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """UPDATE ideas
                   SET summary = ?, description = ?, bullet_points = ?, status = ?,
                       company_name = ?, is_active = ?, updated_at = ?
                   WHERE id = ?""",
                (
                    row["summary"], row["description"], row["bullet_points"],
                    row["status"], row["company_name"], row["is_active"],
                    utc_now(), idea_id,
                ),
            )
        if cursor.rowcount == 0:
            return None
        logger.info("Updated idea %s", idea_id)
        return self.get_by_id(idea_id)

    # -- Delete ----------------------------------------------------------------

    def delete(self, idea_id: int) -> bool:
        """Hard delete; validations, plans and items go with it."""
        with self._db.transaction() as conn:
            cursor = conn.execute("DELETE FROM ideas WHERE id = ?", (idea_id,))
        if cursor.rowcount > 0:
            logger.info("Deleted idea %s", idea_id)
        return cursor.rowcount > 0
