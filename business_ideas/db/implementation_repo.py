"""Repository for the ``implementation_items`` table."""

from __future__ import annotations

import logging
from typing import Optional

from business_ideas.db.database import Database, utc_now
from business_ideas.models.implementation_item import ImplementationItem

logger = logging.getLogger(__name__)


class ImplementationItemRepository:
    """Single-Responsibility repository for implementation item persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, item: ImplementationItem) -> ImplementationItem:
        row = item.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """INSERT INTO implementation_items
                   (idea_id, item_type, name, owner, start_date, end_date,
                    completion_percentage, status)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    row["idea_id"], row["item_type"], row["name"], row["owner"],
                    row["start_date"], row["end_date"],
                    row["completion_percentage"], row["status"],
                ),
            )
        logger.info("Created implementation item %s for idea %s", cursor.lastrowid, item.idea_id)
        return self.get_by_id(cursor.lastrowid)

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, item_id: int) -> Optional[ImplementationItem]:
        row = self._db.fetchone("SELECT * FROM implementation_items WHERE id = ?", (item_id,))
        return ImplementationItem.from_row(row) if row else None

    def list_for_idea(self, idea_id: int) -> list[ImplementationItem]:
        rows = self._db.fetchall(
            "SELECT * FROM implementation_items WHERE idea_id = ? ORDER BY created_at, id",
            (idea_id,),
        )
        return [ImplementationItem.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(self, item_id: int, item: ImplementationItem) -> Optional[ImplementationItem]:
        """Replace the mutable fields; the owning idea never changes."""
        row = item.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """UPDATE implementation_items
                   SET item_type = ?, name = ?, owner = ?, start_date = ?, end_date = ?,
                       completion_percentage = ?, status = ?, updated_at = ?
                   WHERE id = ?""",
                (
                    row["item_type"], row["name"], row["owner"],
                    row["start_date"], row["end_date"],
                    row["completion_percentage"], row["status"],
                    utc_now(), item_id,
                ),
            )
        if cursor.rowcount == 0:
            return None
        logger.info("Updated implementation item %s", item_id)
        return self.get_by_id(item_id)

    # -- Delete ----------------------------------------------------------------

    def delete(self, item_id: int) -> bool:
        with self._db.transaction() as conn:
            cursor = conn.execute("DELETE FROM implementation_items WHERE id = ?", (item_id,))
        if cursor.rowcount > 0:
            logger.info("Deleted implementation item %s", item_id)
        return cursor.rowcount > 0
