"""Repository for the ``business_plans`` table."""

from __future__ import annotations

import logging
from typing import Optional

from business_ideas.db.database import Database, utc_now
from business_ideas.db.idea_repo import mark_status
from business_ideas.models.business_plan import BusinessPlan
from business_ideas.models.idea import IdeaStatus

logger = logging.getLogger(__name__)


class BusinessPlanRepository:
    """Single-Responsibility repository for business plan persistence."""

    def __init__(self, db: Database):
        self._db = db

    def create(self, plan: BusinessPlan) -> BusinessPlan:
        """Insert and move the parent idea to ``planning`` in one transaction."""
        row = plan.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """INSERT INTO business_plans (idea_id, template_id, sections, tasks)
                   VALUES (?, ?, ?, ?)""",
                (row["idea_id"], row["template_id"], row["sections"], row["tasks"]),
            )
            mark_status(conn, plan.idea_id, IdeaStatus.PLANNING.value)
        logger.info("Created business plan %s for idea %s", cursor.lastrowid, plan.idea_id)
        return self.get_by_id(cursor.lastrowid)

    def get_by_id(self, plan_id: int) -> Optional[BusinessPlan]:
        row = self._db.fetchone("SELECT * FROM business_plans WHERE id = ?", (plan_id,))
        return BusinessPlan.from_row(row) if row else None

    def get_latest_for_idea(self, idea_id: int) -> Optional[BusinessPlan]:
        row = self._db.fetchone(
            """SELECT * FROM business_plans WHERE idea_id = ?
               ORDER BY created_at DESC, id DESC LIMIT 1""",
            (idea_id,),
        )
        return BusinessPlan.from_row(row) if row else None

    def update(self, plan_id: int, plan: BusinessPlan) -> Optional[BusinessPlan]:
        row = plan.to_row()
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """UPDATE business_plans
                   SET template_id = ?, sections = ?, tasks = ?, updated_at = ?
                   WHERE id = ?""",
                (row["template_id"], row["sections"], row["tasks"], utc_now(), plan_id),
            )
        if cursor.rowcount == 0:
            return None
        logger.info("Updated business plan %s", plan_id)
        return self.get_by_id(plan_id)

    def delete(self, plan_id: int) -> bool:
        with self._db.transaction() as conn:
            cursor = conn.execute("DELETE FROM business_plans WHERE id = ?", (plan_id,))
        if cursor.rowcount > 0:
            logger.info("Deleted business plan %s", plan_id)
        return cursor.rowcount > 0
