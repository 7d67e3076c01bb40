"""Unit tests for the DB layer: schema, transactions and all repositories.

Every test uses a fresh temporary SQLite file so tests are isolated and
never touch the configured database.
"""

from __future__ import annotations

import sqlite3
import tempfile
import unittest
from pathlib import Path

from business_ideas.db.business_plan_repo import BusinessPlanRepository
from business_ideas.db.database import Database
from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.db.implementation_repo import ImplementationItemRepository
from business_ideas.db.validation_repo import ValidationRepository
from business_ideas.models.business_plan import BusinessPlan
from business_ideas.models.idea import Idea, IdeaStatus
from business_ideas.models.implementation_item import ImplementationItem, ItemStatus
from business_ideas.models.validation import Validation


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_db() -> Database:
    """Return a Database backed by a fresh temporary file."""
    tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    tmp.close()
    db = Database(path=Path(tmp.name))
    db.init()
    return db


def _sample_idea(**overrides) -> Idea:
    defaults = dict(
        summary="Meal kits for students",
        description="Weekly boxes priced for campus budgets",
        bullet_points=["cheap", "healthy"],
    )
    defaults.update(overrides)
    return Idea(**defaults)


class _RepoTestCase(unittest.TestCase):
    def setUp(self):
        self.db = _make_db()
        self.ideas = IdeaRepository(self.db)

    def tearDown(self):
        self.db.close()
        self.db.path.unlink(missing_ok=True)


# ===========================================================================
# 1. Database core
# ===========================================================================

class TestDatabaseCore(_RepoTestCase):
    def test_tables_created(self):
        tables = self.db.fetchall(
            "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
        )
        names = {t["name"] for t in tables}
        expected = {"ideas", "validations", "business_plans", "implementation_items"}
        self.assertTrue(expected.issubset(names), f"Missing tables: {expected - names}")

    def test_init_is_idempotent(self):
        self.ideas.create(_sample_idea())
        self.db.init()
        self.assertEqual(len(self.ideas.list_active()), 1)

    def test_foreign_keys_enabled(self):
        row = self.db.fetchone("PRAGMA foreign_keys")
        self.assertEqual(row["foreign_keys"], 1)

    def test_package_exports(self):
        import business_ideas.db as db_package

        self.assertEqual(sorted(db_package.__all__), ["Database", "SCHEMA_DDL", "TABLES"])
        self.assertFalse(hasattr(self.db, "execute"))

    def test_transaction_rollback(self):
        try:
            with self.db.transaction() as conn:
                conn.execute(
                    "INSERT INTO ideas (summary, description) VALUES (?, ?)",
                    ("rolled back", "never stored"),
                )
                raise ValueError("Force rollback")
        except ValueError:
            pass
        row = self.db.fetchone("SELECT * FROM ideas WHERE summary = 'rolled back'")
        self.assertIsNone(row)

    def test_child_requires_existing_idea(self):
        with self.assertRaises(sqlite3.IntegrityError):
            with self.db.transaction() as conn:
                conn.execute(
                    "INSERT INTO implementation_items (idea_id, item_type, name) VALUES (?, ?, ?)",
                    (999, "task", "orphan"),
                )


# ===========================================================================
# 2. Ideas
# ===========================================================================

class TestIdeaRepository(_RepoTestCase):
    def test_create_assigns_defaults(self):
        idea = self.ideas.create(Idea(summary="S", description="D"))
        self.assertIsNotNone(idea.id)
        self.assertEqual(idea.bullet_points, [])
        self.assertEqual(idea.status, IdeaStatus.DRAFT.value)
        self.assertIsNone(idea.company_name)
        self.assertTrue(idea.is_active)
        self.assertTrue(idea.created_at)
        self.assertTrue(idea.updated_at)

    def test_bullet_points_keep_order(self):
        idea = self.ideas.create(_sample_idea(bullet_points=["b", "a", "c"]))
        fetched = self.ideas.get_by_id(idea.id)
        self.assertEqual(fetched.bullet_points, ["b", "a", "c"])

    def test_missing_summary_violates_not_null(self):
        with self.assertRaises(sqlite3.IntegrityError):
            self.ideas.create(Idea(summary=None, description="D"))

    def test_list_active_excludes_inactive(self):
        kept = self.ideas.create(_sample_idea(summary="kept"))
        hidden = self.ideas.create(_sample_idea(summary="hidden", is_active=False))
        ids = [i.id for i in self.ideas.list_active()]
        self.assertIn(kept.id, ids)
        self.assertNotIn(hidden.id, ids)
        self.assertIsNotNone(self.ideas.get_by_id(hidden.id))

    def test_list_active_newest_first(self):
        first = self.ideas.create(_sample_idea(summary="first"))
        second = self.ideas.create(_sample_idea(summary="second"))
        ids = [i.id for i in self.ideas.list_active()]
        self.assertEqual(ids, [second.id, first.id])

    def test_update_replaces_fields(self):
        idea = self.ideas.create(_sample_idea())
        updated = self.ideas.update(idea.id, Idea(
            summary="New", description="Changed", bullet_points=["x"],
            status="validated", company_name="Acme", is_active=False,
        ))
        self.assertEqual(updated.summary, "New")
        self.assertEqual(updated.bullet_points, ["x"])
        self.assertEqual(updated.company_name, "Acme")
        self.assertFalse(updated.is_active)
        self.assertEqual(updated.status, "validated")

    def test_update_missing_returns_none(self):
        self.assertIsNone(self.ideas.update(999, _sample_idea()))

    def test_exists(self):
        idea = self.ideas.create(_sample_idea())
        self.assertTrue(self.ideas.exists(idea.id))
        self.assertFalse(self.ideas.exists(999))

    def test_delete(self):
        idea = self.ideas.create(_sample_idea())
        self.assertTrue(self.ideas.delete(idea.id))
        self.assertIsNone(self.ideas.get_by_id(idea.id))
        self.assertFalse(self.ideas.delete(idea.id))

    def test_delete_cascades_to_children(self):
        idea = self.ideas.create(_sample_idea())
        validation = ValidationRepository(self.db).create(Validation(idea_id=idea.id, score=70))
        plan = BusinessPlanRepository(self.db).create(BusinessPlan(idea_id=idea.id))
        item = ImplementationItemRepository(self.db).create(
            ImplementationItem(idea_id=idea.id, item_type="task", name="Build MVP")
        )

        self.ideas.delete(idea.id)

        self.assertIsNone(ValidationRepository(self.db).get_by_id(validation.id))
        self.assertIsNone(BusinessPlanRepository(self.db).get_by_id(plan.id))
        self.assertIsNone(ImplementationItemRepository(self.db).get_by_id(item.id))


# ===========================================================================
# 3. Validations
# ===========================================================================

class TestValidationRepository(_RepoTestCase):
    def setUp(self):
        super().setUp()
        self.repo = ValidationRepository(self.db)
        self.idea = self.ideas.create(_sample_idea())

    def test_create_marks_idea_validated(self):
        v = self.repo.create(Validation(idea_id=self.idea.id, validation_data={"market": "large"}, score=82))
        self.assertEqual(v.validation_data, {"market": "large"})
        self.assertEqual(v.score, 82)
        self.assertEqual(self.ideas.get_by_id(self.idea.id).status, IdeaStatus.VALIDATED.value)

    def test_status_untouched_when_insert_fails(self):
        with self.assertRaises(sqlite3.IntegrityError):
            self.repo.create(Validation(idea_id=999))
        self.assertEqual(self.ideas.get_by_id(self.idea.id).status, IdeaStatus.DRAFT.value)

    def test_latest_for_idea(self):
        self.repo.create(Validation(idea_id=self.idea.id, score=10))
        newest = self.repo.create(Validation(idea_id=self.idea.id, score=90))
        self.assertEqual(self.repo.get_latest_for_idea(self.idea.id).id, newest.id)
        self.assertIsNone(self.repo.get_latest_for_idea(999))

    def test_update(self):
        v = self.repo.create(Validation(idea_id=self.idea.id, validation_data={"a": 1}, score=1))
        updated = self.repo.update(v.id, Validation(idea_id=self.idea.id, validation_data={"foo": 1}, score=80))
        self.assertEqual(updated.validation_data, {"foo": 1})
        self.assertEqual(updated.score, 80)
        self.assertIsNone(self.repo.update(999, v))

    def test_delete(self):
        v = self.repo.create(Validation(idea_id=self.idea.id))
        self.assertTrue(self.repo.delete(v.id))
        self.assertFalse(self.repo.delete(v.id))


# ===========================================================================
# 4. Business plans
# ===========================================================================

class TestBusinessPlanRepository(_RepoTestCase):
    def setUp(self):
        super().setUp()
        self.repo = BusinessPlanRepository(self.db)
        self.idea = self.ideas.create(_sample_idea())

    def test_create_moves_idea_to_planning(self):
        plan = self.repo.create(BusinessPlan(
            idea_id=self.idea.id,
            template_id="lean-canvas",
            sections={"problem": "Students eat badly"},
            tasks=[{"title": "Survey", "done": False}],
        ))
        self.assertEqual(plan.template_id, "lean-canvas")
        self.assertEqual(plan.sections, {"problem": "Students eat badly"})
        self.assertEqual(plan.tasks, [{"title": "Survey", "done": False}])
        self.assertEqual(self.ideas.get_by_id(self.idea.id).status, IdeaStatus.PLANNING.value)

    def test_update(self):
        plan = self.repo.create(BusinessPlan(idea_id=self.idea.id, template_id="a"))
        updated = self.repo.update(plan.id, BusinessPlan(
            idea_id=self.idea.id, template_id="b", sections={"x": 1}, tasks=["t"],
        ))
        self.assertEqual(updated.template_id, "b")
        self.assertEqual(updated.sections, {"x": 1})
        self.assertEqual(updated.tasks, ["t"])

    def test_latest_and_delete(self):
        plan = self.repo.create(BusinessPlan(idea_id=self.idea.id))
        self.assertEqual(self.repo.get_latest_for_idea(self.idea.id).id, plan.id)
        self.assertTrue(self.repo.delete(plan.id))
        self.assertIsNone(self.repo.get_latest_for_idea(self.idea.id))


# ===========================================================================
# 5. Implementation items
# ===========================================================================

class TestImplementationItemRepository(_RepoTestCase):
    def setUp(self):
        super().setUp()
        self.repo = ImplementationItemRepository(self.db)
        self.idea = self.ideas.create(_sample_idea())

    def test_create_defaults(self):
        item = self.repo.create(ImplementationItem(idea_id=self.idea.id, item_type="task", name="Pilot"))
        self.assertEqual(item.completion_percentage, 0)
        self.assertEqual(item.status, ItemStatus.NOT_STARTED.value)
        self.assertIsNone(item.owner)

    def test_list_for_idea(self):
        other = self.ideas.create(_sample_idea(summary="other"))
        self.repo.create(ImplementationItem(idea_id=self.idea.id, item_type="task", name="one"))
        self.repo.create(ImplementationItem(idea_id=self.idea.id, item_type="task", name="two"))
        self.repo.create(ImplementationItem(idea_id=other.id, item_type="task", name="elsewhere"))
        names = [i.name for i in self.repo.list_for_idea(self.idea.id)]
        self.assertEqual(names, ["one", "two"])

    def test_creating_item_keeps_idea_status(self):
        self.repo.create(ImplementationItem(idea_id=self.idea.id, item_type="task", name="x"))
        self.assertEqual(self.ideas.get_by_id(self.idea.id).status, IdeaStatus.DRAFT.value)

    def test_update(self):
        item = self.repo.create(ImplementationItem(idea_id=self.idea.id, item_type="task", name="Pilot"))
        updated = self.repo.update(item.id, ImplementationItem(
            idea_id=self.idea.id, item_type="milestone", name="Pilot", owner="Dana",
            start_date="2026-01-01", end_date="2026-02-01",
            completion_percentage=50, status=ItemStatus.IN_PROGRESS.value,
        ))
        self.assertEqual(updated.item_type, "milestone")
        self.assertEqual(updated.owner, "Dana")
        self.assertEqual(updated.completion_percentage, 50)
        self.assertEqual(updated.status, "in-progress")
        self.assertEqual(updated.idea_id, self.idea.id)

    def test_delete(self):
        item = self.repo.create(ImplementationItem(idea_id=self.idea.id, item_type="task", name="x"))
        self.assertTrue(self.repo.delete(item.id))
        self.assertIsNone(self.repo.get_by_id(item.id))
        self.assertFalse(self.repo.delete(item.id))


if __name__ == "__main__":
    unittest.main()
