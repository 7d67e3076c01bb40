"""Tests for environment-driven settings and the seed script."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from business_ideas.config import Settings, get_db_path
from business_ideas.db.database import Database
from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.db.implementation_repo import ImplementationItemRepository
from scripts.init_db import seed_ideas


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.PORT, 3001)
        self.assertEqual(settings.CORS_ORIGINS, ["*"])
        self.assertEqual(settings.DATABASE_PATH.name, "business_ideas.db")

    def test_environment_overrides(self):
        env = {"PORT": "8080", "DATABASE_PATH": "/tmp/other.db", "LOG_LEVEL": "DEBUG"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.PORT, 8080)
        self.assertEqual(settings.DATABASE_PATH, Path("/tmp/other.db"))
        self.assertEqual(settings.LOG_LEVEL, "DEBUG")

    def test_db_path_comes_from_settings(self):
        with patch.dict(os.environ, {"DATABASE_PATH": "/tmp/other.db"}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(get_db_path(settings), Path("/tmp/other.db"))


class TestSeedIdeas(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        root = Path(self.tmpdir.name)
        self.db = Database(path=root / "seed.db")
        self.db.init()
        self.seed_file = root / "ideas.yaml"
        self.seed_file.write_text(
            "ideas:\n"
            "  - summary: Meal kits\n"
            "    description: For students\n"
            "    bullet_points: [cheap, healthy]\n"
            "    implementation_items:\n"
            "      - item_type: milestone\n"
            "        name: Pilot\n"
            "  - description: no summary here\n",
            encoding="utf-8",
        )

    def tearDown(self):
        self.db.close()
        self.tmpdir.cleanup()

    def test_seed_creates_ideas_and_items(self):
        created = seed_ideas(self.db, self.seed_file)
        self.assertEqual(created, 1)
        ideas = IdeaRepository(self.db).list_active()
        self.assertEqual(len(ideas), 1)
        self.assertEqual(ideas[0].bullet_points, ["cheap", "healthy"])
        items = ImplementationItemRepository(self.db).list_for_idea(ideas[0].id)
        self.assertEqual([i.name for i in items], ["Pilot"])


if __name__ == "__main__":
    unittest.main()
