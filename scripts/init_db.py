#!/usr/bin/env python3
"""Initialize the database and optionally seed ideas from a YAML file.

Seed file layout::

    ideas:
      - summary: Meal kits for students
        description: Weekly boxes priced for campus budgets
        bullet_points: [cheap, healthy]
        company_name: CampusCrate
        implementation_items:
          - item_type: milestone
            name: Pilot on one campus
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from business_ideas.db.database import Database
from business_ideas.db.idea_repo import IdeaRepository
from business_ideas.db.implementation_repo import ImplementationItemRepository
from business_ideas.models.idea import Idea, IdeaStatus
from business_ideas.models.implementation_item import ImplementationItem, ItemStatus


def main():
    parser = argparse.ArgumentParser(description="Initialize the database")
    parser.add_argument("--seed-ideas", type=str, help="YAML file with idea definitions")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    db_path = Path(args.db_path) if args.db_path else None
    db = Database(path=db_path)
    db.init()
    print(f"Database initialized at: {db.path}")

    if args.seed_ideas:
        seed_ideas(db, Path(args.seed_ideas))

    db.close()
    print("Done.")


def seed_ideas(db: Database, path: Path) -> int:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    ideas = IdeaRepository(db)
    items = ImplementationItemRepository(db)
    created = 0
    for entry in data.get("ideas", []):
        try:
            idea = ideas.create(Idea(
                summary=entry["summary"],
                description=entry["description"],
                bullet_points=entry.get("bullet_points", []),
                status=entry.get("status", IdeaStatus.DRAFT.value),
                company_name=entry.get("company_name"),
            ))
        except (KeyError, TypeError) as e:
            print(f"  Skipping {entry.get('summary', '?')}: missing {e}")
            continue
        created += 1
        print(f"  Created idea #{idea.id}: {idea.summary}")

        for raw in entry.get("implementation_items", []):
            item = items.create(ImplementationItem(
                idea_id=idea.id,
                item_type=raw.get("item_type", "task"),
                name=raw["name"],
                owner=raw.get("owner"),
                start_date=raw.get("start_date"),
                end_date=raw.get("end_date"),
                completion_percentage=raw.get("completion_percentage", 0),
                status=raw.get("status", ItemStatus.NOT_STARTED.value),
            ))
            print(f"    + {item.item_type}: {item.name}")
    return created


if __name__ == "__main__":
    main()
