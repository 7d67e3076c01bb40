#!/usr/bin/env python3
"""Quick check of database state."""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from business_ideas.db import TABLES, Database
from business_ideas.db.idea_repo import IdeaRepository


def main():
    parser = argparse.ArgumentParser(description="Show row counts and active ideas")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    db = Database(path=Path(args.db_path) if args.db_path else None)
    db.init()

    print(f"=== {db.path} ===")
    for table in TABLES:
        row = db.fetchone(f"SELECT COUNT(*) AS n FROM {table}")
        print(f"  {table:<22} {row['n']}")

    print("\n=== Active ideas ===")
    for idea in IdeaRepository(db).list_active():
        print(f"  #{idea.id:<4} | {idea.summary[:40]:<40} | {idea.status}")

    db.close()


if __name__ == "__main__":
    main()
