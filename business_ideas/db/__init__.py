"""Database layer: SQLite with ACID transactions and repository pattern."""

from business_ideas.db.database import Database
from business_ideas.db.schema import SCHEMA_DDL, TABLES

__all__ = ["Database", "SCHEMA_DDL", "TABLES"]
