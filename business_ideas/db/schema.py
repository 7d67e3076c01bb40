"""Database schema DDL: ideas and the three child record kinds."""

SCHEMA_DDL = """
PRAGMA foreign_keys = ON;

-- ==========================================================================
-- Ideas (root record)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS ideas (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    summary         TEXT NOT NULL,
    description     TEXT NOT NULL,
    bullet_points   TEXT DEFAULT '[]',
    status          TEXT DEFAULT 'draft',
    company_name    TEXT,
    created_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now')),
    updated_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now')),
    is_active       INTEGER NOT NULL DEFAULT 1
);

CREATE INDEX IF NOT EXISTS idx_ideas_active ON ideas(is_active, created_at);

-- ==========================================================================
-- Validations
-- ==========================================================================
CREATE TABLE IF NOT EXISTS validations (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    idea_id         INTEGER NOT NULL REFERENCES ideas(id) ON DELETE CASCADE,
    validation_data TEXT NOT NULL,
    score           INTEGER,
    created_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

CREATE INDEX IF NOT EXISTS idx_validations_idea ON validations(idea_id);

-- ==========================================================================
-- Business plans
-- ==========================================================================
CREATE TABLE IF NOT EXISTS business_plans (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    idea_id         INTEGER NOT NULL REFERENCES ideas(id) ON DELETE CASCADE,
    template_id     TEXT,
    sections        TEXT,
    tasks           TEXT,
    created_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now')),
    updated_at      TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

CREATE INDEX IF NOT EXISTS idx_business_plans_idea ON business_plans(idea_id);

-- ==========================================================================
-- Implementation items
-- ==========================================================================
CREATE TABLE IF NOT EXISTS implementation_items (
    id                      INTEGER PRIMARY KEY AUTOINCREMENT,
    idea_id                 INTEGER NOT NULL REFERENCES ideas(id) ON DELETE CASCADE,
    item_type               TEXT NOT NULL,
    name                    TEXT NOT NULL,
    owner                   TEXT,
    start_date              TEXT,
    end_date                TEXT,
    completion_percentage   INTEGER DEFAULT 0,
    status                  TEXT DEFAULT 'not-started',
    created_at              TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now')),
    updated_at              TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

CREATE INDEX IF NOT EXISTS idx_implementation_items_idea ON implementation_items(idea_id);
"""

TABLES = ("ideas", "validations", "business_plans", "implementation_items")
