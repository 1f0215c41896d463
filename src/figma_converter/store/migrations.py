from __future__ import annotations

from figma_converter.store.db import Database

SCHEMA = """
CREATE TABLE IF NOT EXISTS processing_jobs (
    id TEXT PRIMARY KEY,
    type TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'pending',
    input_data TEXT NOT NULL DEFAULT '{}',
    output_data TEXT,
    error_message TEXT NOT NULL DEFAULT '',
    progress_percentage INTEGER NOT NULL DEFAULT 0,
    user_id INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL DEFAULT '',
    completed_at TEXT NOT NULL DEFAULT ''
);

CREATE INDEX IF NOT EXISTS idx_processing_jobs_user
    ON processing_jobs (user_id, created_at);

CREATE TABLE IF NOT EXISTS generated_components (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    job_id TEXT NOT NULL,
    source_type TEXT NOT NULL DEFAULT 'css_import',
    source_data TEXT NOT NULL DEFAULT '{}',
    generated_code TEXT NOT NULL DEFAULT '{}',
    design_tokens TEXT NOT NULL DEFAULT '{}',
    metadata TEXT NOT NULL DEFAULT '{}',
    created_at TEXT NOT NULL DEFAULT '',
    FOREIGN KEY (job_id) REFERENCES processing_jobs(id)
);
"""


def run_migrations(db: Database) -> None:
    """Create the job and component tables if they are missing."""
    db.connection.executescript(SCHEMA)
    db.commit()
