from __future__ import annotations

import json
import sqlite3
from typing import Any

from figma_converter.model.component import GeneratedComponentRecord
from figma_converter.model.job import JobStatus, JobType, ProcessingJob
from figma_converter.store.db import Database


class JobRepository:
    """Persistence for ProcessingJob records."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, job: ProcessingJob) -> None:
        self._db.execute(
            """INSERT INTO processing_jobs
               (id, type, status, input_data, output_data, error_message,
                progress_percentage, user_id, created_at, completed_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                job.id,
                job.type.value,
                job.status.value,
                json.dumps(job.input_data),
                _dumps_optional(job.output_data),
                job.error_message,
                job.progress_percentage,
                job.user_id,
                job.created_at,
                job.completed_at,
            ),
        )
        self._db.commit()

    def get(self, job_id: str) -> ProcessingJob | None:
        row = self._db.fetch_one("SELECT * FROM processing_jobs WHERE id = ?", (job_id,))
        if row is None:
            return None
        return _row_to_job(row)

    def update_progress(self, job_id: str, progress: int) -> None:
        self._db.execute(
            "UPDATE processing_jobs SET progress_percentage = ? WHERE id = ?",
            (progress, job_id),
        )
        self._db.commit()

    def complete(self, job_id: str, output_data: dict[str, Any], completed_at: str) -> None:
        """Mark a job completed at 100% with its output."""
        self._db.execute(
            """UPDATE processing_jobs
               SET status = ?, progress_percentage = 100, output_data = ?, completed_at = ?
               WHERE id = ?""",
            (JobStatus.COMPLETED.value, json.dumps(output_data), completed_at, job_id),
        )
        self._db.commit()

    def fail(self, job_id: str, error_message: str, completed_at: str) -> None:
        """Mark a job failed. Progress goes to 100 so pollers stop waiting."""
        self._db.execute(
            """UPDATE processing_jobs
               SET status = ?, progress_percentage = 100, error_message = ?, completed_at = ?
               WHERE id = ?""",
            (JobStatus.FAILED.value, error_message, completed_at, job_id),
        )
        self._db.commit()

    def list_by_user(self, user_id: int, limit: int = 10) -> tuple[ProcessingJob, ...]:
        """Most recent jobs for a user, newest first."""
        rows = self._db.fetch_all(
            """SELECT * FROM processing_jobs WHERE user_id = ?
               ORDER BY created_at DESC, rowid DESC LIMIT ?""",
            (user_id, limit),
        )
        return tuple(_row_to_job(r) for r in rows)

    def count_by_status(self) -> dict[str, int]:
        rows = self._db.fetch_all(
            "SELECT status, COUNT(*) as cnt FROM processing_jobs GROUP BY status"
        )
        return {row["status"]: row["cnt"] for row in rows}


class ComponentRepository:
    """Persistence for generated component records."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, component: GeneratedComponentRecord) -> None:
        self._db.execute(
            """INSERT INTO generated_components
               (id, name, job_id, source_type, source_data, generated_code,
                design_tokens, metadata, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                component.id,
                component.name,
                component.job_id,
                component.source_type,
                json.dumps(component.source_data),
                json.dumps(component.generated_code),
                json.dumps(component.design_tokens),
                json.dumps(component.metadata),
                component.created_at,
            ),
        )
        self._db.commit()

    def get(self, component_id: str) -> GeneratedComponentRecord | None:
        row = self._db.fetch_one(
            "SELECT * FROM generated_components WHERE id = ?", (component_id,)
        )
        if row is None:
            return None
        return _row_to_component(row)

    def list_by_job(self, job_id: str) -> tuple[GeneratedComponentRecord, ...]:
        rows = self._db.fetch_all(
            "SELECT * FROM generated_components WHERE job_id = ? ORDER BY rowid ASC",
            (job_id,),
        )
        return tuple(_row_to_component(r) for r in rows)


# ---------------------------------------------------------------------------
# Row mapping helpers
# ---------------------------------------------------------------------------


def _dumps_optional(value: dict[str, Any] | None) -> str | None:
    return None if value is None else json.dumps(value)


def _row_to_job(row: sqlite3.Row) -> ProcessingJob:
    output = row["output_data"]
    return ProcessingJob(
        id=row["id"],
        type=JobType(row["type"]),
        status=JobStatus(row["status"]),
        input_data=json.loads(row["input_data"]),
        output_data=json.loads(output) if output is not None else None,
        error_message=row["error_message"],
        progress_percentage=row["progress_percentage"],
        user_id=row["user_id"],
        created_at=row["created_at"],
        completed_at=row["completed_at"],
    )


def _row_to_component(row: sqlite3.Row) -> GeneratedComponentRecord:
    return GeneratedComponentRecord(
        id=row["id"],
        name=row["name"],
        job_id=row["job_id"],
        source_type=row["source_type"],
        source_data=json.loads(row["source_data"]),
        generated_code=json.loads(row["generated_code"]),
        design_tokens=json.loads(row["design_tokens"]),
        metadata=json.loads(row["metadata"]),
        created_at=row["created_at"],
    )
