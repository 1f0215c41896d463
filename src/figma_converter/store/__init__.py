from __future__ import annotations

from figma_converter.store.db import Database
from figma_converter.store.migrations import run_migrations
from figma_converter.store.repositories import ComponentRepository, JobRepository

__all__ = [
    "Database",
    "run_migrations",
    "JobRepository",
    "ComponentRepository",
]
