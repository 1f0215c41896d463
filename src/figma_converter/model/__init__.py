from __future__ import annotations

from figma_converter.model.component import GeneratedComponentRecord
from figma_converter.model.job import JobStatus, JobType, ProcessingJob

__all__ = [
    # job
    "JobType",
    "JobStatus",
    "ProcessingJob",
    # component
    "GeneratedComponentRecord",
]
