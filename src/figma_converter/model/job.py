from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class JobType(StrEnum):
    CSS_PROCESSING = "css_processing"
    FIGMA_EXTRACTION = "figma_extraction"


class JobStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class ProcessingJob:
    id: str
    type: JobType
    status: JobStatus = JobStatus.PENDING
    input_data: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    output_data: dict[str, Any] | None = field(default=None, hash=False, compare=False)
    error_message: str = ""
    progress_percentage: int = 0
    user_id: int = 1
    created_at: str = ""  # ISO 8601
    completed_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "status": self.status.value,
            "inputData": self.input_data,
            "outputData": self.output_data,
            "errorMessage": self.error_message or None,
            "progressPercentage": self.progress_percentage,
            "userId": self.user_id,
            "createdAt": self.created_at,
            "completedAt": self.completed_at or None,
        }
