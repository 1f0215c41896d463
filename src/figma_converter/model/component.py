from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GeneratedComponentRecord:
    """A stored conversion result."""

    id: str
    name: str
    job_id: str
    source_type: str = "css_import"
    source_data: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    generated_code: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    design_tokens: dict[str, str] = field(default_factory=dict, hash=False, compare=False)
    metadata: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    created_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "jobId": self.job_id,
            "sourceType": self.source_type,
            "sourceData": self.source_data,
            "generatedCode": self.generated_code,
            "designTokens": self.design_tokens,
            "metadata": self.metadata,
            "createdAt": self.created_at,
        }
