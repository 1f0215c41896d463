"""Run CSS conversions and record them as processing jobs."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

from figma_converter.errors import ConverterError
from figma_converter.model.component import GeneratedComponentRecord
from figma_converter.model.job import JobStatus, JobType, ProcessingJob
from figma_converter.store.repositories import ComponentRepository, JobRepository
from figma_converter.transpiler import generate, parse
from figma_converter.transpiler.model import GeneratedComponentCode, ParsedStyleSheet
from figma_converter.validation import sanitize_css_input, validate_css_input

logger = logging.getLogger(__name__)

ParseFn = Callable[[str], ParsedStyleSheet]


def _generate_id() -> str:
    return uuid.uuid4().hex[:12]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Conversion:
    """A parsed sheet together with everything generated from it."""

    parsed: ParsedStyleSheet
    code: GeneratedComponentCode

    def stats(self) -> dict[str, Any]:
        return {
            "rules": len(self.parsed.rules),
            "declarations": self.parsed.declaration_count,
            "animations": len(self.parsed.animations),
            "responsiveRules": len(self.parsed.responsive_rules),
            "customProperties": len(self.parsed.custom_properties),
            "layoutType": self.parsed.layout_type.value,
            "tailwindClassCount": len(self.code.tailwind_classes.split()),
            "customStyleCount": len(self.code.custom_styles),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "componentName": self.parsed.component_name,
            "layoutType": self.parsed.layout_type.value,
            "designTokens": dict(self.parsed.design_tokens),
            "stats": self.stats(),
            **self.code.to_dict(),
        }


class CssProcessingService:
    """Validate, convert, and persist CSS imports.

    Conversion runs inline; the job record exists so clients can poll for
    the result the same way regardless of how long processing takes.
    """

    def __init__(
        self,
        job_repo: JobRepository,
        component_repo: ComponentRepository,
        parse_fn: ParseFn = parse,
        max_css_length: int = 500_000,
    ) -> None:
        self._jobs = job_repo
        self._components = component_repo
        self._parse = parse_fn
        self._max_css_length = max_css_length

    def convert(self, css_code: object) -> Conversion:
        """Validate and convert without touching storage."""
        text = sanitize_css_input(validate_css_input(css_code, self._max_css_length))
        parsed = self._parse(text)
        return Conversion(parsed=parsed, code=generate(parsed))

    def submit(
        self,
        css_code: object,
        options: dict[str, Any] | None = None,
        user_id: int = 1,
    ) -> ProcessingJob:
        """Create a job for *css_code* and process it to completion.

        Validation errors are raised before any job is created. Errors
        during processing are recorded on the job instead.
        """
        text = validate_css_input(css_code, self._max_css_length)
        job = ProcessingJob(
            id=_generate_id(),
            type=JobType.CSS_PROCESSING,
            status=JobStatus.PROCESSING,
            input_data={"cssCode": text, "options": options or {}},
            user_id=user_id,
            created_at=_now(),
        )
        self._jobs.create(job)
        logger.info("Created job %s for user %d", job.id, user_id)
        self._run(job, text)
        result = self._jobs.get(job.id)
        assert result is not None
        return result

    def _run(self, job: ProcessingJob, text: str) -> None:
        try:
            self._jobs.update_progress(job.id, 30)
            conversion = self.convert(text)
            self._jobs.update_progress(job.id, 70)

            component = GeneratedComponentRecord(
                id=_generate_id(),
                name=conversion.parsed.component_name,
                job_id=job.id,
                source_data={"cssCode": text},
                generated_code=conversion.code.to_dict(),
                design_tokens=dict(conversion.parsed.design_tokens),
                metadata={
                    "extractedAt": _now(),
                    "cssRulesCount": len(conversion.parsed.rules),
                },
                created_at=_now(),
            )
            self._components.create(component)
            self._jobs.complete(
                job.id,
                {
                    "componentId": component.id,
                    "componentName": component.name,
                    "stats": conversion.stats(),
                    "generatedCode": conversion.code.to_dict(),
                },
                completed_at=_now(),
            )
            logger.info("Job %s completed: %s", job.id, component.name)
        except ConverterError as exc:
            logger.warning("Job %s failed: %s", job.id, exc)
            self._jobs.fail(job.id, str(exc), completed_at=_now())
        except Exception as exc:
            logger.exception("Job %s crashed", job.id)
            self._jobs.fail(job.id, str(exc) or type(exc).__name__, completed_at=_now())
