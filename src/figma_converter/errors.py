"""Categorized errors for everything around the transpiler core.

The core itself never raises on bad CSS; these cover input validation,
the Figma API, and job processing.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCategory(StrEnum):
    NETWORK = "network"
    FIGMA_API = "figma_api"
    VALIDATION = "validation"
    PROCESSING = "processing"
    STORAGE = "storage"
    AUTHENTICATION = "authentication"


def is_recoverable(category: ErrorCategory, status_code: int | None = None) -> bool:
    """Return True if retrying without user action could succeed."""
    if category in (ErrorCategory.NETWORK, ErrorCategory.FIGMA_API):
        return status_code not in (401, 403)
    return category in (ErrorCategory.PROCESSING, ErrorCategory.STORAGE)


def user_action_for(category: ErrorCategory, status_code: int | None = None) -> str:
    """Suggested next step to show the user."""
    if category is ErrorCategory.NETWORK:
        return "Check your internet connection and try again"
    if category is ErrorCategory.FIGMA_API:
        if status_code in (401, 403):
            return "Please check your Figma access token in Settings"
        return "Figma service temporarily unavailable, please try again"
    if category is ErrorCategory.VALIDATION:
        return "Please check your input and correct any validation errors"
    if category is ErrorCategory.PROCESSING:
        return "Processing failed, please try again or contact support"
    if category is ErrorCategory.STORAGE:
        return "Storage error occurred, please try again"
    return "Please log in again or check your credentials"


class ConverterError(Exception):
    """Base error carrying a code, category and user-facing guidance."""

    category: ErrorCategory = ErrorCategory.PROCESSING

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        recoverable: bool | None = None,
        user_action: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or f"{self.category.upper()}_ERROR"
        self.status_code = status_code
        self.recoverable = (
            is_recoverable(self.category, status_code) if recoverable is None else recoverable
        )
        self.user_action = user_action or user_action_for(self.category, status_code)
        self.context = context or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "recoverable": self.recoverable,
            "userAction": self.user_action,
        }


class ValidationError(ConverterError):
    category = ErrorCategory.VALIDATION


class NetworkError(ConverterError):
    category = ErrorCategory.NETWORK


class FigmaApiError(ConverterError):
    category = ErrorCategory.FIGMA_API


class ProcessingError(ConverterError):
    category = ErrorCategory.PROCESSING


_FIGMA_STATUS_ERRORS: dict[int, tuple[str, str, bool, str]] = {
    401: (
        "FIGMA_UNAUTHORIZED",
        "Invalid or expired Figma access token",
        False,
        "Please update your Figma access token in Settings",
    ),
    403: (
        "FIGMA_FORBIDDEN",
        "Access denied to Figma file",
        False,
        "Check file permissions or verify the file URL",
    ),
    404: (
        "FIGMA_NOT_FOUND",
        "Figma file not found",
        False,
        "Verify the Figma file URL is correct",
    ),
    429: (
        "FIGMA_RATE_LIMIT",
        "Figma API rate limit exceeded",
        True,
        "Please wait a moment before trying again",
    ),
}


def figma_error_from_status(status_code: int, detail: str = "") -> FigmaApiError:
    """Map a non-2xx Figma API status onto a FigmaApiError."""
    known = _FIGMA_STATUS_ERRORS.get(status_code)
    if known is None:
        return FigmaApiError(
            f"Figma API error: {status_code}",
            code="FIGMA_API_ERROR",
            recoverable=True,
            user_action="Please try again in a few moments",
            status_code=status_code,
            context={"detail": detail} if detail else None,
        )
    code, message, recoverable, action = known
    return FigmaApiError(
        message,
        code=code,
        recoverable=recoverable,
        user_action=action,
        status_code=status_code,
        context={"detail": detail} if detail else None,
    )
