from __future__ import annotations

import pytest

from figma_converter.errors import (
    ConverterError,
    ErrorCategory,
    FigmaApiError,
    NetworkError,
    ProcessingError,
    ValidationError,
    figma_error_from_status,
    is_recoverable,
    user_action_for,
)


class TestConverterError:
    def test_defaults_from_category(self):
        err = NetworkError("offline")
        assert err.code == "NETWORK_ERROR"
        assert err.recoverable is True
        assert err.user_action == "Check your internet connection and try again"
        assert str(err) == "offline"

    def test_validation_not_recoverable(self):
        err = ValidationError("bad", code="VALIDATION_EMPTY_CSS")
        assert err.recoverable is False
        assert err.to_dict() == {
            "error": "bad",
            "code": "VALIDATION_EMPTY_CSS",
            "category": "validation",
            "recoverable": False,
            "userAction": "Please check your input and correct any validation errors",
        }

    def test_explicit_overrides(self):
        err = ProcessingError("x", recoverable=False, user_action="Do nothing")
        assert err.recoverable is False
        assert err.user_action == "Do nothing"

    def test_cause_and_context_kept(self):
        cause = ValueError("inner")
        err = ConverterError("outer", cause=cause, context={"k": 1})
        assert err.cause is cause
        assert err.context == {"k": 1}
        assert err.category is ErrorCategory.PROCESSING

    def test_subclasses_share_base(self):
        for cls in (ValidationError, NetworkError, FigmaApiError, ProcessingError):
            assert issubclass(cls, ConverterError)


class TestRecoverability:
    @pytest.mark.parametrize(
        "category,status,expected",
        [
            (ErrorCategory.NETWORK, None, True),
            (ErrorCategory.FIGMA_API, 500, True),
            (ErrorCategory.FIGMA_API, 401, False),
            (ErrorCategory.FIGMA_API, 403, False),
            (ErrorCategory.STORAGE, None, True),
            (ErrorCategory.VALIDATION, None, False),
            (ErrorCategory.AUTHENTICATION, None, False),
        ],
    )
    def test_is_recoverable(self, category, status, expected):
        assert is_recoverable(category, status) is expected

    def test_token_hint_for_auth_failures(self):
        assert "access token" in user_action_for(ErrorCategory.FIGMA_API, 401)


class TestFigmaErrorFromStatus:
    @pytest.mark.parametrize(
        "status,code,recoverable",
        [
            (401, "FIGMA_UNAUTHORIZED", False),
            (403, "FIGMA_FORBIDDEN", False),
            (404, "FIGMA_NOT_FOUND", False),
            (429, "FIGMA_RATE_LIMIT", True),
            (500, "FIGMA_API_ERROR", True),
        ],
    )
    def test_mapping(self, status, code, recoverable):
        err = figma_error_from_status(status)
        assert isinstance(err, FigmaApiError)
        assert err.code == code
        assert err.recoverable is recoverable
        assert err.status_code == status

    def test_unknown_status_message(self):
        err = figma_error_from_status(502, "bad gateway")
        assert err.message == "Figma API error: 502"
        assert err.context == {"detail": "bad gateway"}
