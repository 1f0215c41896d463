"""Checks applied to user input before it reaches the transpiler."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from figma_converter.errors import ValidationError

__all__ = [
    "extract_file_id",
    "sanitize_component_name",
    "sanitize_css_input",
    "validate_css_input",
    "validate_figma_token",
    "validate_figma_url",
]

_DANGEROUS_CSS = (
    re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"expression\s*\(", re.IGNORECASE),
    re.compile(r"behavior\s*:", re.IGNORECASE),
    re.compile(r"@import", re.IGNORECASE),
)
_FIGMA_HOSTS = frozenset({"www.figma.com", "figma.com"})
_FILE_ID_RE = re.compile(r"/(?:file|design|proto)/([A-Za-z0-9]+)")


def sanitize_css_input(css_code: str) -> str:
    """Remove script injection vectors and ``@import`` from CSS text."""
    for pattern in _DANGEROUS_CSS:
        css_code = pattern.sub("", css_code)
    return css_code.strip()


def validate_css_input(css_code: object, max_length: int = 500_000) -> str:
    """Return *css_code* if it is usable, otherwise raise ValidationError."""
    if not isinstance(css_code, str) or not css_code.strip():
        raise ValidationError("CSS code is required", code="VALIDATION_EMPTY_CSS")
    if len(css_code) > max_length:
        raise ValidationError(
            f"CSS code exceeds the {max_length} character limit",
            code="VALIDATION_CSS_TOO_LARGE",
            context={"length": len(css_code)},
        )
    opening, closing = css_code.count("{"), css_code.count("}")
    if opening != closing:
        raise ValidationError(
            f"Mismatched braces: {opening} '{{' vs {closing} '}}'",
            code="VALIDATION_UNBALANCED_BRACES",
            context={"opening": opening, "closing": closing},
        )
    return css_code


def validate_figma_url(url: str) -> bool:
    if not url:
        return False
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or parsed.hostname not in _FIGMA_HOSTS:
        return False
    return "/design/" in parsed.path or "/file/" in parsed.path


def extract_file_id(url: str) -> str | None:
    """``https://www.figma.com/file/AbC123/Name`` -> ``"AbC123"``."""
    match = _FILE_ID_RE.search(urlparse(url).path)
    return match.group(1) if match else None


def validate_figma_token(token: str) -> bool:
    return token.startswith("figd_") and len(token) > 20


def sanitize_component_name(name: str) -> str:
    cleaned = re.sub(r"[^a-zA-Z0-9]", "", name)
    cleaned = re.sub(r"^[0-9]", "Component", cleaned)
    return cleaned[:1].upper() + cleaned[1:] or "FigmaComponent"
