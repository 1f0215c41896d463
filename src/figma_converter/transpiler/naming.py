"""Derive a component identifier from Figma CSS.

Tried in order, first hit wins:

1. the first single-line comment, unless it is boilerplate or just ``button``;
2. the first comment under 50 characters that is not boilerplate;
3. the first ``.class-name`` in the text, PascalCased;
4. ``DEFAULT_COMPONENT_NAME``.

Step 3 does not apply the noise and length filters of steps 1 and 2.
"""

from __future__ import annotations

import re

__all__ = ["DEFAULT_COMPONENT_NAME", "derive_component_name", "sanitize_identifier"]

DEFAULT_COMPONENT_NAME = "FigmaButton"

_COMMENT_RE = re.compile(r"/\*\s*([^*\n]+)\s*\*/")
_CLASS_RE = re.compile(r"\.([a-zA-Z][a-zA-Z0-9\-_]*)")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_LEADING_NON_LETTER_RE = re.compile(r"^[^a-zA-Z]+")

_FIRST_COMMENT_NOISE = ("Auto layout", "Inside auto layout", "input-light", "depth-light")
_ANY_COMMENT_NOISE = ("Auto layout", "Inside", "identical")
_MAX_COMMENT_NAME_LENGTH = 50


def sanitize_identifier(label: str) -> str:
    """Strip non-alphanumerics and leading non-letters, capitalize the rest.

    Returns an empty string when nothing usable is left.
    """
    name = _NON_ALNUM_RE.sub("", label)
    name = _LEADING_NON_LETTER_RE.sub("", name)
    return name[:1].upper() + name[1:]


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(needle in text for needle in needles)


def _from_first_comment(text: str) -> str:
    match = _COMMENT_RE.search(text)
    if match is None:
        return ""
    label = match.group(1).strip()
    if not label or label == "button" or _contains_any(label, _FIRST_COMMENT_NOISE):
        return ""
    return sanitize_identifier(label)


def _from_any_comment(text: str) -> str:
    for match in _COMMENT_RE.finditer(text):
        label = match.group(1).strip()
        if (
            label
            and len(label) < _MAX_COMMENT_NAME_LENGTH
            and not _contains_any(label, _ANY_COMMENT_NOISE)
        ):
            name = sanitize_identifier(label)
            if name:
                return name
    return ""


def _from_class_name(text: str) -> str:
    match = _CLASS_RE.search(text)
    if match is None:
        return ""
    return "".join(word[:1].upper() + word[1:] for word in match.group(1).split("-"))


def derive_component_name(text: str) -> str:
    """Return a non-empty, capitalized component name for *text*."""
    return (
        _from_first_comment(text)
        or _from_any_comment(text)
        or _from_class_name(text)
        or DEFAULT_COMPONENT_NAME
    )
