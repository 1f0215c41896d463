"""Whole-text scans for @media blocks, @keyframes and CSS variables.

Each scan runs over the full input text independently of rule parsing.
Blocks nested more than one level deep do not match and are left out.
"""

from __future__ import annotations

import re

from figma_converter.transpiler.model import Animation, CustomProperty, MediaBlock

__all__ = ["extract_animations", "extract_custom_properties", "extract_media_blocks"]

_MEDIA_RE = re.compile(
    r"""
    @media\s*\([^)]+\)\s*       # @media (condition)
    \{
    [^{}]*(?:\{[^}]*\}[^{}]*)*  # body with at most one level of nested rules
    \}
    """,
    re.VERBOSE,
)

_KEYFRAMES_RE = re.compile(
    r"""
    @keyframes\s+(?P<name>[^{]+)\s*
    \{
    [^{}]*(?:\{[^}]*\}[^{}]*)*
    \}
    """,
    re.VERBOSE,
)

_CUSTOM_PROPERTY_RE = re.compile(r"--(?P<name>[\w-]+):\s*(?P<value>[^;]+);")


def extract_media_blocks(text: str) -> tuple[MediaBlock, ...]:
    return tuple(MediaBlock(text=m.group(0)) for m in _MEDIA_RE.finditer(text))


def extract_animations(text: str) -> tuple[Animation, ...]:
    return tuple(
        Animation(name=m.group("name").strip(), definition=m.group(0))
        for m in _KEYFRAMES_RE.finditer(text)
    )


def extract_custom_properties(text: str) -> tuple[CustomProperty, ...]:
    """Find every ``--name: value;`` in *text*, including ones inside rules."""
    return tuple(
        CustomProperty(name=m.group("name"), value=m.group("value").strip())
        for m in _CUSTOM_PROPERTY_RE.finditer(text)
    )
