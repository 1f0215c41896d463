"""Figma CSS to React/CSS/HTML/Tailwind transpiler."""

from figma_converter.transpiler.cache import (
    CachingParser,
    InMemoryParseCache,
    NullParseCache,
    ParseCache,
)
from figma_converter.transpiler.generator import generate
from figma_converter.transpiler.model import (
    Animation,
    CustomProperty,
    Declaration,
    ElementGuess,
    GeneratedComponentCode,
    LayoutType,
    MediaBlock,
    ParsedStyleSheet,
    StyleRule,
    TailwindResult,
)
from figma_converter.transpiler.naming import DEFAULT_COMPONENT_NAME
from figma_converter.transpiler.parser import parse
from figma_converter.transpiler.tailwind import translate_rules

__all__ = [
    "parse",
    "generate",
    "translate_rules",
    "DEFAULT_COMPONENT_NAME",
    # cache
    "ParseCache",
    "InMemoryParseCache",
    "NullParseCache",
    "CachingParser",
    # model
    "Animation",
    "CustomProperty",
    "Declaration",
    "ElementGuess",
    "GeneratedComponentCode",
    "LayoutType",
    "MediaBlock",
    "ParsedStyleSheet",
    "StyleRule",
    "TailwindResult",
]
