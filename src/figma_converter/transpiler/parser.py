"""Build a ParsedStyleSheet from Figma-exported CSS.

Malformed input never raises: anything a stage cannot recognise is left
out, and the worst case is an empty sheet with the default name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from figma_converter.transpiler.declarations import (
    parse_block_declarations,
    parse_rule_declarations,
)
from figma_converter.transpiler.extractors import (
    extract_animations,
    extract_custom_properties,
    extract_media_blocks,
)
from figma_converter.transpiler.model import LayoutType, ParsedStyleSheet, StyleRule
from figma_converter.transpiler.naming import derive_component_name
from figma_converter.transpiler.splitter import split_comment_blocks
from figma_converter.transpiler.structure import clean_selector, infer_structure

__all__ = [
    "class_name_for_label",
    "detect_layout_type",
    "extract_design_tokens",
    "parse",
    "parse_comment_rules",
    "parse_selector_rules",
]

logger = logging.getLogger(__name__)

_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{]+)     # everything before the opening brace
    \{
    (?P<body>[^}]+)         # declarations
    \}
    """,
    re.VERBOSE,
)
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")

# Properties collected as design tokens, with the key prefix each gets.
_TOKEN_PREFIXES = {
    "color": "color",
    "background": "bg",
    "background-color": "bg",
    "border-radius": "radius",
    "font-size": "text",
    "font-weight": "weight",
}
_HEX_ONLY_TOKENS = frozenset({"color", "background", "background-color"})


def class_name_for_label(label: str) -> str:
    """``"Button Label"`` -> ``"button-label"``."""
    return _NON_ALNUM_RE.sub("-", label).strip("-").lower()


def parse_comment_rules(text: str) -> tuple[StyleRule, ...]:
    """Rules synthesized from ``/* Label */`` blocks that carry declarations."""
    rules: list[StyleRule] = []
    for label, body in split_comment_blocks(text):
        declarations = parse_block_declarations(body)
        if declarations:
            rules.append(
                StyleRule(
                    selector=f".{class_name_for_label(label)}",
                    declarations=declarations,
                    figma_component_name=label,
                )
            )
    return tuple(rules)


def parse_selector_rules(text: str) -> tuple[StyleRule, ...]:
    """Conventional ``selector { ... }`` rules with class, id or pseudo-element selectors."""
    rules: list[StyleRule] = []
    for match in _RULE_RE.finditer(text):
        selector = clean_selector(match.group("selector"))
        if not selector or selector.startswith("@"):
            continue
        if not any(marker in selector for marker in (".", "#", "::")):
            continue
        rules.append(
            StyleRule(
                selector=selector,
                declarations=parse_rule_declarations(match.group("body").strip()),
            )
        )
    return tuple(rules)


def detect_layout_type(rules: Iterable[StyleRule]) -> LayoutType:
    """The first flex, grid or absolute declaration decides; static otherwise."""
    for rule in rules:
        for decl in rule.declarations:
            if decl.property == "display" and decl.value == "flex":
                return LayoutType.FLEXBOX
            if decl.property == "display" and decl.value == "grid":
                return LayoutType.GRID
            if decl.property == "position" and decl.value == "absolute":
                return LayoutType.ABSOLUTE
    return LayoutType.STATIC


def extract_design_tokens(rules: Iterable[StyleRule]) -> dict[str, str]:
    """Collect colour, radius and type values keyed by rule and declaration index.

    Equal values under different keys are all kept.
    """
    tokens: dict[str, str] = {}
    for rule_index, rule in enumerate(rules):
        for decl_index, decl in enumerate(rule.declarations):
            prefix = _TOKEN_PREFIXES.get(decl.property)
            if prefix is None:
                continue
            if decl.property in _HEX_ONLY_TOKENS and not decl.value.startswith("#"):
                continue
            tokens[f"{prefix}-{rule_index}-{decl_index}"] = decl.value
    return tokens


def parse(css_text: str) -> ParsedStyleSheet:
    """Parse Figma-exported CSS into a ParsedStyleSheet."""
    text = css_text or ""
    rules = parse_comment_rules(text) + parse_selector_rules(text)

    parsed = ParsedStyleSheet(
        component_name=derive_component_name(text),
        rules=rules,
        responsive_rules=extract_media_blocks(text),
        animations=extract_animations(text),
        custom_properties=extract_custom_properties(text),
        layout_type=detect_layout_type(rules),
        design_tokens=extract_design_tokens(rules),
        inferred_structure=infer_structure(text),
    )
    logger.debug(
        "Parsed %s: %d rules, %d media blocks, %d animations, %d variables",
        parsed.component_name,
        len(parsed.rules),
        len(parsed.responsive_rules),
        len(parsed.animations),
        len(parsed.custom_properties),
    )
    return parsed
