"""Turn declaration text into ordered ``Declaration`` tuples."""

from __future__ import annotations

import re

from figma_converter.transpiler.model import Declaration

__all__ = ["parse_block_declarations", "parse_rule_declarations"]

_TRAILING_SEMICOLON_RE = re.compile(r";$")


def parse_rule_declarations(body: str) -> tuple[Declaration, ...]:
    """Parse the body of a ``selector { ... }`` rule.

    Segments are split on ``;`` and then on the first ``:``. Segments
    without a colon are skipped.
    """
    declarations: list[Declaration] = []
    for segment in body.split(";"):
        if not segment.strip():
            continue
        prop, sep, value = segment.partition(":")
        if not sep:
            continue
        declarations.append(Declaration(property=prop.strip(), value=value.strip()))
    return tuple(declarations)


def _finish(prop: str, value: str) -> Declaration:
    return Declaration(
        property=prop.strip(),
        value=_TRAILING_SEMICOLON_RE.sub("", value).strip(),
    )


def _is_structural(line: str) -> bool:
    """Comment lines and lines belonging to a braced rule carry no Figma declarations."""
    return line.startswith("/*") or line.endswith("*/") or "{" in line or "}" in line


def parse_block_declarations(block: str) -> tuple[Declaration, ...]:
    """Parse a comment-delimited Figma block, one declaration per line.

    A line with a colon starts a new declaration. Lines without one extend
    the current value, which is how Figma wraps long box-shadow and
    gradient values.
    """
    declarations: list[Declaration] = []
    current_prop = ""
    current_value = ""

    for raw_line in block.split("\n"):
        line = raw_line.strip()
        if not line or _is_structural(line):
            continue
        if ":" in line:
            if current_prop and current_value:
                declarations.append(_finish(current_prop, current_value))
            prop, _, value = line.partition(":")
            current_prop = prop.strip()
            current_value = value.strip()
        elif current_prop:
            current_value = f"{current_value} {line}".strip()

    if current_prop and current_value:
        declarations.append(_finish(current_prop, current_value))
    return tuple(declarations)
