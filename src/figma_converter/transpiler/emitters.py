"""Render a ParsedStyleSheet as JSX, CSS and standalone HTML.

The JSX inner markup comes from ``guess_jsx_inner_structure``, which looks
at Figma component names. The HTML body comes from the selector-based
guesses in ``structure``. The two heuristics are independent and can
disagree about the same input.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from figma_converter.transpiler.model import ParsedStyleSheet, StyleRule
from figma_converter.transpiler.structure import render_structure

__all__ = [
    "HTML_PLACEHOLDER",
    "JsxRoles",
    "detect_jsx_roles",
    "emit_css",
    "emit_html",
    "emit_jsx",
    "guess_jsx_inner_structure",
]

HTML_PLACEHOLDER = '<div class="figma-content">Figma component content</div>'

_CHECK_ICON = """<div className="check-icon">
          <svg width="16" height="16" viewBox="0 0 16 16" fill="none">
            <rect width="16" height="16" rx="2" fill="#00A656"/>
            <path d="M6.5 9.5L4.5 7.5L3.5 8.5L6.5 11.5L12.5 5.5L11.5 4.5L6.5 9.5Z" fill="white"/>
          </svg>
        </div>"""


@dataclass(frozen=True)
class JsxRoles:
    """Which Figma component roles appear among the comment-derived rules."""

    button: bool = False
    frame: bool = False
    text: bool = False
    icon: bool = False


def detect_jsx_roles(rules: Iterable[StyleRule]) -> JsxRoles:
    names = [r.figma_component_name.lower() for r in rules if r.figma_component_name]
    return JsxRoles(
        button=any("button" in n for n in names),
        frame=any("frame" in n for n in names),
        text=any("text" in n or "brief" in n for n in names),
        icon=any("check" in n or "icon" in n for n in names),
    )


def guess_jsx_inner_structure(rules: Iterable[StyleRule]) -> str:
    """Build the markup placed inside the component's root ``<div>``."""
    roles = detect_jsx_roles(rules)
    if not (roles.button or roles.frame):
        return """<div className="figma-content">
        {children}
      </div>"""

    parts = ['<div className="frame-content">']
    if roles.text:
        parts.append('<span className="button-text">{text}</span>')
    if roles.icon:
        parts.append(_CHECK_ICON)
    parts.append("{children}")
    return "\n        ".join(parts) + "\n      </div>"


def emit_jsx(parsed: ParsedStyleSheet, tailwind_classes: str) -> str:
    name = parsed.component_name
    inner = guess_jsx_inner_structure(parsed.rules)
    return f"""import React from "react";

interface {name}Props {{
  className?: string;
  children?: React.ReactNode;
  text?: string;
  variant?: "default" | "primary" | "secondary";
  size?: "sm" | "md" | "lg";
}}

const {name}: React.FC<{name}Props> = ({{
  className,
  children,
  text = "Brief generated",
  variant = "default",
  size = "md",
  ...props
}}) => {{
  return (
    <div
      className={{`{tailwind_classes} ${{className || ""}}`}}
      {{...props}}
    >
      {inner}
    </div>
  );
}};

export default {name};
"""


def emit_css(parsed: ParsedStyleSheet) -> str:
    """Reassemble the stylesheet: variables, rules, media blocks, keyframes."""
    out = [f"/* {parsed.component_name} Component */\n\n"]

    if parsed.custom_properties:
        out.append(":root {\n")
        for prop in parsed.custom_properties:
            out.append(f"  --{prop.name}: {prop.value};\n")
        out.append("}\n\n")

    for rule in parsed.rules:
        if not rule.selector or not rule.declarations:
            continue
        out.append(f"{rule.selector} {{\n")
        for decl in rule.declarations:
            out.append(f"  {decl.property}: {decl.value};\n")
        out.append("}\n\n")

    for block in parsed.responsive_rules:
        out.append(f"{block.text}\n\n")

    for animation in parsed.animations:
        out.append(f"{animation.definition}\n\n")

    return "".join(out)


def emit_html(parsed: ParsedStyleSheet, css: str) -> str:
    name = parsed.component_name
    body = render_structure(parsed.inferred_structure) or HTML_PLACEHOLDER
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
{css}
    </style>
</head>
<body>
    <div class="{name.lower()}">
        {body}
    </div>
</body>
</html>
"""
