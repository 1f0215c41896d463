"""Map CSS declarations onto Tailwind utility classes.

Exact ``property: value`` matches come from ``TAILWIND_MAP``. A few Figma
properties get a heuristic instead, and sizing/visual properties that
Tailwind's default scale cannot express are kept as literal styles.
Anything else is dropped. Classes are not deduplicated.
"""

from __future__ import annotations

from collections.abc import Iterable

from figma_converter.transpiler.model import Declaration, StyleRule, TailwindResult

__all__ = ["TAILWIND_MAP", "translate_declaration", "translate_rules"]

TAILWIND_MAP: dict[str, str] = {
    "display: flex": "flex",
    "display: block": "block",
    "display: inline": "inline",
    "display: inline-block": "inline-block",
    "display: grid": "grid",
    "flex-direction: column": "flex-col",
    "flex-direction: row": "flex-row",
    "justify-content: center": "justify-center",
    "justify-content: space-between": "justify-between",
    "justify-content: flex-start": "justify-start",
    "justify-content: flex-end": "justify-end",
    "align-items: center": "items-center",
    "align-items: flex-start": "items-start",
    "align-items: flex-end": "items-end",
    "text-align: center": "text-center",
    "text-align: left": "text-left",
    "text-align: right": "text-right",
    "font-weight: bold": "font-bold",
    "font-weight: 600": "font-semibold",
    "font-weight: 500": "font-medium",
    "font-weight: 400": "font-normal",
    "font-weight: 300": "font-light",
    "position: relative": "relative",
    "position: absolute": "absolute",
    "position: fixed": "fixed",
    "position: sticky": "sticky",
    "overflow: hidden": "overflow-hidden",
    "overflow: auto": "overflow-auto",
    "border-radius: 50%": "rounded-full",
    "cursor: pointer": "cursor-pointer",
    "box-sizing: border-box": "",  # Tailwind preflight already does this
    "isolation: isolate": "isolate",
}

_PILL_RADII = ("100px", "90px")
_GAP_SCALE = {"10px": "gap-2.5", "8px": "gap-2"}
_LITERAL_PROPERTIES = frozenset({"width", "height", "box-shadow", "backdrop-filter"})


def _radius_class(value: str) -> str:
    if any(radius in value for radius in _PILL_RADII):
        return "rounded-full"
    return "rounded-lg"


def _padding_class(value: str) -> str:
    parts = value.split()
    if len(parts) == 1:
        return "p-4"
    if len(parts) == 2:
        return "py-3 px-6"
    # Three- and four-value padding has no class.
    return ""


def translate_declaration(decl: Declaration) -> tuple[str, str]:
    """Return ``(classes, custom_style)`` for one declaration.

    Either element may be empty; at most one is non-empty.
    """
    mapped = TAILWIND_MAP.get(f"{decl.property}: {decl.value}")
    if mapped:
        return mapped, ""

    prop, value = decl.property, decl.value
    if prop == "border-radius":
        return _radius_class(value), ""
    if prop == "padding":
        return _padding_class(value), ""
    if prop == "gap":
        return _GAP_SCALE.get(value, ""), ""
    if prop == "background":
        if value.startswith("#"):
            return "", f"background-color: {value}"
        return "", f"background: {value}"
    if prop in _LITERAL_PROPERTIES:
        return "", f"{prop}: {value}"
    return "", ""


def translate_rules(rules: Iterable[StyleRule]) -> TailwindResult:
    """Translate every declaration of every rule, in order."""
    main_classes = ""
    custom_styles: list[str] = []
    for rule in rules:
        for decl in rule.declarations:
            classes, custom = translate_declaration(decl)
            if classes:
                main_classes += classes + " "
            if custom:
                custom_styles.append(custom)
    return TailwindResult(main_classes=main_classes.strip(), custom_styles=tuple(custom_styles))
