"""Intermediate representation for parsed Figma CSS and generated output."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class LayoutType(StrEnum):
    FLEXBOX = "flexbox"
    GRID = "grid"
    ABSOLUTE = "absolute"
    STATIC = "static"


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, kept exactly as it appeared."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with its declarations in source order.

    ``figma_component_name`` is only set for blocks recovered from Figma's
    comment convention; rules with a real selector leave it as ``None``.
    Duplicate properties are retained.
    """

    selector: str
    declarations: tuple[Declaration, ...]
    figma_component_name: str | None = None

    def values_of(self, prop: str) -> tuple[str, ...]:
        return tuple(d.value for d in self.declarations if d.property == prop)


@dataclass(frozen=True)
class MediaBlock:
    """An ``@media`` span captured verbatim; not parsed further."""

    text: str


@dataclass(frozen=True)
class Animation:
    name: str
    definition: str


@dataclass(frozen=True)
class CustomProperty:
    """A ``--name: value`` declaration. ``name`` excludes the leading dashes."""

    name: str
    value: str


@dataclass(frozen=True)
class ElementGuess:
    """A guess at one HTML element, derived from a selector."""

    selector: str
    depth: int
    elements: tuple[str, ...]


@dataclass(frozen=True)
class ParsedStyleSheet:
    """Everything the emitters need, built once per input text."""

    component_name: str
    rules: tuple[StyleRule, ...] = ()
    responsive_rules: tuple[MediaBlock, ...] = ()
    animations: tuple[Animation, ...] = ()
    custom_properties: tuple[CustomProperty, ...] = ()
    layout_type: LayoutType = LayoutType.STATIC
    design_tokens: Mapping[str, str] = field(default_factory=dict, hash=False, compare=True)
    inferred_structure: tuple[ElementGuess, ...] = ()

    def __post_init__(self) -> None:
        # Read-only view over a private copy; cached sheets are shared between callers.
        object.__setattr__(self, "design_tokens", MappingProxyType(dict(self.design_tokens)))

    @property
    def declaration_count(self) -> int:
        return sum(len(rule.declarations) for rule in self.rules)


@dataclass(frozen=True)
class TailwindResult:
    """Utility classes plus the declarations that had no Tailwind mapping."""

    main_classes: str
    custom_styles: tuple[str, ...] = ()

    @property
    def class_list(self) -> tuple[str, ...]:
        return tuple(self.main_classes.split())


@dataclass(frozen=True)
class GeneratedComponentCode:
    jsx: str
    css: str
    html: str
    tailwind_classes: str
    custom_styles: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "jsx": self.jsx,
            "css": self.css,
            "html": self.html,
            "tailwindClasses": self.tailwind_classes,
            "customStyles": list(self.custom_styles),
        }
