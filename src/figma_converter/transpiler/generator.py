"""Turn a ParsedStyleSheet into JSX, CSS, HTML and Tailwind output."""

from __future__ import annotations

from figma_converter.transpiler.emitters import emit_css, emit_html, emit_jsx
from figma_converter.transpiler.model import GeneratedComponentCode, ParsedStyleSheet
from figma_converter.transpiler.tailwind import translate_rules

__all__ = ["generate"]


def generate(parsed: ParsedStyleSheet) -> GeneratedComponentCode:
    """Render every artifact. Same input, byte-identical output."""
    tailwind = translate_rules(parsed.rules)
    css = emit_css(parsed)
    return GeneratedComponentCode(
        jsx=emit_jsx(parsed, tailwind.main_classes),
        css=css,
        html=emit_html(parsed, css),
        tailwind_classes=tailwind.main_classes,
        custom_styles=tailwind.custom_styles,
    )
