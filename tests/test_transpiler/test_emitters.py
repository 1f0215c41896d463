"""Tests for the JSX, CSS and HTML emitters."""

from figma_converter.transpiler import parse
from figma_converter.transpiler.emitters import (
    HTML_PLACEHOLDER,
    JsxRoles,
    detect_jsx_roles,
    emit_css,
    emit_html,
    emit_jsx,
    guess_jsx_inner_structure,
)
from figma_converter.transpiler.model import (
    Animation,
    CustomProperty,
    Declaration,
    MediaBlock,
    ParsedStyleSheet,
    StyleRule,
)


def _figma_rule(name: str) -> StyleRule:
    return StyleRule(
        selector=f".{name.lower()}",
        declarations=(Declaration("color", "red"),),
        figma_component_name=name,
    )


# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------


class TestEmitCss:
    def test_full_layout(self):
        parsed = ParsedStyleSheet(
            component_name="Card",
            rules=(
                StyleRule(".card", (Declaration("display", "flex"), Declaration("gap", "8px"))),
                StyleRule(".card", (Declaration("color", "red"),)),
            ),
            responsive_rules=(MediaBlock("@media (max-width: 1px) { .card { gap: 0; } }"),),
            animations=(Animation("spin", "@keyframes spin { }"),),
            custom_properties=(CustomProperty("brand", "#fff"),),
        )
        assert emit_css(parsed) == (
            "/* Card Component */\n\n"
            ":root {\n  --brand: #fff;\n}\n\n"
            ".card {\n  display: flex;\n  gap: 8px;\n}\n\n"
            ".card {\n  color: red;\n}\n\n"
            "@media (max-width: 1px) { .card { gap: 0; } }\n\n"
            "@keyframes spin { }\n\n"
        )

    def test_no_root_block_without_custom_properties(self):
        parsed = ParsedStyleSheet(
            component_name="Card",
            rules=(StyleRule(".card", (Declaration("color", "red"),)),),
        )
        assert ":root" not in emit_css(parsed)

    def test_rules_without_declarations_skipped(self):
        parsed = ParsedStyleSheet(component_name="Card", rules=(StyleRule(".empty", ()),))
        assert emit_css(parsed) == "/* Card Component */\n\n"


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


class TestEmitHtml:
    def test_placeholder_without_structure(self):
        parsed = ParsedStyleSheet(component_name="Card")
        html = emit_html(parsed, "")
        assert HTML_PLACEHOLDER in html
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Card</title>" in html
        assert '<div class="card">' in html

    def test_embeds_css_and_structure(self):
        parsed = parse(".primary-button { color: red; }")
        css = emit_css(parsed)
        html = emit_html(parsed, css)
        assert css in html
        assert '<button class="primary-button">' in html
        assert "<!-- .primary-button -->" in html
        assert HTML_PLACEHOLDER not in html


# ---------------------------------------------------------------------------
# JSX
# ---------------------------------------------------------------------------


class TestDetectJsxRoles:
    def test_roles(self):
        roles = detect_jsx_roles([
            _figma_rule("Primary Button"),
            _figma_rule("Brief generated"),
            _figma_rule("check_circle"),
        ])
        assert roles == JsxRoles(button=True, frame=False, text=True, icon=True)

    def test_real_selector_rules_ignored(self):
        rule = StyleRule(".button", (Declaration("color", "red"),))
        assert detect_jsx_roles([rule]) == JsxRoles()


class TestInnerStructure:
    def test_generic_passthrough(self):
        inner = guess_jsx_inner_structure([_figma_rule("Avatar")])
        assert 'className="figma-content"' in inner
        assert "{children}" in inner

    def test_frame_with_text_and_icon(self):
        inner = guess_jsx_inner_structure([
            _figma_rule("Frame 12"),
            _figma_rule("Label text"),
            _figma_rule("Icon"),
        ])
        assert 'className="frame-content"' in inner
        assert '<span className="button-text">{text}</span>' in inner
        assert "<svg" in inner
        assert inner.count("{children}") == 1

    def test_button_without_text_or_icon(self):
        inner = guess_jsx_inner_structure([_figma_rule("Button")])
        assert 'className="frame-content"' in inner
        assert "button-text" not in inner
        assert "<svg" not in inner


class TestEmitJsx:
    def test_template(self):
        parsed = ParsedStyleSheet(component_name="Chip")
        jsx = emit_jsx(parsed, "flex p-4")
        assert jsx.startswith('import React from "react";')
        assert "interface ChipProps {" in jsx
        assert 'variant?: "default" | "primary" | "secondary";' in jsx
        assert 'size?: "sm" | "md" | "lg";' in jsx
        assert "const Chip: React.FC<ChipProps> = ({" in jsx
        assert 'className={`flex p-4 ${className || ""}`}' in jsx
        assert "export default Chip;" in jsx

    def test_children_rendered_once(self):
        jsx = emit_jsx(ParsedStyleSheet(component_name="Chip"), "")
        assert jsx.count("{children}") == 1


class TestHeuristicsAreIndependent:
    def test_jsx_and_html_can_disagree(self):
        # Figma block only: the JSX guesser sees a Frame, the selector scan sees nothing.
        parsed = parse("/* Frame */\ndisplay: flex;")
        css = emit_css(parsed)
        assert 'className="frame-content"' in emit_jsx(parsed, "flex")
        assert HTML_PLACEHOLDER in emit_html(parsed, css)
