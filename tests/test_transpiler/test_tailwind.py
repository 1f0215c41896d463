"""Tests for the CSS -> Tailwind translation."""

import pytest

from figma_converter.transpiler.model import Declaration, StyleRule
from figma_converter.transpiler.tailwind import translate_declaration, translate_rules


def _rule(*pairs: tuple[str, str], selector: str = ".x") -> StyleRule:
    return StyleRule(
        selector=selector,
        declarations=tuple(Declaration(p, v) for p, v in pairs),
    )


def _classes(*pairs: tuple[str, str]) -> str:
    return translate_rules([_rule(*pairs)]).main_classes


# ---------------------------------------------------------------------------
# Exact table matches
# ---------------------------------------------------------------------------


class TestExactMatches:
    @pytest.mark.parametrize(
        "prop,value,expected",
        [
            ("display", "flex", "flex"),
            ("justify-content", "space-between", "justify-between"),
            ("flex-direction", "column", "flex-col"),
            ("align-items", "center", "items-center"),
            ("font-weight", "600", "font-semibold"),
            ("position", "absolute", "absolute"),
            ("overflow", "hidden", "overflow-hidden"),
            ("border-radius", "50%", "rounded-full"),
            ("isolation", "isolate", "isolate"),
        ],
    )
    def test_mapped(self, prop, value, expected):
        assert _classes((prop, value)) == expected

    def test_box_sizing_emits_nothing(self):
        assert translate_rules([_rule(("box-sizing", "border-box"))]).main_classes == ""

    def test_repeated_declarations_not_deduplicated(self):
        result = translate_rules([_rule(("display", "flex")), _rule(("display", "flex"))])
        assert result.main_classes == "flex flex"


# ---------------------------------------------------------------------------
# Property heuristics
# ---------------------------------------------------------------------------


class TestBorderRadius:
    @pytest.mark.parametrize("value", ["100px", "90px"])
    def test_pill(self, value):
        assert _classes(("border-radius", value)) == "rounded-full"

    def test_other(self):
        assert _classes(("border-radius", "8px")) == "rounded-lg"


class TestPadding:
    def test_single_value(self):
        assert _classes(("padding", "12px")) == "p-4"

    def test_two_values(self):
        assert _classes(("padding", "8px 24px")) == "py-3 px-6"

    def test_three_values_unhandled(self):
        assert _classes(("padding", "1px 2px 3px")) == ""

    def test_four_values_unhandled(self):
        result = translate_rules([_rule(("padding", "1px 2px 3px 4px"))])
        assert result.main_classes == ""
        assert result.custom_styles == ()


class TestGap:
    def test_known_steps(self):
        assert _classes(("gap", "10px")) == "gap-2.5"
        assert _classes(("gap", "8px")) == "gap-2"

    def test_unknown_step(self):
        assert _classes(("gap", "12px")) == ""


class TestCustomStyles:
    def test_hex_background_becomes_background_color(self):
        result = translate_rules([_rule(("background", "#F1F1F1"))])
        assert result.custom_styles == ("background-color: #F1F1F1",)

    def test_other_background_kept(self):
        result = translate_rules([_rule(("background", "rgba(0, 0, 0, 0.5)"))])
        assert result.custom_styles == ("background: rgba(0, 0, 0, 0.5)",)

    def test_literal_properties_in_order(self):
        result = translate_rules([
            _rule(("width", "120px"), ("height", "40px")),
            _rule(("box-shadow", "0px 4px 4px rgba(0, 0, 0, 0.25)")),
            _rule(("backdrop-filter", "blur(4px)"), ("width", "120px")),
        ])
        assert result.custom_styles == (
            "width: 120px",
            "height: 40px",
            "box-shadow: 0px 4px 4px rgba(0, 0, 0, 0.25)",
            "backdrop-filter: blur(4px)",
            "width: 120px",
        )

    def test_unmapped_property_dropped(self):
        result = translate_rules([_rule(("color", "red"), ("font-family", "Inter"))])
        assert result.main_classes == ""
        assert result.custom_styles == ()


class TestTranslateDeclaration:
    def test_returns_class_or_style(self):
        assert translate_declaration(Declaration("display", "grid")) == ("grid", "")
        assert translate_declaration(Declaration("height", "1px")) == ("", "height: 1px")
        assert translate_declaration(Declaration("color", "red")) == ("", "")


class TestTranslateRules:
    def test_classes_space_separated_and_trimmed(self):
        result = translate_rules([_rule(("display", "flex"), ("padding", "8px"), ("gap", "8px"))])
        assert result.main_classes == "flex p-4 gap-2"
        assert result.class_list == ("flex", "p-4", "gap-2")

    def test_no_rules(self):
        result = translate_rules([])
        assert result.main_classes == ""
        assert result.custom_styles == ()
