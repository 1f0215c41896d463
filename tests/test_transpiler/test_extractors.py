"""Tests for @media, @keyframes and custom property extraction."""

from figma_converter.transpiler.extractors import (
    extract_animations,
    extract_custom_properties,
    extract_media_blocks,
)
from figma_converter.transpiler.model import Animation, CustomProperty, MediaBlock


class TestMediaBlocks:
    def test_captured_verbatim(self):
        media = "@media (max-width: 768px) { .a { color: blue; } }"
        text = f".a {{ color: red; }}\n{media}"
        assert extract_media_blocks(text) == (MediaBlock(text=media),)

    def test_multiple_blocks_in_order(self):
        first = "@media (max-width: 768px) { .a { color: blue; } }"
        second = "@media (min-width: 1024px) { .a { color: green; } .b { margin: 0; } }"
        blocks = extract_media_blocks(f"{first}\n{second}")
        assert [b.text for b in blocks] == [first, second]

    def test_unbalanced_block_omitted(self):
        assert extract_media_blocks("@media (max-width: 10px) { .a { color: red; }") == ()

    def test_none(self):
        assert extract_media_blocks(".a { color: red; }") == ()


class TestAnimations:
    def test_keyframes_name_and_definition(self):
        text = "@keyframes spin { from{transform:rotate(0)} to{transform:rotate(360deg)} }"
        assert extract_animations(text) == (Animation(name="spin", definition=text),)

    def test_keyframes_among_rules(self):
        keyframes = "@keyframes fade-in {\n  0% { opacity: 0; }\n  100% { opacity: 1; }\n}"
        text = f".a {{ color: red; }}\n{keyframes}\n.b {{ color: blue; }}"
        animations = extract_animations(text)
        assert len(animations) == 1
        assert animations[0].name == "fade-in"
        assert animations[0].definition == keyframes

    def test_none(self):
        assert extract_animations("/* Button */ color: red;") == ()


class TestCustomProperties:
    def test_root_and_nested(self):
        text = ":root { --primary-color: #ff0000; --gap:  8px ; }\n.a { --inner: 1px; }"
        assert extract_custom_properties(text) == (
            CustomProperty(name="primary-color", value="#ff0000"),
            CustomProperty(name="gap", value="8px"),
            CustomProperty(name="inner", value="1px"),
        )

    def test_requires_semicolon(self):
        assert extract_custom_properties(":root { --a: 1px }") == ()

    def test_in_figma_block(self):
        text = "/* Tokens */\n--brand: #00A656;"
        assert extract_custom_properties(text) == (CustomProperty("brand", "#00A656"),)
