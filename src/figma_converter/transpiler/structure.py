"""Guess an HTML element tree from the selectors in a stylesheet."""

from __future__ import annotations

import re

from figma_converter.transpiler.model import ElementGuess

__all__ = [
    "clean_selector",
    "DEFAULT_CLASS_NAME",
    "extract_class_name",
    "infer_element_type",
    "infer_structure",
    "render_structure",
]

DEFAULT_CLASS_NAME = "figma-element"

# Everything up to an opening brace counts as a selector.
_SELECTOR_RE = re.compile(r"[^{]+(?=\s*\{)")
_CLASS_RE = re.compile(r"\.([a-zA-Z0-9\-_]+)")
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_STATEMENT_END_RE = re.compile(r"[;}]")

# Checked in order; the first substring hit decides the tag.
_ELEMENT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("button", "btn"), "button"),
    (("header",), "header"),
    (("footer",), "footer"),
    (("nav",), "nav"),
    (("main",), "main"),
    (("section",), "section"),
    (("article",), "article"),
    (("aside",), "aside"),
    (("h1", "title"), "h1"),
    (("h2",), "h2"),
    (("h3",), "h3"),
    (("p", "text"), "p"),
    (("span",), "span"),
    (("img", "image"), "img"),
    (("a", "link"), "a"),
    (("ul", "list"), "ul"),
    (("li", "item"), "li"),
)


def clean_selector(raw: str) -> str:
    """Reduce the text captured before a brace to the selector itself.

    The scan captures everything since the previous brace, so comments and
    any declarations or closing braces ahead of the selector are dropped.
    """
    without_comments = _COMMENT_RE.sub("", raw)
    return _STATEMENT_END_RE.split(without_comments)[-1].strip()


def infer_structure(text: str) -> tuple[ElementGuess, ...]:
    """Return one guess per selector, shallowest first.

    Depth is the number of whitespace-separated selector tokens. Ties keep
    scan order.
    """
    guesses: list[ElementGuess] = []
    for match in _SELECTOR_RE.finditer(text):
        selector = clean_selector(match.group(0))
        if not selector or selector.startswith("@"):
            continue
        tokens = tuple(selector.split())
        guesses.append(ElementGuess(selector=selector, depth=len(tokens), elements=tokens))
    return tuple(sorted(guesses, key=lambda g: g.depth))


def infer_element_type(selector: str) -> str:
    for needles, tag in _ELEMENT_RULES:
        if any(needle in selector for needle in needles):
            return tag
    return "div"


def extract_class_name(selector: str) -> str:
    match = _CLASS_RE.search(selector)
    return match.group(1) if match else DEFAULT_CLASS_NAME


def render_structure(guesses: tuple[ElementGuess, ...]) -> str:
    """Render one element per guess, annotated with its source selector."""
    elements = []
    for guess in guesses:
        tag = infer_element_type(guess.selector)
        class_name = extract_class_name(guess.selector)
        elements.append(
            f'<{tag} class="{class_name}">\n'
            f"      <!-- {guess.selector} -->\n"
            f"    </{tag}>"
        )
    return "\n        ".join(elements)
