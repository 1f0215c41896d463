"""Recover component blocks from Figma's comment-as-selector CSS export.

Figma exports layers without class names, so each block looks like::

    /* Primary Button */
    display: flex;
    padding: 8px 24px;

Splitting on the comment markers gives alternating labels and bodies.
"""

from __future__ import annotations

import re

__all__ = ["NOISE_LABELS", "is_noise_label", "split_comment_blocks"]

# Split on /* label */, capturing the label so re.split keeps it.
_COMMENT_SPLIT_RE = re.compile(r"/\*\s*([^*]+)\s*\*/")

# Boilerplate comments Figma adds to every auto-layout child.
NOISE_LABELS: tuple[str, ...] = ("Auto layout", "Inside auto layout")


def is_noise_label(label: str) -> bool:
    """Return True if *label* contains one of Figma's boilerplate phrases."""
    return any(noise in label for noise in NOISE_LABELS)


def split_comment_blocks(text: str) -> tuple[tuple[str, str], ...]:
    """Split *text* into ``(label, declaration_text)`` pairs.

    Each label is paired with everything up to the next comment. Pairs are
    dropped when the label is empty or noise, or when no text follows it.
    """
    parts = _COMMENT_SPLIT_RE.split(text)
    blocks: list[tuple[str, str]] = []
    # parts = [preamble, label1, body1, label2, body2, ...]
    for i in range(1, len(parts), 2):
        label = parts[i].strip()
        body = parts[i + 1].strip() if i + 1 < len(parts) else ""
        if not label or not body or is_noise_label(label):
            continue
        blocks.append((label, body))
    return tuple(blocks)
