"""Optional memoization of ``parse``.

Parsing is pure, so a cache only saves time. It is injected rather than
held in module state so callers and tests can swap or disable it.
"""

from __future__ import annotations

import hashlib
from typing import Callable, Protocol

from figma_converter.transpiler.model import ParsedStyleSheet
from figma_converter.transpiler.parser import parse

__all__ = ["CachingParser", "InMemoryParseCache", "NullParseCache", "ParseCache", "cache_key"]


class ParseCache(Protocol):
    """Storage for parse results keyed by ``cache_key``."""

    def get(self, key: str) -> ParsedStyleSheet | None: ...

    def set(self, key: str, value: ParsedStyleSheet) -> None: ...

    def clear(self) -> None: ...


def cache_key(css_text: str) -> str:
    """Key on length plus a digest of the full text, so distinct inputs never collide."""
    digest = hashlib.sha256(css_text.encode("utf-8")).hexdigest()
    return f"css_{len(css_text)}_{digest}"


class InMemoryParseCache:
    """Unbounded dict-backed cache. ``max_entries`` evicts oldest first."""

    def __init__(self, max_entries: int | None = None) -> None:
        self._entries: dict[str, ParsedStyleSheet] = {}
        self._max_entries = max_entries

    def get(self, key: str) -> ParsedStyleSheet | None:
        return self._entries.get(key)

    def set(self, key: str, value: ParsedStyleSheet) -> None:
        self._entries[key] = value
        if self._max_entries is not None:
            while len(self._entries) > self._max_entries:
                del self._entries[next(iter(self._entries))]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class NullParseCache:
    """Never stores anything."""

    def get(self, key: str) -> ParsedStyleSheet | None:
        return None

    def set(self, key: str, value: ParsedStyleSheet) -> None:
        pass

    def clear(self) -> None:
        pass


class CachingParser:
    """Wrap a parse function with a ParseCache."""

    def __init__(
        self,
        cache: ParseCache | None = None,
        parse_fn: Callable[[str], ParsedStyleSheet] = parse,
    ) -> None:
        self.cache: ParseCache = cache if cache is not None else InMemoryParseCache()
        self._parse_fn = parse_fn
        self.hits = 0
        self.misses = 0

    def parse(self, css_text: str) -> ParsedStyleSheet:
        key = cache_key(css_text)
        cached = self.cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        result = self._parse_fn(css_text)
        self.cache.set(key, result)
        return result
