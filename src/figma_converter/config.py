from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace

_ENV_PREFIX = "FIGMA_CONVERTER_"


@dataclass(frozen=True)
class ConverterConfig:
    db_path: str = "figma_converter.db"
    host: str = "127.0.0.1"
    port: int = 5000
    figma_api_base: str = "https://api.figma.com/v1"
    figma_timeout: float = 30.0
    max_css_length: int = 500_000
    enable_parse_cache: bool = True
    parse_cache_max_entries: int = 256
    default_user_id: int = 1

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ConverterConfig:
        """Build a config, overriding defaults with ``FIGMA_CONVERTER_*`` variables."""
        env = os.environ if environ is None else environ
        config = cls()
        overrides: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            default = getattr(config, f.name)
            if isinstance(default, bool):
                overrides[f.name] = raw.lower() in ("true", "1", "yes")
            elif isinstance(default, int):
                overrides[f.name] = int(raw)
            elif isinstance(default, float):
                overrides[f.name] = float(raw)
            else:
                overrides[f.name] = raw
        return replace(config, **overrides)
