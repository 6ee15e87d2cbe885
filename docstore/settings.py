from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_CACHE_TTL_SECONDS = 5.0
DEFAULT_JSON_INDENT = 2


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Where relative database paths are resolved (None -> project root)
    base_dir: Path | None

    # Cache freshness window
    cache_ttl_seconds: float

    # On-disk formatting
    json_indent: int


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    raw_base = os.getenv("DOCSTORE_BASE_DIR", "").strip()
    base_dir = Path(raw_base).expanduser() if raw_base else None

    cache_ttl_seconds = _env_float("DOCSTORE_CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS)
    if cache_ttl_seconds < 0:
        raise ValueError("DOCSTORE_CACHE_TTL_SECONDS must be >= 0")

    json_indent = _env_int("DOCSTORE_JSON_INDENT", DEFAULT_JSON_INDENT)

    return Settings(
        base_dir=base_dir,
        cache_ttl_seconds=cache_ttl_seconds,
        json_indent=json_indent,
    )
