from __future__ import annotations

from pathlib import Path


DEFAULT_DB_FILENAME = "myDatabase.json"


def project_root() -> Path:
    # docstore/paths.py -> docstore -> project root
    return Path(__file__).resolve().parents[1]


def resolve_db_path(file_path: str | Path, base_dir: Path | None = None) -> Path:
    """Join a relative database path onto the base location; absolute paths pass through."""
    base = project_root() if base_dir is None else base_dir
    return (base / Path(file_path)).resolve()
