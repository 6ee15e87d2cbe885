from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .interfaces import StateBackend
from .json_store import atomic_write_json, read_json
from .models import DatabaseDoc
from .settings import DEFAULT_JSON_INDENT

logger = logging.getLogger(__name__)


class DiskJsonStateStore(StateBackend):
    """
    Stores the whole database state as a single JSON document at a fixed path.

    - A missing file is created holding `{}` and read as empty state.
    - Any other I/O or decode error propagates.
    - Every write replaces the file entirely.
    """

    def __init__(self, path: Path, *, indent: int = DEFAULT_JSON_INDENT):
        self._path = path
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def read_all(self) -> dict[str, Any]:
        try:
            raw = read_json(self._path)
        except FileNotFoundError:
            logger.info("database file %s not found; initializing empty state", self._path)
            empty: dict[str, Any] = {}
            self.write_all(empty)
            return empty
        logger.debug("read database state from %s", self._path)
        return DatabaseDoc.from_disk_doc(raw).to_disk_doc()

    def write_all(self, state: dict[str, Any]) -> None:
        atomic_write_json(self._path, state, indent=self._indent)
        logger.debug("wrote database state to %s", self._path)
