from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from .settings import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    state: dict[str, Any]
    captured_at: float


class TimedStateCache:
    """
    Single-slot cache for the last read or written database state.

    - get() serves the entry only while it is younger than the freshness window.
    - A stale entry is left in place; the next set() replaces it.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS, *, clock: Callable[[], float] = time.monotonic):
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._entry: CacheEntry | None = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def get(self) -> dict[str, Any] | None:
        entry = self._entry
        if entry is None:
            return None
        age = self._clock() - entry.captured_at
        if age < self._ttl:
            logger.debug("cache hit (age=%.3fs)", age)
            return entry.state
        logger.debug("cache stale (age=%.3fs ttl=%.3fs)", age, self._ttl)
        return None

    def set(self, state: dict[str, Any]) -> None:
        self._entry = CacheEntry(state=state, captured_at=self._clock())
