from __future__ import annotations

import asyncio
import threading
from pathlib import Path
from typing import Any, Callable, Mapping, TypeVar

from .database import Database
from .interfaces import StateBackend, StateCache
from .paths import DEFAULT_DB_FILENAME
from .settings import Settings

T = TypeVar("T")


class AsyncDatabase:
    """
    Async wrapper around the file-backed Database.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Calls on one instance run one at a time: each read-mutate-write cycle
    holds the instance lock for its whole duration.
    """

    def __init__(
        self,
        file_path: str | Path = DEFAULT_DB_FILENAME,
        *,
        settings: Settings | None = None,
        cache: StateCache | None = None,
        backend: StateBackend | None = None,
        database: Database | None = None,
    ) -> None:
        self._db = database if database is not None else Database(
            file_path, settings=settings, cache=cache, backend=backend
        )
        self._lock = threading.Lock()

    def _locked(self, fn: Callable[..., T], *args: Any) -> T:
        with self._lock:
            return fn(*args)

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        return await asyncio.to_thread(self._locked, fn, *args)

    @property
    def sync(self) -> Database:
        return self._db

    async def define_schema(self, collection: str, schema: Mapping[str, Any]) -> None:
        await self._run(self._db.define_schema, collection, schema)

    async def save(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        return await self._run(self._db.save, collection, document)

    async def find(self, collection: str, query: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._run(self._db.find, collection, query)

    async def find_one(self, collection: str, query: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        return await self._run(self._db.find_one, collection, query)

    async def update(
        self,
        collection: str,
        query: Mapping[str, Any],
        update_spec: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        return await self._run(self._db.update, collection, query, update_spec)

    async def delete(self, collection: str, query: Mapping[str, Any]) -> int:
        return await self._run(self._db.delete, collection, query)
