from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .cache import TimedStateCache
from .disk_store import DiskJsonStateStore
from .exceptions import ValidationError
from .interfaces import StateBackend, StateCache
from .models import DatabaseDoc
from .operators import apply_update, matches
from .paths import DEFAULT_DB_FILENAME, resolve_db_path
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _require_mapping(name: str, value: Any) -> None:
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a mapping")


class Database:
    """
    Embedded document store persisted as a single JSON file.

    Every call reads the full state (from the cache while it is fresh),
    works on it in memory, and mutating calls write the full state back.
    The cache only takes the new state after a successful write. There is
    no locking: concurrent callers can lose updates.
    """

    def __init__(
        self,
        file_path: str | Path = DEFAULT_DB_FILENAME,
        *,
        settings: Settings | None = None,
        cache: StateCache | None = None,
        backend: StateBackend | None = None,
    ):
        settings = settings if settings is not None else get_settings()
        if backend is None:
            path = resolve_db_path(file_path, settings.base_dir)
            backend = DiskJsonStateStore(path, indent=settings.json_indent)
        self._backend = backend
        self._cache = cache if cache is not None else TimedStateCache(settings.cache_ttl_seconds)

    @property
    def backend(self) -> StateBackend:
        return self._backend

    @property
    def cache(self) -> StateCache:
        return self._cache

    @property
    def path(self) -> Path | None:
        return getattr(self._backend, "path", None)

    def _load(self) -> DatabaseDoc:
        state = self._cache.get()
        if state is None:
            state = self._backend.read_all()
            self._cache.set(state)
        return DatabaseDoc.wrap(state)

    def _persist(self, doc: DatabaseDoc) -> None:
        state = doc.to_disk_doc()
        self._backend.write_all(state)
        self._cache.set(state)

    def define_schema(self, collection: str, schema: Mapping[str, Any]) -> None:
        _require_mapping("schema", schema)
        doc = self._load()
        doc.ensure_collection(collection)
        doc.set_schema(collection, schema)
        self._persist(doc)
        logger.debug("defined schema for %r: %s", collection, list(schema))

    def save(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        _require_mapping("document", document)
        doc = self._load()
        schema = doc.schema(collection)
        if schema is not None:
            for key in schema:
                if key not in document:
                    raise ValidationError(key)
        docs = list(doc.documents(collection) or [])
        docs.append(document)
        doc.set_documents(collection, docs)
        self._persist(doc)
        return document

    def find(self, collection: str, query: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        query = {} if query is None else query
        _require_mapping("query", query)
        docs = self._load().documents(collection) or []
        return [d for d in docs if matches(d, query)]

    def find_one(self, collection: str, query: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        results = self.find(collection, query)
        return results[0] if results else None

    def update(
        self,
        collection: str,
        query: Mapping[str, Any],
        update_spec: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        """
        Apply `update_spec` to every document matching `query`.

        Returns the last updated document in collection order, or None when
        nothing matched. The state is persisted even when nothing matched,
        but not when the collection does not exist.
        """
        _require_mapping("query", query)
        _require_mapping("update_spec", update_spec)
        doc = self._load()
        docs = doc.documents(collection)
        if docs is None:
            return None

        updated: dict[str, Any] | None = None
        new_docs: list[dict[str, Any]] = []
        for item in docs:
            if matches(item, query):
                updated = apply_update(item, update_spec)
                new_docs.append(updated)
            else:
                new_docs.append(item)

        doc.set_documents(collection, new_docs)
        self._persist(doc)
        return updated

    def delete(self, collection: str, query: Mapping[str, Any]) -> int:
        _require_mapping("query", query)
        doc = self._load()
        docs = doc.documents(collection)
        if docs is None:
            return 0

        kept = [d for d in docs if not matches(d, query)]
        doc.set_documents(collection, kept)
        self._persist(doc)
        removed = len(docs) - len(kept)
        logger.debug("deleted %d document(s) from %r", removed, collection)
        return removed
