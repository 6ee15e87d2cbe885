from __future__ import annotations

from typing import Any, Mapping

from pydantic import RootModel

from .exceptions import DocumentStoreError

SCHEMA_KEY_SUFFIX = "_schema"


def schema_key(collection: str) -> str:
    return f"{collection}{SCHEMA_KEY_SUFFIX}"


class DatabaseDoc(RootModel[dict[str, Any]]):
    """
    Mirrors the on-disk database file:
      {
        "<collection>": [ {...}, {...} ],
        "<collection>_schema": { "<required_field>": ... }
      }

    Values are kept as-is (documents are schema-less); only the top level
    is checked to be a JSON object.
    """

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "DatabaseDoc":
        return cls.model_validate(doc)

    @classmethod
    def wrap(cls, state: dict[str, Any]) -> "DatabaseDoc":
        # Shallow copy: collections are replaced with new lists, never mutated.
        return cls.model_construct(dict(state))

    def to_disk_doc(self) -> dict[str, Any]:
        return self.root

    def documents(self, collection: str) -> list[dict[str, Any]] | None:
        docs = self.root.get(collection)
        if docs is None:
            return None
        if not isinstance(docs, list):
            raise DocumentStoreError(f"{collection!r} does not hold a collection")
        return docs

    def ensure_collection(self, collection: str) -> list[dict[str, Any]]:
        docs = self.documents(collection)
        if docs is None:
            docs = []
            self.root[collection] = docs
        return docs

    def set_documents(self, collection: str, docs: list[dict[str, Any]]) -> None:
        self.root[collection] = docs

    def schema(self, collection: str) -> Mapping[str, Any] | None:
        schema = self.root.get(schema_key(collection))
        return schema if isinstance(schema, Mapping) else None

    def set_schema(self, collection: str, schema: Mapping[str, Any]) -> None:
        self.root[schema_key(collection)] = schema
