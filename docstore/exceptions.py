from __future__ import annotations


class DocumentStoreError(Exception):
    """Base class for errors raised by the document store itself."""


class ValidationError(DocumentStoreError, ValueError):
    """A document is missing a field required by its collection's schema."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")
