from __future__ import annotations

from typing import Any, Protocol


class StateBackend(Protocol):
    """
    Persists the full database state as a single JSON object.
    """

    def read_all(self) -> dict[str, Any]:
        """Load and return the full state (never None)."""
        ...

    def write_all(self, state: dict[str, Any]) -> None:
        """Replace the persisted state entirely."""
        ...


class StateCache(Protocol):
    def get(self) -> dict[str, Any] | None:
        ...

    def set(self, state: dict[str, Any]) -> None:
        ...
