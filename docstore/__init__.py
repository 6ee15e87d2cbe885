from __future__ import annotations

from .aio import AsyncDatabase
from .cache import CacheEntry, TimedStateCache
from .database import Database
from .disk_store import DiskJsonStateStore
from .exceptions import DocumentStoreError, ValidationError
from .operators import UpdateOperator
from .settings import Settings, get_settings

__all__ = [
    "AsyncDatabase",
    "CacheEntry",
    "TimedStateCache",
    "Database",
    "DiskJsonStateStore",
    "DocumentStoreError",
    "ValidationError",
    "UpdateOperator",
    "Settings",
    "get_settings",
]
