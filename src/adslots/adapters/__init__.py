"""Concrete adapters for the ports."""

from .http_ad_source import HttpAdSource
from .memory_store import InMemoryKeyValueStore
from .sqlite_store import SqliteKeyValueStore

__all__ = [
    "HttpAdSource",
    "InMemoryKeyValueStore",
    "SqliteKeyValueStore",
]
