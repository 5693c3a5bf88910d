"""Adapter: dict-backed KeyValueStore."""

from __future__ import annotations


class InMemoryKeyValueStore:
    """Concrete KeyValueStore that lives for the process only."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
