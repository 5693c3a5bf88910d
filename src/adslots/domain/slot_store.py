"""SlotStore: integer slot indices over a string key-value store."""

from __future__ import annotations

import re

from ..ports.key_value_store import KeyValueStore

_DIGITS_RE = re.compile(r"[0-9]+")


class SlotStore:
    """Reads and writes persisted pool indices.

    Missing, non-numeric and negative values read back as ``None``.
    Last write wins; there is no locking across writers.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def read(self, key: str) -> int | None:
        raw = self._store.get(key)
        if raw is None:
            return None
        text = str(raw).strip()
        # plain ASCII digits only: no sign, underscores or other scripts
        if not _DIGITS_RE.fullmatch(text):
            return None
        return int(text)

    def write(self, key: str, index: int) -> None:
        if index < 0:
            raise ValueError(f"slot index must be >= 0, got {index}")
        self._store.set(key, str(index))

    def clear(self, key: str) -> None:
        self._store.remove(key)
