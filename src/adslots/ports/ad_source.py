"""Port: source of raw ad records for one size class."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AdSource(Protocol):
    """Fetch the active ads of a size class ("small" or "large")."""

    def fetch_ads(self, size_class: str) -> list[dict[str, Any]]: ...
