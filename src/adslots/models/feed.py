"""Feed entries produced by the interleaver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from .ad import Ad


@dataclass(frozen=True)
class FeedEntry:
    """One position of a single-column feed: a content item or an ad."""

    kind: Literal["content", "ad"]
    payload: Any

    @classmethod
    def content(cls, item: Any) -> FeedEntry:
        return cls(kind="content", payload=item)

    @classmethod
    def ad(cls, ad: Ad) -> FeedEntry:
        return cls(kind="ad", payload=ad)

    @property
    def is_ad(self) -> bool:
        return self.kind == "ad"
