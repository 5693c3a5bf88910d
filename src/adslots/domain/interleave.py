"""FeedInterleaver: weave large ads into a single-column content feed.

Placement rule, by number of content items:

* 0 items: empty feed, no ads either
* 1 item: ad, item, ad
* 2 items: item, ad, item, ad
* 3+ items: an ad after every completed pair of items, except after the
  last item; ads alternate between the two current slot indices

An empty pool yields the content alone.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.ad import Ad
from ..models.feed import FeedEntry
from .circular_index import distinct_pair


def _resolve_indices(indices: Sequence[int], total: int) -> tuple[int, int]:
    first = indices[0] if len(indices) > 0 else None
    second = indices[1] if len(indices) > 1 else None
    return distinct_pair(first, second, total)


def interleave(
    content: Sequence[Any],
    pool: Sequence[Ad],
    indices: Sequence[int] = (),
) -> list[FeedEntry]:
    """Merge ``content`` and ads of ``pool`` at ``indices`` into one feed."""
    if not content:
        return []
    if not pool:
        return [FeedEntry.content(item) for item in content]

    pair = _resolve_indices(indices, len(pool))
    ads = [pool[pair[0]], pool[pair[1]]]

    if len(content) == 1:
        return [FeedEntry.ad(ads[0]), FeedEntry.content(content[0]), FeedEntry.ad(ads[1])]

    if len(content) == 2:
        return [
            FeedEntry.content(content[0]),
            FeedEntry.ad(ads[0]),
            FeedEntry.content(content[1]),
            FeedEntry.ad(ads[1]),
        ]

    feed: list[FeedEntry] = []
    inserted = 0
    last = len(content) - 1
    for position, item in enumerate(content):
        feed.append(FeedEntry.content(item))
        if position % 2 == 1 and position != last:
            feed.append(FeedEntry.ad(ads[inserted % 2]))
            inserted += 1
    return feed
