"""Domain layer: index arithmetic, slot state and feed placement."""

from .circular_index import advance_pair, distinct_pair, next_index
from .interleave import interleave
from .slot_assigner import SlotAssigner, SlotAssignment
from .slot_store import SlotStore

__all__ = [
    "advance_pair",
    "distinct_pair",
    "next_index",
    "interleave",
    "SlotAssigner",
    "SlotAssignment",
    "SlotStore",
]
