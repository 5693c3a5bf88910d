"""Ad slot rotation engine for listing pages."""

from .domain import SlotAssignment, distinct_pair, interleave, next_index
from .models import Ad, AdPools, FeedEntry, SizeClass, SlotLayout
from .services import RotationEngine

__version__ = "0.1.0"
__all__ = [
    "Ad",
    "AdPools",
    "FeedEntry",
    "RotationEngine",
    "SizeClass",
    "SlotAssignment",
    "SlotLayout",
    "distinct_pair",
    "interleave",
    "next_index",
]
