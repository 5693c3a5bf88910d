"""Ad, layout and feed models."""

from .ad import Ad, AdPool, AdPools, SizeClass
from .feed import FeedEntry
from .layout import BUILTIN_LAYOUTS, RotationPolicy, SlotGroup, SlotLayout

__all__ = [
    "Ad",
    "AdPool",
    "AdPools",
    "SizeClass",
    "FeedEntry",
    "BUILTIN_LAYOUTS",
    "RotationPolicy",
    "SlotGroup",
    "SlotLayout",
]
