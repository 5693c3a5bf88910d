"""Exceptions raised by the rotation engine.

Empty pools, stale persisted indices and fetch failures are resolved
internally and never raised.
"""

from __future__ import annotations


class AdSlotsError(Exception):
    """Base class for adslots errors."""


class UnknownSlotError(AdSlotsError, KeyError):
    """A slot key that is not part of the page layout."""

    def __init__(self, slot_key: str) -> None:
        super().__init__(slot_key)
        self.slot_key = slot_key

    def __str__(self) -> str:
        return f"unknown slot key: {self.slot_key!r}"


class SchedulerStoppedError(AdSlotsError, RuntimeError):
    """A rotation tick was requested after the scheduler was torn down."""
