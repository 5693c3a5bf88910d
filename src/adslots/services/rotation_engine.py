"""RotationEngine: the surface a hosting listing page talks to.

Lifecycle of one mount:

1. ``mount()`` / ``amount()`` loads both pools and initialises the slots
2. the page renders ``ad_for(slot_key)`` and ``interleave(content)``
3. dismiss events call ``advance_on_dismiss``; the timer (or the host)
   calls ``tick``
4. ``stop()`` on unmount
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..domain.interleave import interleave
from ..domain.slot_assigner import SlotAssigner, SlotAssignment
from ..domain.slot_store import SlotStore
from ..models.ad import Ad, AdPools, SizeClass
from ..models.feed import FeedEntry
from ..models.layout import SlotLayout
from ..observability import log_event
from .ad_pool_loader import AdPoolLoader
from .rotation_scheduler import RotationHandle, RotationScheduler, Sleeper


class RotationEngine:
    """Slot assignment, rotation and feed placement for one page instance."""

    def __init__(
        self,
        layout: SlotLayout,
        slot_store: SlotStore,
        loader: AdPoolLoader | None = None,
        interval_seconds: float = 10.0,
        sleeper: Sleeper | None = None,
        logger: Any = None,
    ) -> None:
        self._layout = layout
        self._loader = loader
        self._logger = logger
        self._assigner = SlotAssigner(layout, slot_store, logger=logger)
        self._scheduler = RotationScheduler(
            self._assigner,
            slot_store,
            interval_seconds=interval_seconds,
            sleeper=sleeper,
            logger=logger,
        )

    @property
    def layout(self) -> SlotLayout:
        return self._layout

    @property
    def assigner(self) -> SlotAssigner:
        return self._assigner

    @property
    def scheduler(self) -> RotationScheduler:
        return self._scheduler

    def initialize(self, pools: AdPools) -> SlotAssignment:
        return self._assigner.initialize(pools)

    def mount(self) -> SlotAssignment:
        """Load pools synchronously and initialise. No timer is armed."""
        return self.initialize(self._require_loader().load_pools())

    async def amount(self) -> SlotAssignment:
        """Load pools off the event loop, initialise, then arm the timer."""
        pools = await self._require_loader().aload_pools()
        if self._scheduler.stopped:
            # torn down while fetching; nothing may touch the store now
            log_event("mount_abandoned", logger=self._logger, page=self._layout.namespace)
            return SlotAssignment()
        assignment = self.initialize(pools)
        self._scheduler.start()
        return assignment

    def _require_loader(self) -> AdPoolLoader:
        if self._loader is None:
            raise RuntimeError("RotationEngine was built without an AdPoolLoader")
        return self._loader

    def ad_for(self, slot_key: str) -> Ad | None:
        return self._assigner.ad_for(slot_key)

    def advance_on_dismiss(self, slot_key: str) -> int | None:
        return self._scheduler.advance_on_dismiss(slot_key)

    def tick(self) -> tuple[int, int] | None:
        return self._scheduler.tick()

    def start(self) -> RotationHandle | None:
        return self._scheduler.start()

    def stop(self) -> None:
        self._scheduler.stop()

    def interleave(self, content: Sequence[Any]) -> list[FeedEntry]:
        return interleave(
            content,
            self._assigner.pool(SizeClass.large),
            self._assigner.current_pair(SizeClass.large),
        )
