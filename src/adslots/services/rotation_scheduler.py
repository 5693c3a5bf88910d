"""RotationScheduler: moves slot indices forward on dismissals and timer ticks.

Two independent policies:

* dismiss groups (small ads): closing a slot hides it for the session
  and persists the next index for that slot only
* timer groups (large ads): every ``interval_seconds`` both slots advance
  and are persisted, as long as the pool holds at least two ads

The timer is an asyncio task owned by the hosting page through
``start()``/``stop()``; ``tick()`` can also be driven externally.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from ..domain.circular_index import advance_pair, next_index
from ..domain.slot_assigner import SlotAssigner
from ..domain.slot_store import SlotStore
from ..errors import SchedulerStoppedError
from ..models.layout import RotationPolicy, SlotGroup
from ..observability import log_event

Sleeper = Callable[[float], Awaitable[Any]]


class RotationHandle:
    """Cancellation handle for an armed rotation timer."""

    def __init__(self, task: asyncio.Task, on_cancel: Callable[[], None] | None = None) -> None:
        self._task = task
        self._on_cancel = on_cancel

    @property
    def task(self) -> asyncio.Task:
        return self._task

    @property
    def active(self) -> bool:
        return not self._task.done()

    def cancel(self) -> None:
        """Cancel the timer and tear the owning scheduler down."""
        self._task.cancel()
        callback, self._on_cancel = self._on_cancel, None
        if callback is not None:
            callback()


class RotationScheduler:
    """Advances the indices held by a SlotAssigner and persists them."""

    def __init__(
        self,
        assigner: SlotAssigner,
        slot_store: SlotStore,
        interval_seconds: float = 10.0,
        sleeper: Sleeper | None = None,
        logger: Any = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")
        self._assigner = assigner
        self._store = slot_store
        self._interval = interval_seconds
        self._sleep = sleeper or asyncio.sleep
        self._logger = logger
        self._handle: RotationHandle | None = None
        self._stopped = False

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def running(self) -> bool:
        return self._handle is not None and self._handle.active

    def _timer_group(self) -> SlotGroup | None:
        for group in self._assigner.layout.groups:
            if group.policy is RotationPolicy.timer:
                return group
        return None

    # --- dismiss-driven ---

    def advance_on_dismiss(self, slot_key: str) -> int | None:
        """Hide ``slot_key`` and persist its next index for the following visit.

        Returns the persisted index, or None when nothing was written.
        """
        group = self._assigner.group_for(slot_key)
        current = self._assigner.index_of(slot_key)
        if not self._assigner.dismiss(slot_key):
            return None
        if group.policy is not RotationPolicy.dismiss:
            log_event("slot_dismissed", logger=self._logger, slot_key=slot_key, index=current)
            return None

        total = len(self._assigner.pool_for(slot_key))
        upcoming = next_index(current, total)
        self._store.write(slot_key, upcoming)
        log_event(
            "slot_dismissed",
            logger=self._logger,
            slot_key=slot_key,
            index=current,
            next_index=upcoming,
        )
        return upcoming

    # --- timer-driven ---

    def tick(self) -> tuple[int, int] | None:
        """Advance both timer-group slots once; None when there is nothing to rotate."""
        if self._stopped:
            raise SchedulerStoppedError("rotation tick after scheduler was stopped")
        group = self._timer_group()
        if group is None:
            return None
        total = len(self._assigner.pool(group.size_class))
        if total < 2:
            return None

        a, b = self._assigner.current_pair(group.size_class)
        a, b = advance_pair(a, b, total)
        self._assigner.set_pair(group.size_class, a, b)
        self._store.write(group.primary, a)
        self._store.write(group.secondary, b)
        log_event("rotation_tick", logger=self._logger, size_class=group.size_class.value, indices=[a, b])
        return a, b

    async def _run(self) -> None:
        while True:
            await self._sleep(self._interval)
            self.tick()

    def start(self) -> RotationHandle | None:
        """Arm the timer on the running event loop.

        Returns None (no timer) when the timer pool has fewer than two ads.
        """
        if self._stopped:
            raise SchedulerStoppedError("scheduler cannot be restarted after stop()")
        if self.running:
            return self._handle
        group = self._timer_group()
        if group is None or len(self._assigner.pool(group.size_class)) < 2:
            log_event("rotation_timer_skipped", logger=self._logger)
            return None

        task = asyncio.get_running_loop().create_task(self._run())
        self._handle = RotationHandle(task, on_cancel=self.stop)
        log_event("rotation_timer_started", logger=self._logger, interval_seconds=self._interval)
        return self._handle

    def stop(self) -> None:
        """Tear down: cancel the timer. Later ticks raise SchedulerStoppedError."""
        self._stopped = True
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()
            log_event("rotation_timer_stopped", logger=self._logger)
