"""SlotAssigner: current pool index of every slot on a page.

Initialisation semantics (per slot group, once per pool load):
1. empty pool -> nothing assigned, nothing visible, store untouched
2. one ad -> primary slot gets 0, secondary is suppressed and its key cleared
3. two or more -> persisted indices validated with ``distinct_pair``
4. resolved indices are written back

After initialisation indices only move forward through the scheduler.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..errors import UnknownSlotError
from ..models.ad import Ad, AdPool, AdPools, SizeClass
from ..models.layout import SlotGroup, SlotLayout
from ..observability import log_event
from .circular_index import distinct_pair
from .slot_store import SlotStore


class SlotAssignment(Mapping[str, int]):
    """Read-only snapshot of slot key -> pool index for assigned slots."""

    def __init__(self, indices: Mapping[str, int] | None = None) -> None:
        self._indices = dict(indices or {})

    def __getitem__(self, key: str) -> int:
        return self._indices[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"SlotAssignment({self._indices!r})"

    def to_dict(self) -> dict[str, int]:
        return dict(self._indices)


class _GroupState:
    def __init__(self, group: SlotGroup) -> None:
        self.group = group
        self.pool: AdPool = ()
        self.indices: dict[str, int] = {}
        self.suppressed: set[str] = set()
        self.dismissed: set[str] = set()

    def reset(self, pool: AdPool) -> None:
        self.pool = tuple(pool)
        self.indices = {}
        self.suppressed = set()
        self.dismissed = set()


class SlotAssigner:
    """Owns the slot -> index state of one mounted page."""

    def __init__(
        self,
        layout: SlotLayout,
        slot_store: SlotStore,
        logger: Any = None,
    ) -> None:
        self._layout = layout
        self._store = slot_store
        self._logger = logger
        self._groups: dict[SizeClass, _GroupState] = {
            group.size_class: _GroupState(group) for group in layout.groups
        }

    @property
    def layout(self) -> SlotLayout:
        return self._layout

    def initialize(self, pools: AdPools) -> SlotAssignment:
        for size_class in self._groups:
            self.initialize_group(size_class, pools.for_size(size_class))
        return self.assignment()

    def initialize_group(self, size_class: SizeClass, pool: AdPool) -> dict[str, int]:
        state = self._groups[size_class]
        group = state.group
        state.reset(pool)
        total = len(state.pool)

        if total == 0:
            self._log("slot_group_empty", size_class=size_class.value)
            return {}

        if total == 1:
            state.indices = {group.primary: 0}
            state.suppressed = {group.secondary}
            self._store.write(group.primary, 0)
            self._store.clear(group.secondary)
        else:
            stored_a = self._store.read(group.primary)
            stored_b = self._store.read(group.secondary)
            a, b = distinct_pair(stored_a, stored_b, total)
            state.indices = {group.primary: a, group.secondary: b}
            if (a, b) != (stored_a, stored_b):
                self._log(
                    "slot_index_corrected",
                    size_class=size_class.value,
                    stored=[stored_a, stored_b],
                    resolved=[a, b],
                    pool_size=total,
                )
            self._store.write(group.primary, a)
            self._store.write(group.secondary, b)

        self._log(
            "slot_group_initialized",
            size_class=size_class.value,
            pool_size=total,
            indices=dict(state.indices),
        )
        return dict(state.indices)

    # --- lookups ---

    def _state_for(self, slot_key: str) -> _GroupState:
        for state in self._groups.values():
            if slot_key in state.group.keys:
                return state
        raise UnknownSlotError(slot_key)

    def group_for(self, slot_key: str) -> SlotGroup:
        return self._state_for(slot_key).group

    def group(self, size_class: SizeClass) -> SlotGroup:
        return self._groups[size_class].group

    def pool(self, size_class: SizeClass) -> AdPool:
        return self._groups[size_class].pool

    def pool_for(self, slot_key: str) -> AdPool:
        return self._state_for(slot_key).pool

    def index_of(self, slot_key: str) -> int | None:
        """Current index, or None when the slot has nothing assigned."""
        return self._state_for(slot_key).indices.get(slot_key)

    def is_dismissed(self, slot_key: str) -> bool:
        return slot_key in self._state_for(slot_key).dismissed

    def is_visible(self, slot_key: str) -> bool:
        state = self._state_for(slot_key)
        return (
            bool(state.pool)
            and slot_key in state.indices
            and slot_key not in state.suppressed
            and slot_key not in state.dismissed
        )

    def ad_for(self, slot_key: str) -> Ad | None:
        """The ad to render in ``slot_key``, or None when the slot is hidden."""
        if not self.is_visible(slot_key):
            return None
        state = self._state_for(slot_key)
        return state.pool[state.indices[slot_key]]

    def current_pair(self, size_class: SizeClass) -> tuple[int, ...]:
        """Indices of the primary and secondary slot; empty for an empty pool."""
        state = self._groups[size_class]
        if not state.pool:
            return ()
        a = state.indices.get(state.group.primary, 0)
        b = state.indices.get(state.group.secondary, a)
        return (a, b)

    def assignment(self) -> SlotAssignment:
        indices: dict[str, int] = {}
        for state in self._groups.values():
            for key, index in state.indices.items():
                if key not in state.suppressed:
                    indices[key] = index
        return SlotAssignment(indices)

    # --- mutations (driven by the scheduler) ---

    def dismiss(self, slot_key: str) -> bool:
        """Hide a slot for the rest of the session. False if already hidden."""
        state = self._state_for(slot_key)
        if not self.is_visible(slot_key):
            return False
        state.dismissed.add(slot_key)
        return True

    def set_pair(self, size_class: SizeClass, a: int, b: int) -> None:
        state = self._groups[size_class]
        total = len(state.pool)
        if not (0 <= a < total and 0 <= b < total):
            raise ValueError(f"indices ({a}, {b}) out of range for pool of {total}")
        state.indices = {state.group.primary: a, state.group.secondary: b}

    def _log(self, event: str, **fields: Any) -> None:
        log_event(event, logger=self._logger, page=self._layout.namespace, **fields)
