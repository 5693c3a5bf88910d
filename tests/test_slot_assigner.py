"""SlotAssigner tests: initialisation, validation and visibility."""

import pytest

from adslots.domain.slot_assigner import SlotAssigner
from adslots.errors import UnknownSlotError
from adslots.models.ad import Ad, AdPools, SizeClass


def _pool(size: int, prefix: str = "ad") -> tuple[Ad, ...]:
    return tuple(
        Ad(id=f"{prefix}{i}", banner_url=f"https://cdn.example.com/{prefix}{i}.png", title=f"{prefix} {i}")
        for i in range(size)
    )


class TestInitializeSmallPool:
    """Persisted indices validated against the small pool."""

    def test_first_visit_uses_defaults_and_persists(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assignment = assigner.initialize(AdPools(small=_pool(4)))
        assert assignment[layout.top_right] == 0
        assert assignment[layout.bottom_right] == 1
        assert slot_store.read(layout.top_right) == 0
        assert slot_store.read(layout.bottom_right) == 1

    def test_persisted_index_round_trips(self, layout, slot_store):
        slot_store.write(layout.top_right, 3)
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(5)))
        assert assigner.index_of(layout.top_right) == 3

        again = SlotAssigner(layout, slot_store)
        again.initialize(AdPools(small=_pool(5)))
        assert again.index_of(layout.top_right) == 3

    def test_out_of_range_index_recovers_to_default(self, layout, slot_store):
        slot_store.write(layout.top_right, 7)
        slot_store.write(layout.bottom_right, 7)
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(5)))
        assert assigner.index_of(layout.top_right) == 0
        assert assigner.index_of(layout.bottom_right) == 1
        assert slot_store.read(layout.top_right) == 0
        assert slot_store.read(layout.bottom_right) == 1

    def test_corrupt_value_recovers(self, layout, slot_store, kv):
        kv.set(layout.bottom_right, "garbage")
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(3)))
        assert assigner.index_of(layout.bottom_right) == 1

    def test_collision_resolved(self, layout, slot_store):
        slot_store.write(layout.top_right, 2)
        slot_store.write(layout.bottom_right, 2)
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(3)))
        assert assigner.index_of(layout.top_right) == 2
        assert assigner.index_of(layout.bottom_right) == 0
        assert slot_store.read(layout.bottom_right) == 0

    def test_distinct_ads_rendered(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(2)))
        top = assigner.ad_for(layout.top_right)
        bottom = assigner.ad_for(layout.bottom_right)
        assert top is not None and bottom is not None
        assert top.id != bottom.id


class TestInitializeSingleAd:
    def test_second_slot_suppressed_and_cleared(self, layout, slot_store):
        slot_store.write(layout.bottom_right, 4)
        assigner = SlotAssigner(layout, slot_store)
        assignment = assigner.initialize(AdPools(small=_pool(1)))
        assert assignment.to_dict() == {layout.top_right: 0}
        assert assigner.is_visible(layout.top_right)
        assert not assigner.is_visible(layout.bottom_right)
        assert assigner.ad_for(layout.bottom_right) is None
        assert slot_store.read(layout.bottom_right) is None
        assert slot_store.read(layout.top_right) == 0

    def test_current_pair_collapses(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(large=_pool(1)))
        assert assigner.current_pair(SizeClass.large) == (0, 0)


class TestInitializeEmptyPool:
    def test_nothing_visible_and_store_untouched(self, layout, slot_store, kv):
        slot_store.write(layout.top_right, 2)
        assigner = SlotAssigner(layout, slot_store)
        assignment = assigner.initialize(AdPools())
        assert len(assignment) == 0
        for key in layout.keys:
            assert not assigner.is_visible(key)
            assert assigner.ad_for(key) is None
        assert kv.get(layout.top_right) == "2"
        assert assigner.current_pair(SizeClass.small) == ()


class TestPoolsAreIndependent:
    def test_small_and_large_groups_never_mix(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(3, "s"), large=_pool(2, "l")))
        assert assigner.ad_for(layout.top_right).id == "s0"
        assert assigner.ad_for(layout.large_1).id == "l0"
        assert assigner.ad_for(layout.large_2).id == "l1"


class TestDismissAndLookup:
    def test_dismiss_hides_slot(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(3)))
        assert assigner.dismiss(layout.top_right) is True
        assert assigner.is_dismissed(layout.top_right)
        assert assigner.ad_for(layout.top_right) is None
        assert assigner.dismiss(layout.top_right) is False

    def test_reinitialize_clears_dismissal(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(small=_pool(3)))
        assigner.dismiss(layout.top_right)
        assigner.initialize(AdPools(small=_pool(3)))
        assert assigner.is_visible(layout.top_right)

    def test_unknown_slot_raises(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        with pytest.raises(UnknownSlotError):
            assigner.index_of("OTHERPAGE_AD_INDEX_TOP_RIGHT")
        with pytest.raises(KeyError):
            assigner.ad_for("nope")

    def test_set_pair_rejects_out_of_range(self, layout, slot_store):
        assigner = SlotAssigner(layout, slot_store)
        assigner.initialize(AdPools(large=_pool(2)))
        with pytest.raises(ValueError):
            assigner.set_pair(SizeClass.large, 0, 2)
