"""Slot layouts: the named display positions of a listing page."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .ad import SizeClass

_NAMESPACE_RE = re.compile(r"^[A-Z][A-Z0-9]*(_[A-Z0-9]+)*$")


class RotationPolicy(str, Enum):
    dismiss = "dismiss"
    timer = "timer"


class SlotGroup(BaseModel):
    """Two slots drawing from the same pool.

    The primary slot defaults to pool index 0, the secondary to 1.
    """

    model_config = {"frozen": True}

    size_class: SizeClass
    primary: str = Field(..., min_length=1, description="Store key of the first slot")
    secondary: str = Field(..., min_length=1, description="Store key of the second slot")
    policy: RotationPolicy

    @property
    def keys(self) -> tuple[str, str]:
        return (self.primary, self.secondary)


class SlotLayout(BaseModel):
    """Per-page slot keys, namespaced so pages never share persisted indices."""

    model_config = {"frozen": True}

    namespace: str = Field(..., description="Upper snake case page namespace, e.g. LOCALNEWS")

    @field_validator("namespace")
    @classmethod
    def _upper_snake(cls, v: str) -> str:
        if not _NAMESPACE_RE.match(v):
            raise ValueError(f"namespace must be upper snake case, got {v!r}")
        return v

    @property
    def top_right(self) -> str:
        return f"{self.namespace}_AD_INDEX_TOP_RIGHT"

    @property
    def bottom_right(self) -> str:
        return f"{self.namespace}_AD_INDEX_BOTTOM_RIGHT"

    @property
    def large_1(self) -> str:
        return f"{self.namespace}_LARGE_AD_INDEX_1"

    @property
    def large_2(self) -> str:
        return f"{self.namespace}_LARGE_AD_INDEX_2"

    @property
    def small_group(self) -> SlotGroup:
        return SlotGroup(
            size_class=SizeClass.small,
            primary=self.top_right,
            secondary=self.bottom_right,
            policy=RotationPolicy.dismiss,
        )

    @property
    def large_group(self) -> SlotGroup:
        return SlotGroup(
            size_class=SizeClass.large,
            primary=self.large_1,
            secondary=self.large_2,
            policy=RotationPolicy.timer,
        )

    @property
    def groups(self) -> tuple[SlotGroup, SlotGroup]:
        return (self.small_group, self.large_group)

    @property
    def keys(self) -> tuple[str, ...]:
        return self.small_group.keys + self.large_group.keys


# Listing pages of the web client that embed the rotation engine
LOCALNEWS = SlotLayout(namespace="LOCALNEWS")
LOCALNEWS_DETAILS = SlotLayout(namespace="LOCALNEWSDETAILS")
COMMUNITY_DETAILS = SlotLayout(namespace="COMMUNITYDETAILS")
EVENT_DETAILS = SlotLayout(namespace="EVENT_DETAILS")
JOBS = SlotLayout(namespace="JOBS")
EVENTS = SlotLayout(namespace="EVENTS")
COMMUNITY = SlotLayout(namespace="COMMUNITY")
PROPERTIES = SlotLayout(namespace="PROPERTIES")

BUILTIN_LAYOUTS: dict[str, SlotLayout] = {
    layout.namespace: layout
    for layout in (
        LOCALNEWS,
        LOCALNEWS_DETAILS,
        COMMUNITY_DETAILS,
        EVENT_DETAILS,
        JOBS,
        EVENTS,
        COMMUNITY,
        PROPERTIES,
    )
}
