"""Sponsored-content models using Pydantic."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SizeClass(str, Enum):
    small = "small"
    large = "large"


class Ad(BaseModel):
    """One sponsored item as served by the banner-ads API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique identifier for the ad")
    banner_url: str = Field(..., min_length=1, alias="bannerUrl", description="Banner image URL")
    title: str = Field(..., min_length=1, description="Ad title/headline")
    description: str | None = Field(default=None, description="Optional body text")
    destination_url: str | None = Field(
        default=None, alias="destinationUrl", description="URL opened when the ad is clicked"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # The API returns numeric ids for some records
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


AdPool = tuple[Ad, ...]


class AdPools(NamedTuple):
    """The two independent pools fetched for one page visit."""

    small: AdPool = ()
    large: AdPool = ()

    def for_size(self, size_class: SizeClass) -> AdPool:
        return self.small if size_class is SizeClass.small else self.large
