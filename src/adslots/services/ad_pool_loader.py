"""AdPoolLoader: turns raw API records into validated, ordered ad pools."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from pydantic import ValidationError

from ..models.ad import Ad, AdPool, AdPools, SizeClass
from ..observability import log_event
from ..ports.ad_source import AdSource


class AdPoolLoader:
    """Fetches the small and large pools for one page visit.

    A failing source or an invalid record never raises: failures shrink
    the pool, down to empty. Shuffling happens here, once, so pool order
    is stable for the rest of the mount.
    """

    def __init__(
        self,
        source: AdSource,
        shuffle: bool = False,
        rng: random.Random | None = None,
        logger: Any = None,
    ) -> None:
        self._source = source
        self._shuffle = shuffle
        self._rng = rng or random.Random()
        self._logger = logger

    def load(self, size_class: SizeClass) -> AdPool:
        try:
            raw = self._source.fetch_ads(size_class.value)
        except Exception as e:  # noqa: BLE001 - a failed fetch is an empty pool
            log_event(
                "ad_pool_fetch_failed",
                logger=self._logger,
                level=logging.WARNING,
                size_class=size_class.value,
                error=str(e),
            )
            return ()

        ads: list[Ad] = []
        for i, item in enumerate(raw):
            try:
                ads.append(Ad.model_validate(item))
            except ValidationError as e:
                log_event(
                    "ad_record_skipped",
                    logger=self._logger,
                    level=logging.WARNING,
                    size_class=size_class.value,
                    position=i,
                    error=str(e),
                )
        if self._shuffle:
            self._rng.shuffle(ads)

        log_event(
            "ad_pool_loaded",
            logger=self._logger,
            size_class=size_class.value,
            pool_size=len(ads),
        )
        return tuple(ads)

    def load_pools(self) -> AdPools:
        return AdPools(small=self.load(SizeClass.small), large=self.load(SizeClass.large))

    async def aload_pools(self) -> AdPools:
        """Fetch both pools concurrently in worker threads."""
        small, large = await asyncio.gather(
            asyncio.to_thread(self.load, SizeClass.small),
            asyncio.to_thread(self.load, SizeClass.large),
        )
        return AdPools(small=small, large=large)
