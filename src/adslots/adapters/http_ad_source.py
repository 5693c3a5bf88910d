"""Adapter: banner-ads REST endpoint implementing AdSource."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ..config.runtime import RuntimeSettings
from ..observability import log_event


class HttpAdSource:
    """Fetches ``GET {api_base_url}/banner-ads/active/{size_class}``.

    The response envelope is ``{"data": [...]}``. Any failure yields an
    empty list; retries are left to the caller.
    """

    def __init__(
        self,
        settings: RuntimeSettings,
        session: requests.Session | None = None,
        logger: Any = None,
    ) -> None:
        self._settings = settings
        self._session = session
        self._logger = logger

    def _url(self, size_class: str) -> str:
        return f"{self._settings.api_base_url}/banner-ads/active/{size_class}"

    def fetch_ads(self, size_class: str) -> list[dict[str, Any]]:
        url = self._url(size_class)
        getter = self._session.get if self._session is not None else requests.get
        try:
            r = getter(url, timeout=self._settings.request_timeout_seconds)
            r.raise_for_status()
            payload = r.json()
        except (requests.RequestException, ValueError) as e:
            log_event(
                "ad_pool_fetch_failed",
                logger=self._logger,
                level=logging.WARNING,
                size_class=size_class,
                url=url,
                error=str(e),
            )
            return []

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            log_event(
                "ad_pool_malformed",
                logger=self._logger,
                level=logging.WARNING,
                size_class=size_class,
                url=url,
            )
            return []
        return [item for item in data if isinstance(item, dict)]
