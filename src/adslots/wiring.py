"""Composition root: single place where all wiring happens.

Call ``build_engine()`` to get a RotationEngine with real adapters
(SQLite store, HTTP ad source). No ad-hoc construction elsewhere.
"""

from __future__ import annotations

from .adapters.http_ad_source import HttpAdSource
from .adapters.sqlite_store import SqliteKeyValueStore
from .config.runtime import RuntimeSettings, get_settings
from .domain.slot_store import SlotStore
from .models.layout import BUILTIN_LAYOUTS, SlotLayout
from .observability import get_logger
from .services.ad_pool_loader import AdPoolLoader
from .services.rotation_engine import RotationEngine


def resolve_layout(namespace: str) -> SlotLayout:
    """Built-in layout for ``namespace``, or a fresh one for custom pages."""
    return BUILTIN_LAYOUTS.get(namespace) or SlotLayout(namespace=namespace)


def build_store(settings: RuntimeSettings | None = None) -> SqliteKeyValueStore:
    settings = settings or get_settings()
    return SqliteKeyValueStore(settings.store_db_path)


def build_loader(settings: RuntimeSettings | None = None) -> AdPoolLoader:
    settings = settings or get_settings()
    logger = get_logger()
    return AdPoolLoader(
        HttpAdSource(settings, logger=logger),
        shuffle=settings.shuffle_ads,
        logger=logger,
    )


def build_engine(
    settings: RuntimeSettings | None = None,
    namespace: str | None = None,
) -> RotationEngine:
    """Construct a RotationEngine with real adapters."""
    settings = settings or get_settings()
    return RotationEngine(
        layout=resolve_layout(namespace or settings.page_namespace),
        slot_store=SlotStore(build_store(settings)),
        loader=build_loader(settings),
        interval_seconds=settings.rotation_interval_seconds,
        logger=get_logger(),
    )
