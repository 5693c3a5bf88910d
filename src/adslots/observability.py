"""Observability: structured logs (event, page, slot) and in-process counters."""

from __future__ import annotations

import logging
import threading
from typing import Any

_LOGGER = logging.getLogger("adslots")

# event name -> count
METRICS: dict[str, int] = {}
_METRICS_LOCK = threading.Lock()


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the adslots logger (CLI use)."""
    if not _LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        _LOGGER.addHandler(handler)
    _LOGGER.setLevel(level.upper())


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit structured log and bump the event counter."""
    (logger or _LOGGER).log(level, event, extra={"event": event, **fields})
    with _METRICS_LOCK:
        METRICS[event] = METRICS.get(event, 0) + 1


def metrics_snapshot() -> dict[str, int]:
    """Return current counters."""
    with _METRICS_LOCK:
        return dict(METRICS)


def reset_metrics() -> None:
    with _METRICS_LOCK:
        METRICS.clear()
