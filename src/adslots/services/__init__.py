"""Application services: pool loading, rotation and the page-facing engine."""

from .ad_pool_loader import AdPoolLoader
from .rotation_engine import RotationEngine
from .rotation_scheduler import RotationHandle, RotationScheduler

__all__ = [
    "AdPoolLoader",
    "RotationEngine",
    "RotationHandle",
    "RotationScheduler",
]
