"""Circular index arithmetic over a pool of ``total`` ads.

All functions are total: any integer input yields an index in
``[0, total)``, or ``0`` for an empty pool.
"""

from __future__ import annotations


def next_index(current: int, total: int) -> int:
    """Index after ``current``, wrapping at ``total``; 0 for an empty pool."""
    if total <= 0:
        return 0
    return (current + 1) % total


def _in_range(value: int | None, total: int) -> bool:
    return value is not None and 0 <= value < total


def distinct_pair(
    preferred_a: int | None,
    preferred_b: int | None,
    total: int,
) -> tuple[int, int]:
    """Resolve two slot indices that never collide when ``total > 1``.

    Out-of-range or missing preferences fall back to 0 for ``a`` and 1
    for ``b``. With a single ad both are 0 and the caller hides the
    second slot.
    """
    if total <= 1:
        return 0, 0
    a = preferred_a if _in_range(preferred_a, total) else 0
    b = preferred_b if _in_range(preferred_b, total) else 1
    if a == b:
        b = next_index(b, total)
    return a, b


def advance_pair(a: int, b: int, total: int) -> tuple[int, int]:
    """One rotation step for a pair of slots sharing a pool."""
    a = next_index(a, total)
    b = next_index(b, total)
    if a == b and total > 1:
        b = next_index(b, total)
    return a, b
