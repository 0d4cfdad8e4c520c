"""Progress helpers (pure functions)."""

from __future__ import annotations


def percentage(elapsed: float, total: float) -> float:
    """Completed share of `total` as a percentage clamped to [0, 100].

    A non-positive total counts as already complete.
    """

    if total <= 0:
        return 100.0
    fraction = min(elapsed / total, 1.0)
    return max(fraction, 0.0) * 100.0


def remaining_seconds(elapsed: float, total: float) -> float:
    return max(total - elapsed, 0.0)
