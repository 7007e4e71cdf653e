# src/graph/classifier.py — v1
"""Core user classification.

A user is a core user (hub) when strictly more than ``thc`` peers have a
connection strength strictly above ``ths``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from hubtags.core.models import Thresholds


def is_close_friend(strength: np.ndarray, u: int, j: int, ths: float) -> bool:
    """Shared predicate for classification and community building."""
    return bool(strength[u, j] > ths)


def count_close_friends(strength: np.ndarray, u: int, ths: float) -> int:
    """Count peers j with strength[u][j] > ths over the full row."""
    return sum(1 for j in range(strength.shape[1]) if is_close_friend(strength, u, j, ths))


def is_core_user(strength: np.ndarray, u: int, thresholds: Thresholds) -> bool:
    """Return True once more than thc close friends have been seen.

    Scans peers in ascending index order and stops at the first peer that
    pushes the count past thc.
    """
    count = 0
    for j in range(strength.shape[1]):
        if is_close_friend(strength, u, j, thresholds.ths):
            count += 1
        if count > thresholds.thc:
            return True
    return False


def core_users(strength: np.ndarray, thresholds: Thresholds) -> list[int]:
    """All core users in ascending index order."""
    return [u for u in range(strength.shape[0]) if is_core_user(strength, u, thresholds)]
