# src/core/similarity.py — v1
"""Connection strength between users.

The strength of a connection u -> v is the Jaccard similarity of the two
users' neighbor sets, gated by the direct link: if u does not designate v
as a friend the strength is 0.0 without further computation.

Neighborhood modes:
- closed (default): every user counts as a member of their own neighbor set,
  so a connected pair always scores in (0, 1].
- open: the adjacency diagonal is read as-is; a connected pair with no other
  shared friend can score 0.0.

The scan always covers the whole index range, u and v included.
"""

from __future__ import annotations

import logging
from typing import Literal

import numpy as np

logger = logging.getLogger(__name__)

NeighborhoodMode = Literal["closed", "open"]


def _neighbor_sets(adjacency: np.ndarray, mode: NeighborhoodMode) -> np.ndarray:
    """Return the boolean membership matrix used by the union/intersection scan."""
    if mode == "closed":
        return adjacency | np.eye(adjacency.shape[0], dtype=bool)
    if mode == "open":
        return adjacency
    raise ValueError(f"Unknown neighborhood mode: {mode!r}")


def connection_strength(
    adjacency: np.ndarray,
    u: int,
    v: int,
    mode: NeighborhoodMode = "closed",
) -> float:
    """Compute the strength of connection from user u to user v.

    Args:
        adjacency: Square boolean adjacency matrix.
        u: Index of the user whose row gates the computation.
        v: Index of the peer.
        mode: Neighborhood mode ("closed" or "open").

    Returns:
        |intersection| / |union| of the two neighbor sets, or 0.0 when
        adjacency[u][v] is false.
    """
    if not adjacency[u, v]:
        return 0.0

    row_u = adjacency[u].copy()
    row_v = adjacency[v].copy()
    if mode == "closed":
        row_u[u] = True
        row_v[v] = True
    elif mode != "open":
        raise ValueError(f"Unknown neighborhood mode: {mode!r}")

    union = int(np.count_nonzero(row_u | row_v))
    intersection = int(np.count_nonzero(row_u & row_v))
    # adjacency[u][v] puts v in the union, so union >= 1
    return intersection / union


def strength_matrix(
    adjacency: np.ndarray,
    mode: NeighborhoodMode = "closed",
) -> np.ndarray:
    """Compute the full N x N strength matrix.

    Args:
        adjacency: Square boolean adjacency matrix.
        mode: Neighborhood mode ("closed" or "open").

    Returns:
        Read-only float64 matrix with values in [0, 1].

    Raises:
        ValueError: If adjacency is not a square 2D array.
    """
    if adjacency.ndim != 2 or adjacency.shape[0] != adjacency.shape[1]:
        raise ValueError(f"Expected square 2D array, got shape {adjacency.shape}")
    n = adjacency.shape[0]
    if n == 0:
        result = np.empty((0, 0), dtype=np.float64)
        result.flags.writeable = False
        return result

    adjacency = adjacency.astype(bool, copy=False)
    members = _neighbor_sets(adjacency, mode).astype(np.int64)

    intersection = members @ members.T
    sizes = members.sum(axis=1)
    union = sizes[:, None] + sizes[None, :] - intersection

    result = np.zeros((n, n), dtype=np.float64)
    np.divide(intersection, union, out=result, where=adjacency & (union > 0))
    result.flags.writeable = False

    logger.debug(
        "Computed %dx%d strength matrix (%s mode), %d connected pairs",
        n, n, mode, int(np.count_nonzero(adjacency)),
    )
    return result
