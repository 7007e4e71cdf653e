# src/graph/community_builder.py — v1
"""Community builder: close friends of each core user.

The builder keeps an append-only registry hub -> Community for one run.
Building a community for a user that is not a core user, or building the
same hub twice, is a contract violation and raises.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from hubtags.core.models import Community
from hubtags.graph.classifier import is_close_friend, is_core_user

if TYPE_CHECKING:
    from collections.abc import Mapping

    import numpy as np

    from hubtags.core.models import Thresholds

logger = logging.getLogger(__name__)


class NotCoreUserError(ValueError):
    """Raised when building a community for a user that is not a core user."""


class CommunityExistsError(ValueError):
    """Raised when a hub's community has already been recorded this run."""


def close_friends(strength: np.ndarray, u: int, ths: float) -> list[int]:
    """Peers j with strength[u][j] > ths, ascending, each considered once."""
    return [j for j in range(strength.shape[1]) if is_close_friend(strength, u, j, ths)]


class CommunityBuilder:
    """Build and record communities over one read-only strength matrix.

    Args:
        strength: N x N strength matrix.
        thresholds: ths/thc used both to check the precondition and to
            select close friends.
    """

    def __init__(self, strength: np.ndarray, thresholds: Thresholds) -> None:
        self._strength = strength
        self._thresholds = thresholds
        self._communities: dict[int, Community] = {}

    @property
    def communities(self) -> Mapping[int, Community]:
        """Read-only view of recorded communities, in build order."""
        return MappingProxyType(self._communities)

    def build(self, hub: int) -> Community:
        """Build the community of a core user and record it.

        Raises:
            NotCoreUserError: If hub is not a core user.
            CommunityExistsError: If hub was already built in this run.
        """
        if not is_core_user(self._strength, hub, self._thresholds):
            raise NotCoreUserError(f"u{hub} is not a core user")
        if hub in self._communities:
            raise CommunityExistsError(f"Community for u{hub} already recorded")

        community = Community(
            hub=hub,
            close_friends=tuple(close_friends(self._strength, hub, self._thresholds.ths)),
        )
        self._communities[hub] = community
        logger.debug(
            "Recorded community for u%d with %d close friends",
            hub, len(community.close_friends),
        )
        return community

    def build_all(self) -> list[Community]:
        """Build communities for every core user in ascending hub order."""
        built: list[Community] = []
        for hub in range(self._strength.shape[0]):
            if hub in self._communities:
                built.append(self._communities[hub])
            elif is_core_user(self._strength, hub, self._thresholds):
                built.append(self.build(hub))
        return built
