# src/graph/tag_aggregator.py — v1
"""Merge the tags of a community into one ordered, duplicate-free list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from hubtags.core.ordered_set import OrderedUniqueCollection

if TYPE_CHECKING:
    from hubtags.core.models import Community, User


def aggregate_tags(community: Community, users: Sequence[User]) -> list[str]:
    """Insert the hub's tags, then each close friend's, into a fresh collection.

    Returns:
        The community's tags in ascending order, exact duplicates removed.
    """
    collection = OrderedUniqueCollection()
    for member in community.members:
        collection.update(users[member].tags)
    return list(collection)


def group_tags(tags: Sequence[str], size: int = 5) -> list[list[str]]:
    """Split tags into consecutive groups of at most ``size``."""
    if size < 1:
        raise ValueError("size must be >= 1")
    return [list(tags[i:i + size]) for i in range(0, len(tags), size)]
