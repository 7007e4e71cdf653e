# src/graph/summary.py — v1
"""Network overview: user count and the user with the most tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hubtags.core.models import NetworkSummary

if TYPE_CHECKING:
    from hubtags.core.models import SocialNetwork


def summarize_network(network: SocialNetwork) -> NetworkSummary:
    """Build the Stage 1 summary.

    Ties on tag count go to the lowest user index.
    """
    if not network.users:
        return NetworkSummary(user_count=0)

    top = max(network.users, key=lambda user: len(user.tags))
    return NetworkSummary(
        user_count=network.size,
        top_tagger=top.user_id,
        top_tags=list(top.tags),
    )
