# src/api/facade.py — v1
"""Public API facade: single entry point for network analysis.

Usage:
    from hubtags.api.facade import analyze
    result = analyze(network, thresholds)

Stages run strictly in order: summary, probe strength, strength matrix,
then per-hub classification, community building and tag aggregation.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from hubtags.api.models import AnalysisResult, HubReport
from hubtags.config.settings import Settings
from hubtags.core.models import Thresholds
from hubtags.core.similarity import connection_strength, strength_matrix
from hubtags.graph.community_builder import CommunityBuilder
from hubtags.graph.summary import summarize_network
from hubtags.graph.tag_aggregator import aggregate_tags
from hubtags.logging.context import clear_context, set_run_context, set_stage_context

if TYPE_CHECKING:
    from hubtags.core.models import SocialNetwork

logger = logging.getLogger(__name__)


def analyze(
    network: SocialNetwork,
    thresholds: Thresholds,
    settings: Settings | None = None,
) -> AnalysisResult:
    """Run all analysis stages over a network.

    Args:
        network: Validated users and adjacency relation.
        thresholds: ths/thc read from input; overridden field by field by
            settings.strength_threshold and settings.min_close_friends.
        settings: Global settings. Loaded from .env if None.

    Returns:
        AnalysisResult with summary, strength matrix and hub reports.
    """
    settings = settings or Settings()
    thresholds = _apply_overrides(thresholds, settings)
    mode = settings.neighborhood_mode
    run_id = _generate_run_id()

    set_run_context(run_id)
    try:
        logger.info(
            "Starting analysis: run_id=%s, users=%d, ths=%s, thc=%d, mode=%s",
            run_id, network.size, thresholds.ths, thresholds.thc, mode,
        )

        set_stage_context("summary")
        summary = summarize_network(network)

        set_stage_context("probe")
        adjacency = network.adjacency_array()
        u, v = settings.probe_pair
        probe = None
        if u < network.size and v < network.size:
            probe = connection_strength(adjacency, u, v, mode=mode)
        else:
            logger.warning(
                "Probe pair (u%d, u%d) out of range for %d users", u, v, network.size
            )

        set_stage_context("strength")
        matrix = strength_matrix(adjacency, mode=mode)

        set_stage_context("communities")
        builder = CommunityBuilder(matrix, thresholds)
        hubs: list[HubReport] = []
        for community in builder.build_all():
            set_stage_context("communities", hub=community.hub)
            tags = aggregate_tags(community, network.users)
            hubs.append(HubReport(community=community, tags=tags))
            logger.info(
                "Core user u%d: %d close friends, %d tags",
                community.hub, len(community.close_friends), len(tags),
            )

        logger.info(
            "Analysis complete: %d core users", len(hubs),
            extra={"data": {"core_users": [h.community.hub for h in hubs]}},
        )
        return AnalysisResult(
            run_id=run_id,
            neighborhood_mode=mode,
            thresholds=thresholds,
            summary=summary,
            probe_pair=(u, v),
            probe_strength=probe,
            strength=matrix.tolist(),
            hubs=hubs,
        )
    finally:
        clear_context()


def measure_strength(
    network: SocialNetwork,
    u: int,
    v: int,
    settings: Settings | None = None,
) -> float:
    """Strength of connection from u to v under the configured mode.

    Raises:
        IndexError: If u or v is not a user index.
    """
    settings = settings or Settings()
    for idx in (u, v):
        if not 0 <= idx < network.size:
            raise IndexError(f"u{idx} is not a user of this network")
    return connection_strength(
        network.adjacency_array(), u, v, mode=settings.neighborhood_mode
    )


def _apply_overrides(thresholds: Thresholds, settings: Settings) -> Thresholds:
    """Apply threshold overrides from settings if provided."""
    overrides: dict[str, float | int] = {}
    if settings.strength_threshold is not None:
        overrides["ths"] = settings.strength_threshold
    if settings.min_close_friends is not None:
        overrides["thc"] = settings.min_close_friends
    if not overrides:
        return thresholds
    current = thresholds.model_dump()
    current.update(overrides)
    return Thresholds(**current)


def _generate_run_id() -> str:
    """Generate a run ID: yyyymmdd_hhmmss_{uuid4_short}."""
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    short = uuid.uuid4().hex[:8]
    return f"{ts}_{short}"
