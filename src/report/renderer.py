# src/report/renderer.py — v1
"""Plain-text stage report.

Output layout, one block per stage separated by a blank line:

    Stage 1
    ==========
    Number of users: 3
    u0 has the largest number of hashtags:
    #a #b #c

    Stage 2
    ...

Tags are printed with a '#' prefix, separated by single spaces, with a line
break after every ``tags_per_line``-th tag when more tags follow.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from hubtags.graph.tag_aggregator import group_tags

if TYPE_CHECKING:
    from hubtags.api.models import AnalysisResult, HubReport
    from hubtags.core.models import Community, NetworkSummary

STAGE_RULE = "=========="


def stage_header(stage_num: int) -> str:
    return f"Stage {stage_num}\n{STAGE_RULE}\n"


def format_strength(value: float) -> str:
    """Render a strength value with exactly two decimal digits."""
    return f"{value:.2f}"


def format_tags(tags: Sequence[str]) -> str:
    """Render tags on one line: '#a #b #c'."""
    return " ".join(f"#{tag}" for tag in tags)


def format_tag_lines(tags: Sequence[str], tags_per_line: int = 5) -> str:
    """Render tags in groups of ``tags_per_line``, one group per line."""
    return "\n".join(format_tags(group) for group in group_tags(tags, tags_per_line))


def format_close_friends(community: Community) -> str:
    """Render 'close friends: u1 u2 ...' with no trailing separator."""
    return " ".join(["close friends:", *(f"u{j}" for j in community.close_friends)])


def render_report(result: AnalysisResult, tags_per_line: int = 5) -> str:
    """Render the four-stage text report for an analysis result."""
    return "\n".join([
        _render_summary(result.summary),
        _render_probe(result.probe_pair, result.probe_strength),
        _render_matrix(result.strength),
        _render_hubs(result.hubs, tags_per_line),
    ])


def _render_summary(summary: NetworkSummary) -> str:
    out = stage_header(1) + f"Number of users: {summary.user_count}\n"
    if summary.top_tagger is not None:
        out += f"u{summary.top_tagger} has the largest number of hashtags:\n"
        out += format_tags(summary.top_tags) + "\n"
    return out


def _render_probe(pair: tuple[int, int], strength: float | None) -> str:
    out = stage_header(2)
    if strength is not None:
        u, v = pair
        out += (
            f"Strength of connection between u{u} and u{v}: "
            f"{format_strength(strength)}\n"
        )
    return out


def _render_matrix(matrix: Sequence[Sequence[float]]) -> str:
    rows = [" ".join(format_strength(value) for value in row) for row in matrix]
    return stage_header(3) + "".join(row + "\n" for row in rows)


def _render_hubs(hubs: Sequence[HubReport], tags_per_line: int) -> str:
    out = stage_header(4)
    for hub in hubs:
        community = hub.community
        out += (
            f"Stage 4.1. Core user: u{community.hub}; "
            f"{format_close_friends(community)}\n"
        )
        out += "Stage 4.2. Hashtags:\n"
        out += format_tag_lines(hub.tags, tags_per_line) + "\n"
    return out
