# src/api/models.py — v1
"""API-level models: HubReport and AnalysisResult."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hubtags.core.models import Community, NetworkSummary, Thresholds


class HubReport(BaseModel):
    """One core user's community and its merged tags."""

    community: Community
    tags: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Return value of facade.analyze()."""

    run_id: str
    neighborhood_mode: str
    thresholds: Thresholds
    summary: NetworkSummary
    probe_pair: tuple[int, int]
    probe_strength: float | None = None  # None when the pair is out of range
    strength: list[list[float]] = Field(default_factory=list)
    hubs: list[HubReport] = Field(default_factory=list)

    @property
    def core_users(self) -> list[int]:
        return [hub.community.hub for hub in self.hubs]
