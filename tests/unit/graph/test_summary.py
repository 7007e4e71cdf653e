# tests/unit/graph/test_summary.py — v1
"""Tests for graph/summary.py."""

from __future__ import annotations

from hubtags.core.models import SocialNetwork
from hubtags.graph.summary import summarize_network


class TestSummarizeNetwork:
    def test_star(self, star):
        summary = summarize_network(star)
        assert summary.user_count == 3
        assert summary.top_tagger == 0
        assert summary.top_tags == ["python", "data", "ml"]

    def test_tie_goes_to_lowest_index(self, network_factory):
        net = network_factory([[0, 0], [0, 0]], [["a", "b"], ["c", "d"]])
        assert summarize_network(net).top_tagger == 0

    def test_later_user_with_more_tags(self, network_factory):
        net = network_factory([[0, 0], [0, 0]], [["a"], ["c", "d"]])
        assert summarize_network(net).top_tagger == 1

    def test_empty(self):
        summary = summarize_network(SocialNetwork())
        assert summary.user_count == 0
        assert summary.top_tagger is None
