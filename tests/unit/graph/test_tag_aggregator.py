# tests/unit/graph/test_tag_aggregator.py — v1
"""Tests for graph/tag_aggregator.py: merged community tags."""

from __future__ import annotations

import pytest

from hubtags.core.models import Community
from hubtags.graph.tag_aggregator import aggregate_tags, group_tags


class TestAggregateTags:
    def test_star_hub(self, star):
        community = Community(hub=0, close_friends=(1, 2))
        assert aggregate_tags(community, star.users) == [
            "art", "data", "ml", "python", "web",
        ]

    def test_only_members_included(self, star):
        community = Community(hub=1, close_friends=(0,))
        assert aggregate_tags(community, star.users) == ["data", "ml", "python", "web"]

    def test_duplicates_within_one_user(self, network_factory):
        net = network_factory([[0, 1], [1, 0]], [["a", "a", "b"], ["b"]])
        assert aggregate_tags(Community(hub=0, close_friends=(1,)), net.users) == ["a", "b"]

    def test_case_sensitive(self, network_factory):
        net = network_factory([[0, 1], [1, 0]], [["Data"], ["data"]])
        assert aggregate_tags(Community(hub=0, close_friends=(1,)), net.users) == ["Data", "data"]

    def test_idempotent(self, star):
        community = Community(hub=0, close_friends=(1, 2))
        assert aggregate_tags(community, star.users) == aggregate_tags(community, star.users)

    def test_six_tags(self, network_factory):
        net = network_factory([[0, 1], [1, 0]], [["f", "b", "a"], ["c", "e", "d", "a"]])
        tags = aggregate_tags(Community(hub=0, close_friends=(1,)), net.users)
        assert tags == ["a", "b", "c", "d", "e", "f"]


class TestGroupTags:
    def test_groups_of_five(self):
        tags = list("abcdefg")
        assert group_tags(tags) == [["a", "b", "c", "d", "e"], ["f", "g"]]

    def test_exact_multiple(self):
        assert group_tags(list("abcdefghij")) == [list("abcde"), list("fghij")]

    def test_empty(self):
        assert group_tags([]) == []

    def test_custom_size(self):
        assert group_tags(["a", "b", "c"], size=2) == [["a", "b"], ["c"]]

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="size"):
            group_tags(["a"], size=0)
