# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides small hand-checked networks (mutual pair, star, asymmetric chain)
and a sample input document. No I/O outside tmp_path.
"""

from __future__ import annotations

import logging

import numpy as np
import pytest

from hubtags.config.settings import Settings
from hubtags.core.models import SocialNetwork, Thresholds, User
from hubtags.logging.context import clear_context


SAMPLE_INPUT = """\
u0 2018 #python #data #ml
u1 2019 #data #web
u2 2020 #art
0 1 1
1 0 0
1 0 0
0.5 0
"""

SAMPLE_REPORT = """\
Stage 1
==========
Number of users: 3
u0 has the largest number of hashtags:
#python #data #ml

Stage 2
==========
Strength of connection between u0 and u1: 0.67

Stage 3
==========
0.00 0.67 0.67
0.67 0.00 0.00
0.67 0.00 0.00

Stage 4
==========
Stage 4.1. Core user: u0; close friends: u1 u2
Stage 4.2. Hashtags:
#art #data #ml #python #web
Stage 4.1. Core user: u1; close friends: u0
Stage 4.2. Hashtags:
#data #ml #python #web
Stage 4.1. Core user: u2; close friends: u0
Stage 4.2. Hashtags:
#art #data #ml #python
"""


def make_network(adjacency: list[list[int]], tags: list[list[str]] | None = None) -> SocialNetwork:
    """Build a SocialNetwork from a 0/1 matrix and optional per-user tags."""
    n = len(adjacency)
    tags = tags or [[] for _ in range(n)]
    users = tuple(
        User(user_id=i, year_joined=2020, tags=tuple(tags[i])) for i in range(n)
    )
    return SocialNetwork(
        users=users,
        adjacency=tuple(tuple(bool(x) for x in row) for row in adjacency),
    )


# === FIXTURES: Sample data ===


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging() and clear log context."""
    yield
    root = logging.getLogger("hubtags")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    clear_context()


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def mutual_pair() -> SocialNetwork:
    """Two users who are each other's only friend, identical tags."""
    return make_network(
        [[0, 1], [1, 0]],
        [["a", "b", "c"], ["a", "b", "c"]],
    )


@pytest.fixture
def star() -> SocialNetwork:
    """u0 is friends with u1 and u2; u1 and u2 are not friends."""
    return make_network(
        [[0, 1, 1], [1, 0, 0], [1, 0, 0]],
        [["python", "data", "ml"], ["data", "web"], ["art"]],
    )


@pytest.fixture
def asymmetric() -> SocialNetwork:
    """Directed chain: u0 -> u1, u0 -> u2, u1 -> u2; u2 names nobody."""
    return make_network(
        [[0, 1, 1], [0, 0, 1], [0, 0, 0]],
        [["x"], ["y"], ["z"]],
    )


@pytest.fixture
def star_adjacency(star: SocialNetwork) -> np.ndarray:
    return star.adjacency_array()


@pytest.fixture
def network_factory():
    """Expose make_network to test modules."""
    return make_network


@pytest.fixture
def sample_input_text() -> str:
    return SAMPLE_INPUT


@pytest.fixture
def sample_report() -> str:
    """Expected report for SAMPLE_INPUT with default settings."""
    return SAMPLE_REPORT


@pytest.fixture
def sample_thresholds() -> Thresholds:
    return Thresholds(ths=0.5, thc=0)


@pytest.fixture
def sample_input_file(tmp_path):
    """SAMPLE_INPUT written to a temporary file."""
    path = tmp_path / "network.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path
