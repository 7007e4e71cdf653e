# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
Every model is frozen: the network is read-only once constructed.
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator


# === USERS & GRAPH ===


class User(BaseModel):
    """A user profile: index, year joined and tags in source order."""

    model_config = ConfigDict(frozen=True)

    user_id: int = Field(ge=0)
    year_joined: int = 0
    tags: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return f"u{self.user_id}"


class SocialNetwork(BaseModel):
    """Users plus the (possibly asymmetric) friendship adjacency relation.

    ``adjacency[u][v]`` is True when user u designates v as a friend.
    """

    model_config = ConfigDict(frozen=True)

    users: tuple[User, ...] = ()
    adjacency: tuple[tuple[bool, ...], ...] = ()

    @model_validator(mode="after")
    def validate_shape(self) -> SocialNetwork:
        n = len(self.users)
        if len(self.adjacency) != n:
            raise ValueError(
                f"adjacency has {len(self.adjacency)} rows, expected {n}"
            )
        for i, row in enumerate(self.adjacency):
            if len(row) != n:
                raise ValueError(
                    f"adjacency row {i} has {len(row)} entries, expected {n}"
                )
        for i, user in enumerate(self.users):
            if user.user_id != i:
                raise ValueError(
                    f"user at position {i} has user_id {user.user_id}"
                )
        return self

    @property
    def size(self) -> int:
        return len(self.users)

    def is_friend(self, u: int, v: int) -> bool:
        return self.adjacency[u][v]

    def adjacency_array(self) -> np.ndarray:
        """Return the adjacency relation as a read-only N x N bool array."""
        arr = np.array(self.adjacency, dtype=bool).reshape(self.size, self.size)
        arr.flags.writeable = False
        return arr


class Thresholds(BaseModel):
    """Bond-strength cutoff (ths) and minimum close-friend count (thc)."""

    model_config = ConfigDict(frozen=True)

    ths: float = Field(ge=0.0)
    thc: int = Field(ge=0)


# === ANALYSIS RESULTS ===


class Community(BaseModel):
    """A core user (hub) and their close friends in ascending index order."""

    model_config = ConfigDict(frozen=True)

    hub: int
    close_friends: tuple[int, ...] = ()

    @property
    def members(self) -> tuple[int, ...]:
        """Hub first, then close friends."""
        return (self.hub, *self.close_friends)


class NetworkSummary(BaseModel):
    """Stage 1 overview of the loaded network."""

    user_count: int
    top_tagger: int | None = None
    top_tags: list[str] = Field(default_factory=list)
