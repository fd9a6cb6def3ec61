"""Graph configuration — policy knobs, loadable from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, get_args

SelfFriendshipPolicy = Literal["reject", "ignore"]

ENV_SELF_FRIENDSHIP = "SOCIALNET_SELF_FRIENDSHIP"


@dataclass(frozen=True)
class GraphConfig:
    """Configuration for a SocialGraph instance."""
    self_friendship: SelfFriendshipPolicy = "reject"  # add_friendship(x, x)

    def __post_init__(self) -> None:
        if self.self_friendship not in get_args(SelfFriendshipPolicy):
            raise ValueError(
                f"Invalid self_friendship policy: {self.self_friendship!r} "
                f"(expected 'reject' or 'ignore')"
            )

    @classmethod
    def from_env(cls) -> GraphConfig:
        """Build a config from SOCIALNET_* environment variables."""
        policy = os.environ.get(ENV_SELF_FRIENDSHIP, "reject").strip().lower()
        return cls(self_friendship=policy)  # type: ignore[arg-type]
