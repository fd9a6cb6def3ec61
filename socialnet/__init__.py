"""socialnet — in-memory social graph with friend and path queries.

Users are opaque string ids; friendships are undirected and unweighted.
The engine (SocialGraph) answers four questions:

- who do two users both know (mutual_friends)
- who should a user meet next (suggest_friends)
- how far apart are two users (shortest_path_unweighted, BFS)
- the same, via a priority-queue search (shortest_path_weighted)

Logging is disabled for library use; call logger.enable("socialnet")
to see the engine's debug output.
"""

from __future__ import annotations

from loguru import logger

from socialnet.config import GraphConfig
from socialnet.errors import (
    SelfFriendshipError,
    SocialGraphError,
    UserNotFoundError,
)
from socialnet.graph import EDGE_WEIGHT, NO_PATH, PathResult, SocialGraph

logger.disable("socialnet")

__all__ = [
    "EDGE_WEIGHT",
    "GraphConfig",
    "NO_PATH",
    "PathResult",
    "SelfFriendshipError",
    "SocialGraph",
    "SocialGraphError",
    "UserNotFoundError",
]
