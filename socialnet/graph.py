"""Social graph — users, friendships, and connection queries.

An undirected adjacency graph keyed by user id. Provides mutual-friend
lookup, friend-of-friend suggestions, and shortest paths via BFS and a
priority-queue (Dijkstra-style) search with unit edge weights.
"""

from __future__ import annotations

import heapq
import math
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Iterator

from loguru import logger

from socialnet.config import GraphConfig
from socialnet.errors import SelfFriendshipError, UserNotFoundError


# ── Constants ─────────────────────────────────────────────

NO_PATH = -1      # Distance reported when end is unreachable from start
EDGE_WEIGHT = 1   # Every friendship costs one hop


# ── PathResult ────────────────────────────────────────────


@dataclass(frozen=True)
class PathResult:
    """Outcome of a shortest-path query.

    ``distance`` is the hop count, or NO_PATH with an empty ``path`` when
    the two users are disconnected. Unpacks as ``distance, path``.
    """
    distance: int
    path: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.distance != NO_PATH

    def __iter__(self) -> Iterator:
        return iter((self.distance, self.path))

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(NO_PATH, [])


# ── SocialGraph ───────────────────────────────────────────


class SocialGraph:
    """Undirected friendship graph held entirely in memory.

    Users are created with add_user() and linked with add_friendship().
    Neither can be removed. Every query that names an unknown user raises
    UserNotFoundError; queries never mutate the graph.
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self.config = config or GraphConfig()
        self._adjacency: dict[str, set[str]] = {}  # user_id → friend ids

    # ── Storage ───────────────────────────────────────────

    def add_user(self, user_id: str) -> None:
        """Register a user. Adding an existing user does nothing."""
        if user_id in self._adjacency:
            return
        self._adjacency[user_id] = set()
        logger.debug(f"User added: {user_id}")

    def add_friendship(self, user_a: str, user_b: str) -> None:
        """Link two existing users in both directions.

        Raises:
            UserNotFoundError: if either user is unknown. Nothing is linked.
            SelfFriendshipError: if user_a == user_b and the config rejects it.
        """
        self._require(user_a, user_b)

        if user_a == user_b:
            if self.config.self_friendship == "reject":
                raise SelfFriendshipError(user_a)
            logger.debug(f"Ignoring self-friendship for {user_a}")
            return

        self._adjacency[user_a].add(user_b)
        self._adjacency[user_b].add(user_a)
        logger.debug(f"Friendship added: {user_a} <-> {user_b}")

    def get_friends(self, user_id: str) -> frozenset[str]:
        """Get a snapshot of a user's direct friends."""
        self._require(user_id)
        return frozenset(self._adjacency[user_id])

    def has_user(self, user_id: str) -> bool:
        return user_id in self._adjacency

    def are_friends(self, user_a: str, user_b: str) -> bool:
        self._require(user_a, user_b)
        return user_b in self._adjacency[user_a]

    def users(self) -> list[str]:
        """All registered users, ascending."""
        return sorted(self._adjacency)

    def friendship_count(self) -> int:
        """Number of undirected friendships."""
        return sum(len(friends) for friends in self._adjacency.values()) // 2

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    # ── Queries ───────────────────────────────────────────

    def mutual_friends(self, user_a: str, user_b: str) -> frozenset[str]:
        """Get the users that both A and B are friends with.

        A and B do not have to be friends themselves.
        """
        self._require(user_a, user_b)
        return frozenset(self._adjacency[user_a] & self._adjacency[user_b])

    def suggest_friends(self, user_id: str) -> list[tuple[str, int]]:
        """Rank friend-of-friend candidates for a user.

        A candidate's score is the number of the user's friends it is
        reachable through. Existing friends and the user themself are never
        suggested.

        Returns:
            (candidate, score) pairs, score descending then id ascending.
        """
        self._require(user_id)
        direct = self._adjacency[user_id]

        counts: Counter[str] = Counter()
        for friend in direct:
            for candidate in self._adjacency[friend]:
                if candidate != user_id and candidate not in direct:
                    counts[candidate] += 1

        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    def shortest_path_unweighted(self, start: str, end: str) -> PathResult:
        """Find the fewest-hop path between two users (BFS).

        Each user's parent is recorded the first time it is discovered, and
        the search stops as soon as ``end`` is discovered. Neighbours are
        expanded in ascending id order, so ties between equal-length paths
        resolve deterministically.
        """
        self._require(start, end)
        if start == end:
            return PathResult(0, [start])

        parent: dict[str, str | None] = {start: None}
        queue: deque[str] = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in self._neighbors(current):
                if neighbor in parent:
                    continue
                parent[neighbor] = current
                if neighbor == end:
                    path = self._trace(parent, start, end)
                    return PathResult(len(path) - 1, path)
                queue.append(neighbor)

        return PathResult.unreachable()

    def shortest_path_weighted(self, start: str, end: str) -> PathResult:
        """Find the cheapest path between two users (Dijkstra).

        Every friendship weighs EDGE_WEIGHT, so on this graph the result
        agrees with shortest_path_unweighted() on distance. The frontier is
        a binary heap with lazy deletion: stale entries are skipped when
        popped instead of being decreased in place.
        """
        self._require(start, end)
        if start == end:
            return PathResult(0, [start])

        dist: dict[str, float] = {user: math.inf for user in self._adjacency}
        dist[start] = 0
        parent: dict[str, str | None] = {start: None}
        frontier: list[tuple[float, str]] = [(0, start)]

        while frontier:
            d, u = heapq.heappop(frontier)
            if d > dist[u]:
                continue  # stale
            if u == end:
                return PathResult(int(d), self._trace(parent, start, end))

            for v in self._neighbors(u):
                candidate = dist[u] + EDGE_WEIGHT
                if candidate < dist[v]:
                    dist[v] = candidate
                    parent[v] = u
                    heapq.heappush(frontier, (candidate, v))

        return PathResult.unreachable()

    # ── Internals ─────────────────────────────────────────

    def _require(self, *user_ids: str) -> None:
        """Raise UserNotFoundError naming every unknown id."""
        missing = [u for u in user_ids if u not in self._adjacency]
        if missing:
            # Same id passed twice should be reported once
            missing = list(dict.fromkeys(missing))
            logger.warning(f"Unknown user(s): {', '.join(missing)}")
            raise UserNotFoundError(*missing)

    def _neighbors(self, user_id: str) -> list[str]:
        return sorted(self._adjacency[user_id])

    @staticmethod
    def _trace(
        parent: dict[str, str | None], start: str, end: str
    ) -> list[str]:
        """Walk parent links back from end and return the path start → end.

        Stops early if a user other than start has no recorded parent.
        """
        path = [end]
        current = end
        while current != start:
            previous = parent.get(current)
            if previous is None:
                break
            path.append(previous)
            current = previous
        path.reverse()
        return path
