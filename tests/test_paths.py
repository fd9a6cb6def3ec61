"""Tests for shortest paths — BFS and the priority-queue search."""

import random

import pytest

from socialnet import NO_PATH, PathResult, SocialGraph, UserNotFoundError
from socialnet.demo import DEMO_USERS, build_demo_graph


# ── Fixtures ──────────────────────────────────────────────


@pytest.fixture
def demo() -> SocialGraph:
    return build_demo_graph()


@pytest.fixture(params=["unweighted", "weighted"])
def search(request, demo):
    """Either path algorithm, bound to the demo graph."""
    return getattr(demo, f"shortest_path_{request.param}")


def random_graph(seed: int, users: int = 30, edges: int = 40) -> SocialGraph:
    rng = random.Random(seed)
    g = SocialGraph()
    ids = [f"u{i:02d}" for i in range(users)]
    for u in ids:
        g.add_user(u)
    for _ in range(edges):
        a, b = rng.sample(ids, 2)
        g.add_friendship(a, b)
    return g


def is_valid_path(g: SocialGraph, path: list[str]) -> bool:
    return all(b in g.get_friends(a) for a, b in zip(path, path[1:]))


# ── Both algorithms ───────────────────────────────────────


class TestSharedContract:
    def test_self_path(self, search):
        for user in DEMO_USERS:
            assert search(user, user) == PathResult(0, [user])

    def test_isolated_self_path(self, search):
        assert search("Grace", "Grace") == PathResult(0, ["Grace"])

    def test_alice_eve(self, search):
        assert search("Alice", "Eve") == PathResult(2, ["Alice", "Charlie", "Eve"])

    def test_bob_heidi(self, search):
        result = search("Bob", "Heidi")
        assert result.distance == 4
        assert result.path == ["Bob", "David", "Eve", "Frank", "Heidi"]

    def test_direct_friends(self, search):
        assert search("Eve", "Frank") == PathResult(1, ["Eve", "Frank"])

    def test_no_path(self, search):
        result = search("Alice", "Grace")
        assert result.distance == NO_PATH
        assert result.path == []
        assert not result.found

    def test_unpacks(self, search):
        distance, path = search("Alice", "Eve")
        assert distance == 2
        assert path[0] == "Alice" and path[-1] == "Eve"

    def test_unknown_start(self, search):
        with pytest.raises(UserNotFoundError) as exc:
            search("Nobody", "Alice")
        assert exc.value.user_ids == ("Nobody",)

    def test_unknown_end(self, search):
        with pytest.raises(UserNotFoundError):
            search("Alice", "Nobody")

    def test_unknown_same_user(self, search):
        with pytest.raises(UserNotFoundError) as exc:
            search("Nobody", "Nobody")
        assert exc.value.user_ids == ("Nobody",)

    def test_reverse_has_same_distance(self, search):
        for a in DEMO_USERS:
            for b in DEMO_USERS:
                assert search(a, b).distance == search(b, a).distance

    def test_paths_follow_friendships(self, search, demo):
        for a in DEMO_USERS:
            for b in DEMO_USERS:
                result = search(a, b)
                if result.found:
                    assert result.path[0] == a
                    assert result.path[-1] == b
                    assert len(result.path) == result.distance + 1
                    assert is_valid_path(demo, result.path)

    def test_does_not_mutate(self, search, demo):
        before = {u: demo.get_friends(u) for u in demo.users()}
        search("Bob", "Heidi")
        search("Alice", "Grace")
        assert {u: demo.get_friends(u) for u in demo.users()} == before


# ── Agreement ─────────────────────────────────────────────


class TestAlgorithmsAgree:
    def test_demo_graph_all_pairs(self, demo):
        for a in DEMO_USERS:
            for b in DEMO_USERS:
                bfs = demo.shortest_path_unweighted(a, b)
                weighted = demo.shortest_path_weighted(a, b)
                assert bfs.distance == weighted.distance, (a, b)
                assert bfs.found == weighted.found

    @pytest.mark.parametrize("seed", range(10))
    def test_random_graphs(self, seed):
        g = random_graph(seed)
        for a in g.users():
            for b in g.users():
                bfs = g.shortest_path_unweighted(a, b)
                weighted = g.shortest_path_weighted(a, b)
                assert bfs.distance == weighted.distance, (seed, a, b)
                if bfs.found:
                    assert is_valid_path(g, weighted.path)
                    assert len(weighted.path) == weighted.distance + 1


# ── BFS specifics ─────────────────────────────────────────


class TestUnweighted:
    def test_ascending_tie_break(self):
        # Two equal routes: a-b-z and a-c-z. b is expanded first.
        g = SocialGraph()
        for u in ("a", "c", "b", "z"):
            g.add_user(u)
        g.add_friendship("a", "c")
        g.add_friendship("c", "z")
        g.add_friendship("a", "b")
        g.add_friendship("b", "z")
        assert g.shortest_path_unweighted("a", "z").path == ["a", "b", "z"]

    def test_long_chain(self):
        g = SocialGraph()
        ids = [f"n{i:03d}" for i in range(200)]
        for u in ids:
            g.add_user(u)
        for a, b in zip(ids, ids[1:]):
            g.add_friendship(a, b)
        result = g.shortest_path_unweighted(ids[0], ids[-1])
        assert result.distance == 199
        assert result.path == ids


# ── Weighted specifics ────────────────────────────────────


class TestWeighted:
    def test_cycle_takes_shorter_side(self):
        # Ring of six: 0-1-2-3-4-5-0. 0 → 4 is two hops via 5.
        g = SocialGraph()
        ids = [str(i) for i in range(6)]
        for u in ids:
            g.add_user(u)
        for i in range(6):
            g.add_friendship(ids[i], ids[(i + 1) % 6])
        assert g.shortest_path_weighted("0", "4") == PathResult(2, ["0", "5", "4"])

    def test_disconnected_components(self):
        g = SocialGraph()
        for u in ("a", "b", "c", "d"):
            g.add_user(u)
        g.add_friendship("a", "b")
        g.add_friendship("c", "d")
        assert g.shortest_path_weighted("a", "d") == PathResult.unreachable()

    def test_trace_stops_at_missing_parent(self):
        path = SocialGraph._trace({"b": "a", "a": None}, "x", "b")
        assert path == ["a", "b"]
