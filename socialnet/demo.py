"""Demo network and console entry point.

build_demo_graph() returns a fresh, fully populated graph on every call,
so tests and the demo never share state.

Usage:
    socialnet-demo            # print the scripted walkthrough
    socialnet-demo --verbose  # also emit engine debug logs on stderr
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from socialnet.config import GraphConfig
from socialnet.errors import UserNotFoundError
from socialnet.graph import SocialGraph
from socialnet.render import (
    format_friends,
    format_mutual_friends,
    format_path,
    format_suggestions,
    render_graph,
)


# ── Demo data ─────────────────────────────────────────────

DEMO_USERS: tuple[str, ...] = (
    "Alice", "Bob", "Charlie", "David",
    "Eve", "Frank", "Grace", "Heidi",  # Grace stays isolated
)

DEMO_FRIENDSHIPS: tuple[tuple[str, str], ...] = (
    ("Alice", "Bob"),
    ("Alice", "Charlie"),
    ("Bob", "David"),
    ("Charlie", "David"),
    ("Charlie", "Eve"),
    ("David", "Eve"),
    ("Eve", "Frank"),
    ("Frank", "Heidi"),
)


def build_demo_graph(config: GraphConfig | None = None) -> SocialGraph:
    """Build the eight-user demo network."""
    graph = SocialGraph(config)
    for user in DEMO_USERS:
        graph.add_user(user)
    for user_a, user_b in DEMO_FRIENDSHIPS:
        graph.add_friendship(user_a, user_b)
    return graph


# ── Walkthrough ───────────────────────────────────────────


def run_demo(graph: SocialGraph) -> list[str]:
    """Run every query against the graph and return the rendered output."""
    out = [render_graph(graph), ""]

    out.append("--- Get Friends ---")
    for user in ("Charlie", "Grace"):
        out.append(format_friends(user, graph.get_friends(user)))

    out.append("")
    out.append("--- Mutual Friends ---")
    for user_a, user_b in (("Alice", "David"), ("Bob", "Eve"), ("Alice", "Nobody")):
        try:
            mutual = graph.mutual_friends(user_a, user_b)
        except UserNotFoundError as e:
            out.append(f"Error: {e}")
            continue
        out.append(format_mutual_friends(user_a, user_b, mutual))

    out.append("")
    out.append("--- Suggest Friends ---")
    for user in ("Alice", "Bob", "Grace", "Heidi"):
        out.append(format_suggestions(user, graph.suggest_friends(user)))

    out.append("")
    out.append("--- Shortest Paths ---")
    for start, end in (
        ("Alice", "Eve"),
        ("Bob", "Heidi"),
        ("Alice", "Grace"),
        ("Alice", "Alice"),
    ):
        out.append(format_path("BFS", start, end,
                               graph.shortest_path_unweighted(start, end)))
        out.append(format_path("Dijkstra", start, end,
                               graph.shortest_path_weighted(start, end)))

    return out


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Social network graph demo")
    parser.add_argument("--verbose", action="store_true",
                        help="Log graph mutations and lookups to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("socialnet")

    graph = build_demo_graph(GraphConfig.from_env())
    logger.info(
        f"Demo graph built: {len(graph)} users, "
        f"{graph.friendship_count()} friendships"
    )
    print("\n".join(run_demo(graph)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
