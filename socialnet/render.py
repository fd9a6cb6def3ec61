"""Text rendering for graph query results.

Pure string builders for the console demo. Nothing here prints; callers
decide where the text goes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from socialnet.graph import PathResult

if TYPE_CHECKING:
    from socialnet.graph import SocialGraph


def _quoted_set(users: Iterable[str]) -> str:
    """Render ids as {'a', 'b'} in ascending order."""
    return "{" + ", ".join(f"'{u}'" for u in sorted(users)) + "}"


def format_friends(user_id: str, friends: Iterable[str]) -> str:
    """Example: "'Charlie's friends: {'Alice', 'David', 'Eve'}" """
    return f"'{user_id}'s friends: {_quoted_set(friends)}"


def format_mutual_friends(
    user_a: str, user_b: str, mutual: Iterable[str]
) -> str:
    return (
        f"Mutual friends between '{user_a}' and '{user_b}': "
        f"{_quoted_set(mutual)}"
    )


def format_suggestions(
    user_id: str, suggestions: list[tuple[str, int]]
) -> str:
    """Render ranked suggestions, one candidate per line."""
    lines = [f"Friend suggestions for '{user_id}':"]
    if not suggestions:
        lines.append("  None.")
    for candidate, score in suggestions:
        lines.append(f"  - '{candidate}' (via {score} connection(s))")
    return "\n".join(lines)


def format_path(label: str, start: str, end: str, result: PathResult) -> str:
    """Example: "BFS path from 'Alice' to 'Eve' (distance 2): Alice -> Charlie -> Eve"

    The NO_PATH sentinel renders as "no path found" rather than a distance.
    """
    prefix = f"{label} path from '{start}' to '{end}'"
    if not result.found:
        return f"{prefix}: no path found"
    return f"{prefix} (distance {result.distance}): " + " -> ".join(result.path)


def render_graph(graph: "SocialGraph") -> str:
    """Render the whole adjacency structure, one user per line."""
    lines = ["--- Social Network Graph ---"]
    if len(graph) == 0:
        lines.append("The network is empty.")
    for user in graph.users():
        lines.append(
            f"'{user}' is friends with: {_quoted_set(graph.get_friends(user))}"
        )
    lines.append("----------------------------")
    return "\n".join(lines)
