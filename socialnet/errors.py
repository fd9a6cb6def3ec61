"""Exceptions raised by the social graph engine."""

from __future__ import annotations


class SocialGraphError(Exception):
    """Base class for all socialnet errors."""
    pass


class UserNotFoundError(SocialGraphError, LookupError):
    """Raised when an operation references a user that was never added.

    ``user_ids`` holds every missing identifier, in argument order.
    """

    def __init__(self, *user_ids: str) -> None:
        self.user_ids: tuple[str, ...] = user_ids
        quoted = ", ".join(f"'{u}'" for u in user_ids)
        noun = "User" if len(user_ids) == 1 else "Users"
        super().__init__(f"{noun} not found: {quoted}")


class SelfFriendshipError(SocialGraphError, ValueError):
    """Raised when a user is linked to themself under the reject policy."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User '{user_id}' cannot befriend themself")
