"""Authentication session value objects and their persisted key names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

TOKEN_KEY = "auth_token"
USERNAME_KEY = "username"
USER_ID_KEY = "user_id"

SESSION_KEYS: tuple[str, ...] = (TOKEN_KEY, USERNAME_KEY, USER_ID_KEY)


@dataclass(frozen=True)
class Identity:
    """Logged-in user as reported by the backend."""

    id: int = 0
    display_name: str = ""

    @property
    def is_empty(self) -> bool:
        return self.id == 0 and not self.display_name


@dataclass(frozen=True)
class Session:
    """Bearer token plus the identity it belongs to.

    The token is empty exactly when the identity is empty; ``__post_init__``
    rejects any other combination so a half-populated session cannot exist.
    """

    token: str = ""
    identity: Identity = field(default_factory=Identity)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str):
            raise TypeError("Session.token must be a string.")
        if not self.token and not self.identity.is_empty:
            raise ValueError("Logged-out session cannot carry an identity.")
        if self.token and self.identity.is_empty:
            raise ValueError("Authenticated session requires an identity.")

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @classmethod
    def empty(cls) -> "Session":
        return cls()

    @classmethod
    def from_login_payload(cls, payload: Mapping) -> "Session":
        """Build a session from ``{"token": ..., "user": {"id", "username"}}``."""
        if not isinstance(payload, Mapping):
            raise ValueError("Login response must be an object.")
        token = payload.get("token")
        if not isinstance(token, str) or not token:
            raise ValueError("Login response is missing a token.")
        user = payload.get("user")
        if not isinstance(user, Mapping):
            raise ValueError("Login response is missing the user object.")
        identity = Identity(
            id=parse_user_id(user.get("id")),
            display_name=str(user.get("username") or ""),
        )
        if identity.is_empty:
            raise ValueError("Login response user has no id or username.")
        return cls(token=token, identity=identity)


def parse_user_id(value: object) -> int:
    """Coerce persisted/remote ids to int; anything unparsable becomes 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return 0
    return 0


def format_user_id(value: int) -> str:
    return str(int(value))


def session_from_storage(
    token: Optional[str], username: Optional[str], user_id: Optional[str]
) -> Session:
    """Rebuild a session from raw persisted values.

    A missing token, or a token stored without any identity, reads as logged out.
    """
    if not token:
        return Session.empty()
    identity = Identity(id=parse_user_id(user_id), display_name=username or "")
    if identity.is_empty:
        return Session.empty()
    return Session(token=token, identity=identity)


__all__ = [
    "Identity",
    "SESSION_KEYS",
    "Session",
    "TOKEN_KEY",
    "USERNAME_KEY",
    "USER_ID_KEY",
    "format_user_id",
    "parse_user_id",
    "session_from_storage",
]
