from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Protocol

Path = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class KeyValueStorePort(Protocol):
    """Persistent string key-value storage that survives process restarts.

    Reads never raise; an unreadable backing store looks like an empty one.
    """

    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class NavigatorPort(Protocol):
    """Router side of forced navigation (logout and rejected credentials)."""

    @property
    def current_path(self) -> Path: ...
    def replace(self, path: Path) -> None: ...


class NotifierPort(Protocol):
    """User-visible error channel (toast/snackbar)."""

    def show(self, message: str) -> None: ...


class TransportPort(Protocol):
    """Raw HTTP transport. Raises ``ApiError`` subclasses on failure."""

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any: ...  # decoded JSON body or raw text


class AuthPort(Protocol):
    """Backend authentication endpoint used by the credential store."""

    def login(self, username: str, password: str) -> Dict: ...  # {"token", "user": {"id", "username"}}


class SessionSource(Protocol):
    """Authoritative session the gateway reads credentials from."""

    @property
    def token(self) -> str: ...
    def invalidate(self) -> None: ...
