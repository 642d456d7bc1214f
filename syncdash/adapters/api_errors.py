"""Typed failures raised by the HTTP transport and surfaced by ``ApiGateway``."""

from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.payload = payload
        self.context = context

    @property
    def is_auth_rejection(self) -> bool:
        """True when the backend refused the bearer token (HTTP 401)."""
        return self.status == 401


class ApiClientError(ApiError):
    """HTTP 4xx from the sync backend."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        code: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            status=status,
            code=code,
            payload=payload,
            context=context,
        )


class ApiServerError(ApiError):
    """HTTP 5xx from the sync backend."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            status=status,
            payload=payload,
            context=context,
        )


class ApiTimeoutError(ApiError):
    """No response arrived within the request timeout."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


class ApiConnectionError(ApiError):
    """The backend could not be reached (refused, DNS, reset)."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of error payload without raising."""
    try:
        return resp.json()
    except Exception:
        snippet = getattr(resp, "text", "")
        if not snippet:
            return None
        return snippet[:400]


def server_message(payload: Any) -> Optional[str]:
    """Return the backend-supplied ``message`` of an error body, if any.

    The backend answers failures with ``{"code": ..., "message": ...}``; only
    that field counts as a server message.
    """
    if isinstance(payload, dict):
        value = payload.get("message")
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def extract_error_code(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("code", "error", "error_code"):
            value = payload.get(key)
            if value is None:
                continue
            if isinstance(value, str):
                return value
            return str(value)
    return None


__all__ = [
    "ApiClientError",
    "ApiConnectionError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "extract_error_code",
    "parse_error_payload",
    "server_message",
]
