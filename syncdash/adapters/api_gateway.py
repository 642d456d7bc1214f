"""Request/response interception shared by every outbound dashboard call.

``ApiGateway`` sits between endpoint wrappers (``user_rest.py`` and friends)
and :class:`~syncdash.adapters.http_client.HttpTransport`:

* request phase: attach ``Authorization: Bearer <token>`` when the session
  holds a token;
* success: unwrap ``{code, message, data}`` envelopes to ``data``;
* failure: on HTTP 401 outside the login view tear the session down and
  force-navigate to login, otherwise show the derived message through the
  notifier. The original exception is re-raised in every failure case.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from syncdash.adapters.api_errors import ApiError, server_message
from syncdash.domain.ports import NavigatorPort, NotifierPort, SessionSource, TransportPort
from syncdash.domain.views import LOGIN_PATH

FALLBACK_ERROR_MESSAGE = "Request failed"


def unwrap_envelope(payload: Any) -> Any:
    """Return ``payload["data"]`` for ``{code, message, ...}`` envelopes.

    Both keys must be present. A plain payload that happens to carry ``code``
    and ``message`` keys is unwrapped as well; callers whose data looks like
    that must nest it.
    """
    if isinstance(payload, dict) and "code" in payload and "message" in payload:
        return payload.get("data")
    return payload


def derive_error_message(exc: BaseException) -> str:
    """Server message, then transport text, then a fixed fallback."""
    message = server_message(getattr(exc, "payload", None))
    if message:
        return message
    text = str(exc).strip()
    if text:
        return text
    return FALLBACK_ERROR_MESSAGE


class ApiGateway:
    """Single choke point for authenticated REST calls."""

    def __init__(
        self,
        transport: TransportPort,
        *,
        session: SessionSource,
        navigator: NavigatorPort,
        notifier: NotifierPort,
        login_path: str = LOGIN_PATH,
    ) -> None:
        self.transport = transport
        self.session = session
        self.navigator = navigator
        self.notifier = notifier
        self.login_path = login_path
        self._log = logging.getLogger(__name__)

    # ---- Public verbs ----
    def get(self, url: str, *, params: Optional[Mapping[str, Any]] = None, **config: Any) -> Any:
        return self.request("GET", url, params=params, **config)

    def post(self, url: str, body: Any = None, **config: Any) -> Any:
        return self.request("POST", url, json_body=body, **config)

    def put(self, url: str, body: Any = None, **config: Any) -> Any:
        return self.request("PUT", url, json_body=body, **config)

    def delete(self, url: str, *, params: Optional[Mapping[str, Any]] = None, **config: Any) -> Any:
        return self.request("DELETE", url, params=params, **config)

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        **config: Any,
    ) -> Any:
        """Send one call through the interceptors and return the unwrapped body.

        Raises:
            ApiError: Whatever the transport raised, after failure handling.
        """
        try:
            payload = self.transport.request(
                method,
                url,
                params=params,
                json_body=json_body,
                headers=self._auth_headers(headers),
                **config,
            )
        except ApiError as exc:
            self._handle_failure(exc)
            raise
        return unwrap_envelope(payload)

    # ---- Interceptors ----
    def _auth_headers(self, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        merged = dict(headers or {})
        token = self.session.token
        if token:
            merged["Authorization"] = f"Bearer {token}"
        return merged

    def _handle_failure(self, exc: ApiError) -> None:
        message = derive_error_message(exc)
        if exc.is_auth_rejection and self.navigator.current_path != self.login_path:
            self._force_logout()
            return
        self._log.warning("Request failed (%s): %s", exc.context or "-", message)
        self.notifier.show(message)

    def _force_logout(self) -> None:
        """Drop the session and redirect once; later 401s find us on login."""
        self._log.info("Credentials rejected; redirecting to %s", self.login_path)
        self.session.invalidate()
        self.navigator.replace(self.login_path)


__all__ = [
    "ApiGateway",
    "FALLBACK_ERROR_MESSAGE",
    "derive_error_message",
    "unwrap_envelope",
]
