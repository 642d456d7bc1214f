"""Shared HTTP transport for the dashboard's REST calls.

This module provides a thin wrapper around ``requests.Session`` so every
outbound call shares base URL joining, timeout policy, default headers, and
the mapping of HTTP failures to typed ``ApiError`` exceptions.

Dependencies:
    - ``requests`` for network I/O.
    - ``syncdash.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``syncdash.app.main.DashboardRuntime``.
    - Used only by ``syncdash.adapters.api_gateway.ApiGateway``; endpoint
      wrappers never talk to the transport directly.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests
from requests import exceptions as req_exc

from syncdash.adapters.api_errors import (
    ApiClientError,
    ApiConnectionError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    extract_error_code,
    parse_error_payload,
)


@dataclass
class HttpConfig:
    """Base URL, timeout, and default header configuration.

    Attributes:
        base_url: Prefix joined with every relative request path.
        request_timeout_s: Timeout in seconds for a single request.
        headers: Headers sent with every request.
    """
    base_url: str = "/api"
    request_timeout_s: int = 60
    headers: Dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )


class HttpTransport:
    """Single-attempt requests wrapper returning decoded bodies.

    This class is intentionally transport-only: it does not know about
    credentials or response envelopes. Failed attempts are never retried;
    retry policy belongs to the caller.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        """Create a transport bound to one backend.

        Args:
            cfg: Shared base URL and timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()
        self._log = logging.getLogger(__name__)

    def make_url(self, url: str) -> str:
        """Join ``url`` with the configured base unless it is already absolute."""
        if url.startswith(("http://", "https://")):
            return url
        base = self.cfg.base_url.rstrip("/")
        path = url if url.startswith("/") else f"/{url}"
        return f"{base}{path}"

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        """Send one request and return its decoded body.

        Args:
            method: HTTP verb (``GET``, ``POST``, ``PUT``, ``DELETE``).
            url: Path relative to ``base_url`` or an absolute URL.
            params: Optional query parameter mapping.
            json_body: Optional payload serialized to JSON text.
            headers: Extra headers merged over the defaults.
            timeout: Optional timeout override in seconds.

        Returns:
            Decoded JSON body, raw text for non-JSON bodies, or ``None`` for an
            empty body.

        Raises:
            ApiClientError: For HTTP 4xx responses.
            ApiServerError: For HTTP 5xx responses.
            ApiTimeoutError: When no response arrives within the timeout.
            ApiConnectionError: When the backend cannot be reached.
            ApiError: For any other ``requests`` failure.
        """
        verb = method.upper()
        full_url = self.make_url(url)
        context = f"{verb} {full_url}"
        merged = dict(self.cfg.headers)
        merged.update(headers or {})
        data = None if json_body is None else json.dumps(json_body)
        self._log.debug("%s", context)
        try:
            resp = self.session.request(
                verb,
                full_url,
                params=dict(params) if params else None,
                data=data,
                headers=merged,
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except req_exc.Timeout as exc:
            raise ApiTimeoutError(f"Timeout contacting {full_url}", context=context) from exc
        except req_exc.ConnectionError as exc:
            raise ApiConnectionError(f"Could not connect to {full_url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc) or "Network Error", context=context) from exc

        self._ensure_ok(resp, context)
        return self._decode(resp)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _ensure_ok(resp: requests.Response, context: str) -> None:
        status = resp.status_code
        if status < 400:
            return
        payload = parse_error_payload(resp)
        message = f"Request failed with status code {status}"
        if status < 500:
            raise ApiClientError(
                message,
                status=status,
                code=extract_error_code(payload),
                payload=payload,
                context=context,
            )
        raise ApiServerError(message, status=status, payload=payload, context=context)

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        text = getattr(resp, "text", "")
        if not text:
            return None
        try:
            return resp.json()
        except ValueError:
            return text


__all__ = ["HttpConfig", "HttpTransport"]
