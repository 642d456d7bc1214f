"""Runtime configuration for the dashboard client.

Values come from defaults, a flat mapping (``from_dict``, e.g. a JSON file),
or ``SYNCDASH_*`` environment variables (``from_env``).
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Optional

from ..domain.views import HOME_PATH, LOGIN_PATH
from ..utils.logging import env_requests_debug

_ENV_PREFIX = "SYNCDASH_"


@dataclass(frozen=True)
class DashboardConfig:
    """Typed runtime settings."""

    api_base_url: str = "/api"
    request_timeout_s: int = 60
    storage_dir: str = "."
    home_path: str = HOME_PATH
    login_path: str = LOGIN_PATH
    debug_logging: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DashboardConfig":
        """Build a config from flat keys; unknown keys are rejected."""
        if not isinstance(payload, Mapping):
            raise ValueError("Config payload must be a mapping of flat keys.")
        known = {f.name for f in fields(cls)}
        unknown = set(payload.keys()) - known
        if unknown:
            raise ValueError(f"Unsupported config keys: {', '.join(sorted(str(k) for k in unknown))}")
        updates = {key: _coerce(key, value) for key, value in payload.items()}
        return replace(cls(), **updates)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardConfig":
        env = os.environ if environ is None else environ
        payload = {}
        for f in fields(cls):
            value = env.get(_ENV_PREFIX + f.name.upper())
            if value is not None and value.strip():
                payload[f.name] = value
        config = cls.from_dict(payload)
        if "debug_logging" not in payload and env_requests_debug(env):
            config = replace(config, debug_logging=True)
        return config

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce(name: str, value: Any) -> Any:
    if name == "request_timeout_s":
        return _coerce_int(name, value)
    if name == "debug_logging":
        return _coerce_bool(value)
    if name in ("home_path", "login_path"):
        text = _coerce_str(name, value)
        return text if text.startswith("/") else f"/{text}"
    return _coerce_str(name, value)


def _coerce_str(name: str, value: Any) -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValueError(f"{name} must not be empty.")
    return text


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced <= 0:
        raise ValueError(f"{name} must be positive.")
    return coerced


__all__ = ["DashboardConfig"]
