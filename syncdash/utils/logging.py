"""Process-wide logging setup for dashboard hosts.

``DashboardConfig.debug_logging`` picks DEBUG or INFO; ``SYNCDASH_LOG_LEVEL``
and the ``SYNCDASH_DEBUG`` flags override it so an operator can raise or lower
verbosity without editing config files.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "SYNCDASH_LOG_LEVEL"
DEBUG_ENV_VARS = ("SYNCDASH_DEBUG_LOGGING", "SYNCDASH_DEBUG")

# HTTP plumbing that floods INFO with connection chatter
NOISY_LOGGERS = ("urllib3", "requests")


def parse_level(value: Optional[str], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``/``"10"`` into a level; anything unrecognised is ``fallback``."""
    text = (value or "").strip()
    if not text:
        return fallback
    try:
        return int(text)
    except ValueError:
        pass
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV_VAR)
    if explicit and explicit.strip():
        return parse_level(explicit)
    for flag in DEBUG_ENV_VARS:
        if (env.get(flag) or "").strip().lower() in {"1", "true", "yes", "on"}:
            return logging.DEBUG
    return None


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True if environment variables force DEBUG logging."""
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_logging(
    debug_enabled: bool = False, environ: Optional[Mapping[str, str]] = None
) -> int:
    """Install the root handler once and apply the effective level.

    Safe to call again after the config changes; only the levels move.
    Returns the effective root level.
    """
    level = env_level(environ)
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)

    quiet = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
    return level


__all__ = ["configure_logging", "env_level", "env_requests_debug", "parse_level"]
