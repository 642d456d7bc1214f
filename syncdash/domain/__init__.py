"""Domain package exports for value objects and ports."""

from .ports import (
    AuthPort,
    KeyValueStorePort,
    NavigatorPort,
    NotifierPort,
    SessionSource,
    TransportPort,
    UseCaseError,
)
from .routes import RouteRegistry, RouteRule
from .session import SESSION_KEYS, Identity, Session
from .views import HOME_PATH, LOGIN_PATH, NavigationEvent, ViewTab, home_tab

__all__ = [
    "AuthPort",
    "HOME_PATH",
    "Identity",
    "KeyValueStorePort",
    "LOGIN_PATH",
    "NavigationEvent",
    "NavigatorPort",
    "NotifierPort",
    "RouteRegistry",
    "RouteRule",
    "SESSION_KEYS",
    "Session",
    "SessionSource",
    "TransportPort",
    "UseCaseError",
    "ViewTab",
    "home_tab",
]
