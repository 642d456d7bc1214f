"""Route table for the dashboard and path-to-view resolution.

The router shell asks this registry to turn a location into a
:class:`~syncdash.domain.views.NavigationEvent`. Capability flags
(``participates_in_tabs``/``closable``) are declared per route here so the tab
manager never has to compare literal path strings.
"""

from __future__ import annotations


from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .ports import UseCaseError
from .views import HOME_NAME, HOME_PATH, HOME_TITLE, LOGIN_PATH, NavigationEvent


@dataclass(frozen=True)
class RouteRule:
    """Definition of one navigable view."""

    pattern: str
    name: str
    title: str
    icon: str = ""
    hidden: bool = False
    pinned: bool = False

    @property
    def segments(self) -> Tuple[str, ...]:
        return _split(self.pattern)

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Return path params when ``path`` matches this rule, else ``None``."""
        parts = _split(path)
        pattern = self.segments
        if len(parts) != len(pattern):
            return None
        params: Dict[str, str] = {}
        for expected, actual in zip(pattern, parts):
            if expected.startswith(":"):
                if not actual:
                    return None
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


class RouteRegistry:
    """Ordered route table with redirects."""

    def __init__(
        self,
        rules: Iterable[RouteRule],
        redirects: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._rules: Tuple[RouteRule, ...] = tuple(rules)
        self._redirects: Dict[str, str] = {
            _normalize(src): _normalize(dst) for src, dst in (redirects or {}).items()
        }
        names = [rule.name for rule in self._rules]
        if len(set(names)) != len(names):
            raise ValueError("Route names must be unique.")

    @classmethod
    def default(
        cls, *, home_path: str = HOME_PATH, login_path: str = LOGIN_PATH
    ) -> "RouteRegistry":
        """Build the dashboard's route table."""
        rules = (
            RouteRule(home_path, HOME_NAME, HOME_TITLE, icon="Odometer", pinned=True),
            RouteRule("/subscription", "Subscription", "Quick Subscribe", icon="Star"),
            RouteRule("/video-sources", "VideoSources", "Video Sources", icon="FolderOpened"),
            RouteRule("/videos", "Videos", "Videos", icon="VideoPlay"),
            RouteRule("/videos/:id", "VideoDetail", "Video Detail", hidden=True),
            RouteRule("/tasks", "TaskManager", "Tasks", icon="List"),
            RouteRule("/sync-logs", "SyncLogs", "Sync Logs", icon="Clock"),
            RouteRule("/config", "Config", "Settings", icon="Setting"),
            RouteRule("/logs", "Logs", "Logs", icon="Document"),
            RouteRule(login_path, "Login", "Login", hidden=True),
        )
        return cls(rules, redirects={"/": home_path})

    def rules(self) -> Iterable[RouteRule]:
        return self._rules

    def menu(self) -> Tuple[RouteRule, ...]:
        """Routes shown in the side menu (non-hidden, in declaration order)."""
        return tuple(rule for rule in self._rules if not rule.hidden)

    def rule_for(self, path: str) -> Tuple[RouteRule, Dict[str, str]]:
        target = self.redirect_target(path)
        for rule in self._rules:
            params = rule.match(target)
            if params is not None:
                return rule, params
        raise UseCaseError("ROUTE_NOT_FOUND", f"No view registered for {path!r}.")

    def redirect_target(self, path: str) -> str:
        normalized = _normalize(path)
        return self._redirects.get(normalized, normalized)

    def resolve(self, path: str) -> NavigationEvent:
        """Turn a location into the navigation event the tab manager consumes."""
        rule, _params = self.rule_for(path)
        return NavigationEvent(
            path=self.redirect_target(path),
            name=rule.name,
            title=rule.title,
            participates_in_tabs=not rule.hidden,
            closable=not rule.pinned,
        )


def _normalize(path: str) -> str:
    text = str(path or "").strip()
    # Drop query/fragment; tabs are keyed by path only.
    for sep in ("?", "#"):
        if sep in text:
            text = text.split(sep, 1)[0]
    parts = _split(text)
    return "/" + "/".join(parts)


def _split(path: str) -> Tuple[str, ...]:
    return tuple(part for part in str(path or "").split("/") if part)


__all__ = ["RouteRegistry", "RouteRule"]
