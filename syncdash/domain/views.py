"""Navigable view descriptors shared by the router shell and the tab manager."""

from __future__ import annotations

from dataclasses import dataclass

HOME_PATH = "/dashboard"
HOME_NAME = "Dashboard"
HOME_TITLE = "Dashboard"
LOGIN_PATH = "/login"


@dataclass(frozen=True)
class NavigationEvent:
    """One resolved navigation, as delivered by the router.

    Attributes:
        path: Concrete location (``/videos/42``), unique key for a tab.
        name: Logical view identifier used as keep-alive cache key.
        title: Display title for the tab strip.
        participates_in_tabs: ``False`` for hidden views that never get a tab.
        closable: ``False`` for pinned views such as the home dashboard.
    """

    path: str
    name: str
    title: str = ""
    participates_in_tabs: bool = True
    closable: bool = True


@dataclass(frozen=True)
class ViewTab:
    """Open tab entry; ``path`` is unique across the tab strip."""

    path: str
    title: str
    name: str
    closable: bool = True

    @classmethod
    def from_event(cls, event: NavigationEvent, *, home_path: str = HOME_PATH) -> "ViewTab":
        return cls(
            path=event.path,
            title=event.title,
            name=event.name,
            closable=event.closable and event.path != home_path,
        )


def home_tab(home_path: str = HOME_PATH) -> ViewTab:
    """Seed tab every view session starts with."""
    return ViewTab(path=home_path, title=HOME_TITLE, name=HOME_NAME, closable=False)


__all__ = [
    "HOME_NAME",
    "HOME_PATH",
    "HOME_TITLE",
    "LOGIN_PATH",
    "NavigationEvent",
    "ViewTab",
    "home_tab",
]
