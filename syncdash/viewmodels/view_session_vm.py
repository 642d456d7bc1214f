"""Open-tab strip state and keep-alive cache eligibility.

Call context:
    ``syncdash.app.router.Router`` calls :meth:`ViewSessionVM.open` for every
    resolved navigation and forwards close requests from the tab strip. Close
    operations return the path the router should navigate to, if any.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.views import HOME_PATH, NavigationEvent, ViewTab, home_tab


@dataclass(frozen=True)
class ViewSessionSnapshot:
    """Immutable view of the tab strip handed to ``on_change`` listeners."""

    tabs: Tuple[ViewTab, ...]
    active_path: str
    cached_views: Tuple[str, ...]


class ViewSessionVM:
    """
    Tabs, active path and cache set for the main layout.

    The home tab is seeded at construction and can never be closed, so the
    strip is never empty. ``cached_views`` always equals the logical names of
    the open tabs, in first-opened order.
    """

    def __init__(
        self,
        *,
        home_path: str = HOME_PATH,
        on_change: Optional[Callable[[ViewSessionSnapshot], None]] = None,
    ) -> None:
        self.home_path = home_path
        self.on_change = on_change
        self.tabs: List[ViewTab] = []
        self.active_path: str = home_path
        self.cached_views: List[str] = []
        self._seed()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def open(self, view: NavigationEvent) -> None:
        """Add a tab for ``view`` if needed and make it active."""
        if not view.participates_in_tabs:
            return
        tab = self.tab_for(view.path)
        if tab is None:
            tab = ViewTab.from_event(view, home_path=self.home_path)
            self.tabs.append(tab)
        if tab.name and tab.name not in self.cached_views:
            self.cached_views.append(tab.name)
        self.active_path = view.path
        self._notify()

    def close(self, path: str) -> Optional[str]:
        """Close one tab; returns the path to navigate to when it was active."""
        index = self._index_of(path)
        if index is None:
            return None
        tab = self.tabs[index]
        if not tab.closable:
            return None

        del self.tabs[index]
        self._rebuild_cache()

        target: Optional[str] = None
        if self.active_path == path and self.tabs:
            # slide right, or left when the closed tab was the last one
            target = self.tabs[min(index, len(self.tabs) - 1)].path
            self.active_path = target
        self._notify()
        return target

    def close_others(self, keep_path: str) -> None:
        """Keep ``keep_path`` and pinned tabs; ``keep_path`` becomes active."""
        self.tabs = [tab for tab in self.tabs if tab.path == keep_path or not tab.closable]
        self._rebuild_cache()
        self.active_path = keep_path
        self._notify()

    def close_all(self) -> None:
        """Keep only pinned tabs and return to the home view."""
        self.tabs = [tab for tab in self.tabs if not tab.closable]
        self._rebuild_cache()
        self.active_path = self.home_path
        self._notify()

    def set_active(self, path: str) -> None:
        """Overwrite the active path; callers ``open`` new destinations first."""
        self.active_path = path
        self._notify()

    def reset(self) -> None:
        """Return to the seed state (home tab only)."""
        self._seed()
        self._notify()

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------
    def tab_for(self, path: str) -> Optional[ViewTab]:
        index = self._index_of(path)
        return None if index is None else self.tabs[index]

    def snapshot(self) -> ViewSessionSnapshot:
        return ViewSessionSnapshot(
            tabs=tuple(self.tabs),
            active_path=self.active_path,
            cached_views=tuple(self.cached_views),
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "tabs": [
                {"path": t.path, "title": t.title, "name": t.name, "closable": t.closable}
                for t in self.tabs
            ],
            "active_path": self.active_path,
            "cached_views": list(self.cached_views),
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _seed(self) -> None:
        self.tabs = [home_tab(self.home_path)]
        self.active_path = self.home_path
        self._rebuild_cache()

    def _index_of(self, path: str) -> Optional[int]:
        for idx, tab in enumerate(self.tabs):
            if tab.path == path:
                return idx
        return None

    def _rebuild_cache(self) -> None:
        names: List[str] = []
        for tab in self.tabs:
            if tab.name and tab.name not in names:
                names.append(tab.name)
        self.cached_views = names

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self.snapshot())


__all__ = ["ViewSessionSnapshot", "ViewSessionVM"]
