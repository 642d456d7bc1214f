"""Router shell: turns locations into navigation events for the tab strip.

It also implements :class:`~syncdash.domain.ports.NavigatorPort`, which is how
the credential store and the gateway force the login view.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..domain.ports import NavigatorPort
from ..domain.routes import RouteRegistry
from ..domain.views import NavigationEvent
from ..viewmodels.view_session_vm import ViewSessionVM


class Router(NavigatorPort):
    """Tracks the current location and feeds ``ViewSessionVM``."""

    def __init__(
        self,
        routes: RouteRegistry,
        tabs: ViewSessionVM,
        *,
        initial_path: Optional[str] = None,
        on_navigate: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Create the router.

        Args:
            routes: Route table used to resolve locations.
            tabs: Tab manager receiving every resolved navigation.
            initial_path: Location the process starts at; defaults to the
                tab manager's home path. It is not opened as a tab, call
                :meth:`push` for that.
            on_navigate: Host hook performing the actual page change.
        """
        self._log = logging.getLogger(__name__)
        self.routes = routes
        self.tabs = tabs
        self.on_navigate = on_navigate
        self._current_path = routes.redirect_target(initial_path or tabs.home_path)
        self.history: List[str] = []

    @property
    def current_path(self) -> str:
        return self._current_path

    def push(self, path: str) -> NavigationEvent:
        """In-app navigation; opens (or re-activates) the view's tab.

        Raises:
            UseCaseError: ``ROUTE_NOT_FOUND`` for unknown locations.
        """
        event = self.routes.resolve(path)
        self._go(event)
        return event

    def replace(self, path: str) -> None:
        """Forced navigation (logout, rejected credentials)."""
        event = self.routes.resolve(path)
        self._log.info("Forced navigation to %s", event.path)
        self._go(event)

    def close_tab(self, path: str) -> Optional[str]:
        """Close a tab and follow the tab manager's navigation instruction."""
        target = self.tabs.close(path)
        if target is not None:
            self.push(target)
        return target

    def close_other_tabs(self, keep_path: str) -> None:
        self.tabs.close_others(keep_path)
        if keep_path != self._current_path:
            self.push(keep_path)

    def close_all_tabs(self) -> None:
        self.tabs.close_all()
        self.push(self.tabs.active_path)

    def _go(self, event: NavigationEvent) -> None:
        self._current_path = event.path
        self.history.append(event.path)
        self.tabs.open(event)
        if self.on_navigate:
            self.on_navigate(event.path)


__all__ = ["Router"]
