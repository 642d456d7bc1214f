"""Composition root wiring the session, gateway, and tab strip together.

``DashboardRuntime`` owns exactly one instance of every collaborator for the
lifetime of the process. Hosts that render the dashboard (NiceGUI pages, a
terminal shell, tests) build one runtime and bind their views to its fields.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..adapters.api_gateway import ApiGateway
from ..adapters.http_client import HttpConfig, HttpTransport
from ..adapters.storage_local import StorageLocal
from ..adapters.user_rest import UserRestAdapter
from ..domain.ports import KeyValueStorePort, NotifierPort, TransportPort
from ..domain.routes import RouteRegistry
from ..domain.session import Session
from ..utils.logging import configure_logging
from ..viewmodels.credential_store import CredentialStore
from ..viewmodels.view_session_vm import ViewSessionVM
from .config import DashboardConfig
from .router import Router


class DashboardRuntime:
    """Create and hold the runtime objects derived from ``DashboardConfig``.

    Call chain:
        host -> ``DashboardRuntime(config, notifier=...)`` -> ``start()``; views
        then call ``router.push``/``router.close_tab`` and
        ``credentials.login``/``credentials.logout``.
    """

    def __init__(
        self,
        config: Optional[DashboardConfig] = None,
        *,
        notifier: NotifierPort,
        storage: Optional[KeyValueStorePort] = None,
        transport: Optional[TransportPort] = None,
        routes: Optional[RouteRegistry] = None,
        on_navigate: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Wire collaborators; any of them may be replaced (tests, other hosts).

        Args:
            config: Runtime settings; defaults to ``DashboardConfig()``.
            notifier: Error notification channel used by the gateway.
            storage: Session persistence; defaults to ``StorageLocal``.
            transport: HTTP transport; defaults to ``HttpTransport``.
            routes: Route table; defaults to the dashboard's table.
            on_navigate: Host hook performing page changes.
        """
        self._log = logging.getLogger(__name__)
        self.config = config or DashboardConfig()
        self.routes = routes or RouteRegistry.default(
            home_path=self.config.home_path, login_path=self.config.login_path
        )
        self.tabs = ViewSessionVM(home_path=self.config.home_path)
        self.router = Router(self.routes, self.tabs, on_navigate=on_navigate)
        self.storage = storage or StorageLocal(root_dir=self.config.storage_dir)
        self.credentials = CredentialStore(
            self.storage,
            navigator=self.router,
            login_path=self.config.login_path,
            on_change=self._on_session_change,
        )
        self.transport = transport or HttpTransport(
            HttpConfig(
                base_url=self.config.api_base_url,
                request_timeout_s=self.config.request_timeout_s,
            )
        )
        self.gateway = ApiGateway(
            self.transport,
            session=self.credentials,
            navigator=self.router,
            notifier=notifier,
            login_path=self.config.login_path,
        )
        self.users = UserRestAdapter(self.gateway)
        self.credentials.auth = self.users

    def start(self, path: Optional[str] = None) -> str:
        """Navigate to the first view; logged-out sessions land on login."""
        if not self.credentials.is_authenticated():
            self.router.replace(self.config.login_path)
        else:
            self.router.push(path or self.config.home_path)
        return self.router.current_path

    def login(self, username: str, password: str) -> Session:
        """Log in and continue to the home view."""
        session = self.credentials.login(username, password)
        self.router.push(self.config.home_path)
        return session

    def _on_session_change(self, session: Session) -> None:
        if not session.is_authenticated:
            # a cleared session never keeps the previous user's tabs
            self.tabs.reset()


def build_runtime(
    config: Optional[DashboardConfig] = None, **overrides
) -> DashboardRuntime:
    """Configure logging and build a runtime hosted in a NiceGUI page."""
    from ..adapters.nicegui_shell import NiceGuiNotifier, navigate_to

    config = config or DashboardConfig.from_env()
    configure_logging(config.debug_logging)
    overrides.setdefault("notifier", NiceGuiNotifier())
    overrides.setdefault("on_navigate", navigate_to)
    return DashboardRuntime(config, **overrides)


__all__ = ["DashboardRuntime", "build_runtime"]
