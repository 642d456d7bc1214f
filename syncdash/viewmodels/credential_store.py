"""Authentication session state for the dashboard.

Call context:
    ``syncdash.app.main.DashboardRuntime`` creates one store at startup (which
    restores the persisted session), hands it to ``ApiGateway`` as the session
    source, and binds the login view to :meth:`CredentialStore.login`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.ports import AuthPort, KeyValueStorePort, NavigatorPort, UseCaseError
from ..domain.session import (
    SESSION_KEYS,
    TOKEN_KEY,
    USERNAME_KEY,
    USER_ID_KEY,
    Session,
    format_user_id,
    session_from_storage,
)
from ..domain.views import LOGIN_PATH


class CredentialStore:
    """Owns the bearer token and user identity; persists them across restarts."""

    def __init__(
        self,
        storage: KeyValueStorePort,
        *,
        navigator: NavigatorPort,
        auth: Optional[AuthPort] = None,
        login_path: str = LOGIN_PATH,
        on_change: Optional[Callable[[Session], None]] = None,
    ) -> None:
        """Bind collaborators and restore the persisted session.

        Args:
            storage: Key-value store holding the three session fields.
            navigator: Router used for the post-logout redirect.
            auth: Login endpoint; may be attached later because the endpoint
                itself usually goes through a gateway reading this store.
            login_path: Location of the login view.
            on_change: Called with the new session after every mutation.
        """
        self._log = logging.getLogger(__name__)
        self.storage = storage
        self.navigator = navigator
        self.auth = auth
        self.login_path = login_path
        self.on_change = on_change
        self._session = Session.empty()
        self.restore()

    # ------------------------------------------------------------------
    # Reactive fields
    # ------------------------------------------------------------------
    @property
    def session(self) -> Session:
        return self._session

    @property
    def token(self) -> str:
        return self._session.token

    @property
    def display_name(self) -> str:
        return self._session.identity.display_name

    @property
    def user_id(self) -> int:
        return self._session.identity.id

    def is_authenticated(self) -> bool:
        return bool(self._session.token)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def restore(self) -> Session:
        """Load the persisted session; anything unreadable means logged out."""
        try:
            session = session_from_storage(
                self.storage.get(TOKEN_KEY),
                self.storage.get(USERNAME_KEY),
                self.storage.get(USER_ID_KEY),
            )
        except Exception as exc:
            self._log.warning("Session restore failed, starting logged out: %s", exc)
            session = Session.empty()
        self._set(session)
        return session

    def login(self, username: str, password: str) -> Session:
        """Authenticate and persist the new session.

        Raises:
            UseCaseError: ``LOGIN_FAILED`` when no auth endpoint is attached or
                the response lacks a token or user identity.
            ApiError: Transport failures, propagated unchanged.
        """
        if self.auth is None:
            raise UseCaseError("LOGIN_FAILED", "No authentication endpoint configured.")
        payload = self.auth.login(username, password)
        try:
            session = Session.from_login_payload(payload)
        except ValueError as exc:
            raise UseCaseError("LOGIN_FAILED", str(exc)) from exc

        self._set(session)
        self._persist(session)
        self._log.info("Logged in as %s", session.identity.display_name or "<unnamed>")
        return session

    def logout(self) -> None:
        """Clear the session and go to the login view (navigation always fires)."""
        self.invalidate()
        self.navigator.replace(self.login_path)

    def invalidate(self) -> None:
        """Clear memory and persisted fields without navigating."""
        was_authenticated = self.is_authenticated()
        self._set(Session.empty())
        self._clear_persisted()
        if was_authenticated:
            self._log.info("Session cleared")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _set(self, session: Session) -> None:
        changed = session != self._session
        self._session = session
        if changed and self.on_change:
            self.on_change(session)

    def _persist(self, session: Session) -> None:
        try:
            self.storage.set(TOKEN_KEY, session.token)
            self.storage.set(USERNAME_KEY, session.identity.display_name)
            self.storage.set(USER_ID_KEY, format_user_id(session.identity.id))
        except Exception as exc:
            self._log.warning("Could not persist session: %s", exc)

    def _clear_persisted(self) -> None:
        for key in SESSION_KEYS:
            try:
                self.storage.remove(key)
            except Exception as exc:
                self._log.warning("Could not clear persisted %s: %s", key, exc)


__all__ = ["CredentialStore"]
