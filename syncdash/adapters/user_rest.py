from __future__ import annotations

from typing import Any, Dict, List, Optional

from syncdash.adapters.api_gateway import ApiGateway
from syncdash.domain.ports import AuthPort


class UserRestAdapter(AuthPort):
    """User and authentication endpoints of the sync backend."""

    def __init__(self, gateway: ApiGateway) -> None:
        self.gateway = gateway

    def login(self, username: str, password: str) -> Dict[str, Any]:
        data = self.gateway.post(
            "/auth/login", {"username": username, "password": password}
        )
        if not isinstance(data, dict):
            raise RuntimeError("login: expected object response")
        return data

    def get_current_user(self) -> Dict[str, Any]:
        data = self.gateway.get("/users/me")
        if not isinstance(data, dict):
            raise RuntimeError("users/me: expected object response")
        return data

    def list_users(self) -> List[Dict[str, Any]]:
        data = self.gateway.get("/users")
        if not isinstance(data, list):
            raise RuntimeError("users: expected list response")
        return [entry for entry in data if isinstance(entry, dict)]

    def create_user(self, username: str, password: str) -> Dict[str, Any]:
        return self.gateway.post("/users", {"username": username, "password": password})

    def update_user(
        self,
        user_id: int,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if username is not None:
            body["username"] = username
        if password is not None:
            body["password"] = password
        return self.gateway.put(f"/users/{int(user_id)}", body)

    def delete_user(self, user_id: int) -> None:
        self.gateway.delete(f"/users/{int(user_id)}")

    def change_password(self, old_password: str, new_password: str) -> None:
        self.gateway.put(
            "/users/me/password",
            {"old_password": old_password, "new_password": new_password},
        )
