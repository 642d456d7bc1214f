from __future__ import annotations

import pytest

from syncdash.adapters.api_errors import ApiClientError
from syncdash.adapters.storage_mock import StorageMemory
from syncdash.app.config import DashboardConfig
from syncdash.app.main import DashboardRuntime
from syncdash.domain.views import HOME_PATH, LOGIN_PATH
from syncdash.tests.unit.helpers import RecordingNotifier, StubTransport


def _runtime(*results, data=None):
    storage = StorageMemory(data=dict(data or {}))
    transport = StubTransport(results)
    notifier = RecordingNotifier()
    navigations = []
    runtime = DashboardRuntime(
        DashboardConfig(),
        notifier=notifier,
        storage=storage,
        transport=transport,
        on_navigate=navigations.append,
    )
    return runtime, storage, transport, notifier, navigations


def test_logged_out_start_lands_on_login():
    runtime, *_ = _runtime()

    assert runtime.start() == LOGIN_PATH


def test_restored_session_starts_on_requested_view():
    runtime, *_ = _runtime(data={"auth_token": "t", "username": "a", "user_id": "1"})

    assert runtime.start("/tasks") == "/tasks"
    assert runtime.tabs.active_path == "/tasks"


def test_login_then_browse_then_logout():
    runtime, storage, transport, _, navigations = _runtime(
        {"code": 0, "message": "ok", "data": {"token": "t1", "user": {"id": 9, "username": "eve"}}},
        {"code": 0, "message": "ok", "data": [{"id": 1}]},
    )
    runtime.start()

    runtime.login("eve", "pw")
    runtime.router.push("/videos")
    videos = runtime.gateway.get("/videos")

    assert videos == [{"id": 1}]
    assert transport.calls[1]["headers"]["Authorization"] == "Bearer t1"
    assert storage.data["auth_token"] == "t1"
    assert [t.path for t in runtime.tabs.tabs] == [HOME_PATH, "/videos"]

    runtime.credentials.logout()

    assert storage.data == {}
    assert runtime.router.current_path == LOGIN_PATH
    assert navigations[-1] == LOGIN_PATH
    assert [t.path for t in runtime.tabs.tabs] == [HOME_PATH]


def test_rejected_token_tears_down_session_once():
    unauthorized = ApiClientError("Request failed with status code 401", status=401)
    runtime, storage, _, notifier, navigations = _runtime(
        unauthorized,
        ApiClientError("Request failed with status code 401", status=401),
        data={"auth_token": "t", "username": "a", "user_id": "1"},
    )
    runtime.start()
    runtime.router.push("/videos")

    with pytest.raises(ApiClientError):
        runtime.gateway.get("/videos")
    with pytest.raises(ApiClientError):
        runtime.gateway.get("/tasks")

    assert storage.data == {}
    assert runtime.credentials.is_authenticated() is False
    assert navigations.count(LOGIN_PATH) == 1
    assert runtime.router.current_path == LOGIN_PATH
    assert [t.path for t in runtime.tabs.tabs] == [HOME_PATH]
    assert notifier.messages == ["Request failed with status code 401"]


def test_build_runtime_wires_nicegui_shell(monkeypatch):
    from syncdash.adapters import nicegui_shell
    from syncdash.app.main import build_runtime

    targets = []
    monkeypatch.setattr(nicegui_shell, "navigate_to", targets.append)

    runtime = build_runtime(DashboardConfig(), storage=StorageMemory())
    runtime.start()

    assert isinstance(runtime.gateway.notifier, nicegui_shell.NiceGuiNotifier)
    assert targets == [LOGIN_PATH]
