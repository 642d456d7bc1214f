from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from syncdash.domain.views import HOME_PATH, NavigationEvent


class RecordingNavigator:
    def __init__(self, current_path: str = HOME_PATH) -> None:
        self._current_path = current_path
        self.replaced: List[str] = []

    @property
    def current_path(self) -> str:
        return self._current_path

    def replace(self, path: str) -> None:
        self.replaced.append(path)
        self._current_path = path


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def show(self, message: str) -> None:
        self.messages.append(message)


class StubTransport:
    """Returns (or raises) queued results in order and records each call."""

    def __init__(self, results: Sequence[Any] = ()) -> None:
        self._results = list(results)
        self.calls: List[Dict[str, Any]] = []

    def queue(self, *results: Any) -> None:
        self._results.extend(results)

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        **config: Any,
    ) -> Any:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "json_body": json_body,
                "headers": dict(headers or {}),
                "config": config,
            }
        )
        if not self._results:
            raise RuntimeError("No stub result configured")
        result = self._results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


class StubAuth:
    def __init__(self, response: Any = None, error: Optional[BaseException] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[tuple] = []

    def login(self, username: str, password: str) -> Any:
        self.calls.append((username, password))
        if self.error is not None:
            raise self.error
        return self.response


def view(path: str, name: str, title: str = "", *, hidden: bool = False, closable: bool = True) -> NavigationEvent:
    return NavigationEvent(
        path=path,
        name=name,
        title=title or name,
        participates_in_tabs=not hidden,
        closable=closable,
    )


__all__ = [
    "RecordingNavigator",
    "RecordingNotifier",
    "StubAuth",
    "StubTransport",
    "view",
]
