"""NiceGUI bindings for the notifier port and browser navigation.

Only used when the runtime is hosted inside a NiceGUI page; headless callers
and tests pass their own notifier/navigation callables instead.
"""

from __future__ import annotations

import logging

from nicegui import ui

from syncdash.domain.ports import NotifierPort


class NiceGuiNotifier(NotifierPort):
    """Show gateway errors as negative NiceGUI notifications."""

    def __init__(self, *, color: str = "negative", close_button: str = "OK") -> None:
        self.color = color
        self.close_button = close_button

    def show(self, message: str) -> None:
        ui.notify(message, color=self.color, close_button=self.close_button)


def navigate_to(path: str) -> None:
    """Full browser navigation; wired as ``Router(on_navigate=...)``."""
    logging.getLogger(__name__).debug("navigate -> %s", path)
    ui.navigate.to(path)


__all__ = ["NiceGuiNotifier", "navigate_to"]
