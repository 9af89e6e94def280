""" Re-emit state store changes as Qt signals so widgets can refresh"""
from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import QObject, Signal

from core.exceptions import SubscriberCallbackError
from core.state.paths import StatePath
from core.state.store import StateStore


class StateEvents(QObject):
    state_changed = Signal(str)         # top-level key
    callback_failed = Signal(str, str)  # key, message

    def report_callback_error(self, error: SubscriberCallbackError) -> None:
        self.callback_failed.emit(error.key, str(error.original))


def bind_state_events(store: StateStore, events: StateEvents) -> Callable[[], None]:
    """Forward every top-level notification to ``events.state_changed``."""
    unsubscribers: list[Callable[[], None]] = []

    for path in StatePath.top_level_keys():
        key = path.value

        def _forward(_new: Any, _old: Any, key: str = key) -> None:
            events.state_changed.emit(key)

        unsubscribers.append(store.subscribe(path, _forward))

    def _unbind() -> None:
        while unsubscribers:
            unsubscribers.pop()()

    return _unbind


__all__ = ["StateEvents", "bind_state_events"]
