from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from threading import RLock
from typing import Any, Callable

from core.events.signal import Signal
from core.exceptions import KeyPathError, SubscriberCallbackError
from core.state.defaults import build_default_state
from core.state.paths import PathLike, path_key, split_path

logger = logging.getLogger(__name__)

StateCallback = Callable[[Any, Any], None]
CallbackErrorSink = Callable[[SubscriberCallbackError], None]


class StateStore:
    """
    Single mutable application state tree with per-key subscriptions.

    ``set`` notifies subscribers of the exact path with ``(new, old)`` and, for
    nested paths, subscribers of the top-level key with ``(top_value, None)``.
    Dispatch is synchronous; a failing subscriber is logged and handed to the
    error sink, never raised to the writer.
    """

    def __init__(
        self,
        state: dict[str, Any],
        on_callback_error: CallbackErrorSink | None = None,
    ) -> None:
        self._state = state
        self._subscribers: dict[str, Signal[Any]] = {}
        self._on_callback_error = on_callback_error
        self._lock: RLock = RLock()

    # --------------------------------------------------------------
    # Reads
    # --------------------------------------------------------------

    def get(self, path: PathLike) -> Any:
        with self._lock:
            current: Any = self._state
            for segment in split_path(path):
                if not isinstance(current, Mapping):
                    return None
                current = current.get(segment)
                if current is None:
                    return None
            return current

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._state)

    # --------------------------------------------------------------
    # Writes
    # --------------------------------------------------------------

    def set(self, path: PathLike, value: Any) -> None:
        key = path_key(path)
        segments = split_path(key)
        if any(not segment for segment in segments):
            raise KeyPathError(key, "empty path segment")

        with self._lock:
            parent = self._resolve_parent(key, segments)
            last = segments[-1]
            old_value = parent.get(last)
            parent[last] = value
            top_key = segments[0]
            top_value = self._state.get(top_key)

        self._notify(key, value, old_value)
        if len(segments) > 1:
            self._notify(top_key, top_value, None)

    def _resolve_parent(self, key: str, segments: tuple[str, ...]) -> MutableMapping[str, Any]:
        current: Any = self._state
        for segment in segments[:-1]:
            if not isinstance(current, Mapping) or segment not in current:
                raise KeyPathError(key)
            current = current[segment]
        if not isinstance(current, MutableMapping):
            raise KeyPathError(key, "parent is not a container")
        return current

    # --------------------------------------------------------------
    # Subscriptions
    # --------------------------------------------------------------

    def subscribe(self, key: PathLike, callback: StateCallback) -> Callable[[], None]:
        name = path_key(key)
        with self._lock:
            signal = self._subscribers.get(name)
            if signal is None:
                signal = Signal(on_error=self._error_reporter(name))
                self._subscribers[name] = signal
            return signal.connect(callback)

    def subscriber_count(self, key: PathLike) -> int:
        with self._lock:
            signal = self._subscribers.get(path_key(key))
            return len(signal) if signal is not None else 0

    def _notify(self, key: str, new_value: Any, old_value: Any) -> None:
        with self._lock:
            signal = self._subscribers.get(key)
        if signal is not None:
            signal.emit(new_value, old_value)

    def _error_reporter(self, key: str) -> Callable[[Callable[..., Any], Exception], None]:
        def _report(callback: Callable[..., Any], exc: Exception) -> None:
            error = SubscriberCallbackError(key, callback, exc)
            logger.error("Error in state subscriber for %s: %s", key, exc, exc_info=exc)
            if self._on_callback_error is None:
                return
            try:
                self._on_callback_error(error)
            except Exception:
                logger.exception("Error sink failed for state subscriber %s", key)

        return _report


def create_state_store(
    initial: Mapping[str, Any] | None = None,
    on_callback_error: CallbackErrorSink | None = None,
) -> StateStore:
    state = build_default_state()
    if initial:
        state.update(initial)
    return StateStore(state, on_callback_error=on_callback_error)


__all__ = ["StateStore", "StateCallback", "CallbackErrorSink", "create_state_store"]
