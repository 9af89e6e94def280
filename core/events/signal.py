from __future__ import annotations

from threading import RLock
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

ErrorSink = Callable[[Callable[..., Any], Exception], None]


_QT_DELETED_PREFIX = "internal c++ object"


def _is_deleted_qt_object(exc: RuntimeError) -> bool:
    # Qt-bound methods can outlive their QObject and raise:
    # "Internal C++ object (...) already deleted."
    msg = str(exc).strip().lower()
    return msg.startswith(_QT_DELETED_PREFIX) and (
        "already deleted" in msg or "has been deleted" in msg
    )


class _Subscription(Generic[T]):
    __slots__ = ("callback",)

    def __init__(self, callback: Callable[..., None]) -> None:
        self.callback = callback


class Signal(Generic[T]):
    """
    Minimal framework-agnostic signal/slot primitive.
    Implements the Observer pattern for state notifications without Qt coupling.

    Every ``connect`` creates its own subscription, so the same callable may be
    connected twice and the returned disconnect handle removes only its own entry.
    """

    def __init__(self, on_error: ErrorSink | None = None) -> None:
        self._subscriptions: list[_Subscription[T]] = []
        self._lock: RLock = RLock()
        self._on_error = on_error

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def connect(self, callback: Callable[..., None]) -> Callable[[], None]:
        subscription: _Subscription[T] = _Subscription(callback)
        with self._lock:
            self._subscriptions.append(subscription)

        def _disconnect() -> None:
            self._remove(subscription)

        return _disconnect

    def disconnect(self, callback: Callable[..., None]) -> None:
        """Remove the earliest subscription registered for ``callback``."""
        with self._lock:
            for subscription in self._subscriptions:
                if subscription.callback == callback:
                    self._subscriptions.remove(subscription)
                    return

    def emit(self, *payload: Any) -> None:
        with self._lock:
            subscriptions = list(self._subscriptions)
        stale: list[_Subscription[T]] = []
        for subscription in subscriptions:
            try:
                subscription.callback(*payload)
            except RuntimeError as exc:
                if _is_deleted_qt_object(exc):
                    stale.append(subscription)
                    continue
                self._report(subscription.callback, exc)
            except Exception as exc:
                self._report(subscription.callback, exc)
        for subscription in stale:
            self._remove(subscription)

    def _remove(self, subscription: _Subscription[T]) -> None:
        with self._lock:
            # identity check: another subscription may wrap the same callable
            for index, existing in enumerate(self._subscriptions):
                if existing is subscription:
                    del self._subscriptions[index]
                    return

    def _report(self, callback: Callable[..., Any], exc: Exception) -> None:
        if self._on_error is None:
            raise exc
        self._on_error(callback, exc)


__all__ = ["Signal", "ErrorSink"]
