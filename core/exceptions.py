# core/exceptions.py
from __future__ import annotations

from typing import Any, Callable


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity or collection is not found."""


class KeyPathError(DomainError):
    """Raised when a state path does not resolve to an existing container."""

    def __init__(self, path: str, reason: str = "parent path does not resolve"):
        super().__init__(f"Invalid state path '{path}': {reason}.")
        self.path = path


class SubscriberCallbackError(DomainError):
    """Reported (never raised) when a state subscriber fails during notification."""

    def __init__(self, key: str, callback: Callable[..., Any], original: BaseException):
        name = getattr(callback, "__qualname__", None) or repr(callback)
        super().__init__(f"Subscriber {name} for '{key}' failed: {original}")
        self.key = key
        self.callback = callback
        self.original = original


class MetricsInputError(DomainError):
    """Raised when a record carries a date field that cannot be parsed."""

    def __init__(self, field: str, value: Any):
        super().__init__(f"Unparsable {field}: {value!r}")
        self.field = field
        self.value = value


class DataLoadError(DomainError):
    """Describes a collection that could not be fetched after all retries."""

    def __init__(self, collection: str, attempts: int, original: BaseException | None = None):
        super().__init__(f"Failed to load {collection} after {attempts} attempts")
        self.collection = collection
        self.attempts = attempts
        self.original = original
