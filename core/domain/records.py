from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from core.exceptions import MetricsInputError


def record_value(record: Any, name: str, default: Any = None) -> Any:
    """
    Read a field from a backend record.

    Records arrive as plain mappings from the data source, but dataclass-like
    objects with matching attributes are accepted too.
    """
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def parse_record_datetime(value: Any, field: str = "date") -> datetime:
    """
    Normalize a record date or timestamp to a naive local ``datetime``.

    Accepts ``date`` (midnight), ``datetime`` and full ISO-8601 strings such as
    ``2026-10-18`` or ``2026-10-18T09:30:00Z``. Offset-aware values are moved
    to the local timezone so that comparisons follow the local calendar.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            raise MetricsInputError(field, value) from None
    else:
        raise MetricsInputError(field, value)

    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


def parse_record_date(value: Any, field: str = "date") -> date:
    """Calendar day of a record date; the time part is dropped."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_record_datetime(value, field).date()


__all__ = ["record_value", "parse_record_date", "parse_record_datetime"]
