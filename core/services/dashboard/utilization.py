from __future__ import annotations

import calendar
import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, List

from core.domain.records import parse_record_date, record_value
from core.exceptions import MetricsInputError

logger = logging.getLogger(__name__)


def month_bounds(day: date) -> tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def allocated_days_in_window(allocation: Any, window_start: date, window_end: date) -> int:
    """
    Whole days (inclusive on both ends) an allocation overlaps the window.

    Raises MetricsInputError when either allocation date is missing or unparsable.
    """
    start = parse_record_date(record_value(allocation, "start_date"), "start_date")
    end = parse_record_date(record_value(allocation, "end_date"), "end_date")

    overlap_start = max(start, window_start)
    overlap_end = min(end, window_end)
    if overlap_start > overlap_end:
        return 0
    return (overlap_end - overlap_start).days + 1


def round_percent(numerator: int, denominator: int) -> int:
    # half-up, so 12.5 -> 13 rather than banker's rounding
    ratio = Decimal(numerator) * 100 / Decimal(denominator)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class DashboardUtilizationMixin:
    _today: Callable[[], date]
    _cap_utilization: bool
    _talents: Callable[[], List[Any]]
    _allocations: Callable[[], List[Any]]

    def utilization(self) -> int:
        """
        Allocated talent-days over available talent-days for the current month.

        Allocations are summed without de-duplicating overlaps for the same
        talent, so the raw figure can exceed 100 unless capping is enabled.
        """
        talents = self._talents()
        if not talents:
            return 0

        month_start, month_end = month_bounds(self._today())
        capacity = len(talents) * month_end.day

        allocated = 0
        for allocation in self._allocations():
            try:
                allocated += allocated_days_in_window(allocation, month_start, month_end)
            except MetricsInputError as exc:
                logger.warning("Skipping allocation in utilization: %s", exc)

        percent = round_percent(allocated, capacity)
        if self._cap_utilization:
            return min(percent, 100)
        return percent
