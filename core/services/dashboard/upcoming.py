from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, List

from core.domain.records import parse_record_datetime, record_value
from core.exceptions import MetricsInputError

logger = logging.getLogger(__name__)


class DashboardUpcomingMixin:
    _today: Callable[[], date]
    _deadline_horizon_days: int
    _projects: Callable[[], List[Any]]

    def upcoming_deadlines(self) -> List[Any]:
        """Projects ending between today and today + horizon (both inclusive), soonest first."""
        today = self._today()
        horizon = today + timedelta(days=self._deadline_horizon_days)

        upcoming: list[tuple[datetime, Any]] = []
        for project in self._projects():
            raw_end = record_value(project, "end_date")
            if not raw_end:
                continue
            try:
                deadline = parse_record_datetime(raw_end, "end_date")
            except MetricsInputError as exc:
                logger.warning(
                    "Skipping project %r in upcoming deadlines: %s",
                    record_value(project, "name", ""),
                    exc,
                )
                continue
            # window is checked per calendar day, ordering keeps the time of day
            if deadline.date() < today:
                continue
            if deadline.date() > horizon:
                continue
            upcoming.append((deadline, project))

        upcoming.sort(key=lambda row: row[0])
        return [project for _, project in upcoming]
