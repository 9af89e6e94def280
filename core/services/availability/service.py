from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterator, List, Optional, Tuple

from core.domain.records import parse_record_date, record_value
from core.exceptions import MetricsInputError, ValidationError
from core.services.availability.models import UNKNOWN_PROJECT_NAME, AllocationConflict
from core.state.paths import StatePath
from core.state.store import StateStore

logger = logging.getLogger(__name__)

DateLike = Any


class AvailabilityService:
    """
    Answers scheduling questions for a talent from the allocations in the store.

    Date ranges are inclusive on both ends: an allocation ending on the day a
    new one starts is a conflict.
    """

    def __init__(self, store: StateStore):
        self._store = store

    # --------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------

    def allocation_conflicts(
        self,
        talent_id: Any,
        start: DateLike,
        end: DateLike,
        exclude_id: Optional[Any] = None,
    ) -> List[AllocationConflict]:
        """
        Allocations of ``talent_id`` overlapping ``[start, end]``.

        ``exclude_id`` skips one allocation, typically the one being edited.
        Each conflict carries the project name for user-facing messages.
        """
        range_start = parse_record_date(start, "start")
        range_end = parse_record_date(end, "end")
        if range_start > range_end:
            raise ValidationError("start must not be after end.")

        project_names = self._project_names()
        conflicts: list[AllocationConflict] = []
        for allocation, alloc_start, alloc_end in self._talent_allocations(talent_id):
            if exclude_id is not None and record_value(allocation, "id") == exclude_id:
                continue
            if alloc_start <= range_end and alloc_end >= range_start:
                conflicts.append(
                    AllocationConflict(
                        allocation=allocation,
                        project_name=project_names.get(
                            record_value(allocation, "project_id"), UNKNOWN_PROJECT_NAME
                        ),
                        start_date=alloc_start,
                        end_date=alloc_end,
                    )
                )
        return conflicts

    def is_talent_available(self, talent_id: Any, day: DateLike) -> bool:
        target = parse_record_date(day, "day")
        return not any(
            alloc_start <= target <= alloc_end
            for _, alloc_start, alloc_end in self._talent_allocations(talent_id)
        )

    # --------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------

    def _talent_allocations(self, talent_id: Any) -> Iterator[Tuple[Any, date, date]]:
        for allocation in self._store.get(StatePath.ALLOCATIONS) or []:
            if record_value(allocation, "talent_id") != talent_id:
                continue
            try:
                alloc_start = parse_record_date(record_value(allocation, "start_date"), "start_date")
                alloc_end = parse_record_date(record_value(allocation, "end_date"), "end_date")
            except MetricsInputError as exc:
                logger.warning(
                    "Skipping allocation %r in availability check: %s",
                    record_value(allocation, "id", ""),
                    exc,
                )
                continue
            yield allocation, alloc_start, alloc_end

    def _project_names(self) -> dict[Any, str]:
        names: dict[Any, str] = {}
        for project in self._store.get(StatePath.PROJECTS) or []:
            project_id = record_value(project, "id")
            if project_id is not None:
                names[project_id] = record_value(project, "name", UNKNOWN_PROJECT_NAME)
        return names
