from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Callable, List

from core.domain.enums import ProjectStatus
from core.domain.records import record_value
from core.services.dashboard.legend import build_project_legend
from core.services.dashboard.models import DashboardMetrics, ProjectLegend, UnpaidProjectsSummary
from core.services.dashboard.upcoming import DashboardUpcomingMixin
from core.services.dashboard.utilization import DashboardUtilizationMixin
from core.state.paths import StatePath
from core.state.store import StateStore

logger = logging.getLogger(__name__)


def budget_amount(project: Any) -> float:
    """Numeric budget of a project record; missing or unreadable budgets count as 0."""
    raw = record_value(project, "budget", 0)
    if isinstance(raw, bool):
        raw = str(raw)
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        amount = math.nan
    if math.isnan(amount) or math.isinf(amount):
        logger.warning(
            "Ignoring unreadable budget %r on project %r",
            raw,
            record_value(project, "name", ""),
        )
        return 0.0
    return amount


class DashboardService(DashboardUpcomingMixin, DashboardUtilizationMixin):
    """
    Derives the dashboard figures from the current state store contents.
    Every call re-reads the store; nothing is cached or written back.
    """

    def __init__(
        self,
        store: StateStore,
        *,
        today: Callable[[], date] = date.today,
        deadline_horizon_days: int = 30,
        cap_utilization: bool = False,
    ):
        self._store = store
        self._today = today
        self._deadline_horizon_days = deadline_horizon_days
        self._cap_utilization = cap_utilization

    # --------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------

    def talent_count(self) -> int:
        return len(self._talents())

    def active_project_count(self) -> int:
        return sum(
            1
            for project in self._projects()
            if record_value(project, "status") == ProjectStatus.IN_PROGRESS.value
        )

    def unpaid_projects_summary(self) -> UnpaidProjectsSummary:
        unpaid = [
            project
            for project in self._projects()
            if record_value(project, "status") == ProjectStatus.COMPLETED.value
            and not record_value(project, "is_paid", False)
        ]
        return UnpaidProjectsSummary(
            projects=unpaid,
            count=len(unpaid),
            total_budget=sum(budget_amount(project) for project in unpaid),
        )

    def all_metrics(self) -> DashboardMetrics:
        return DashboardMetrics(
            talent_count=self.talent_count(),
            active_projects_count=self.active_project_count(),
            utilization=self.utilization(),
            upcoming_deadlines=self.upcoming_deadlines(),
            unpaid_projects=self.unpaid_projects_summary(),
        )

    def project_legend(self) -> ProjectLegend:
        return build_project_legend(self._projects())

    # --------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------

    def _collection(self, path: StatePath) -> List[Any]:
        return list(self._store.get(path) or [])

    def _talents(self) -> List[Any]:
        return self._collection(StatePath.TALENTS)

    def _projects(self) -> List[Any]:
        return self._collection(StatePath.PROJECTS)

    def _allocations(self) -> List[Any]:
        return self._collection(StatePath.ALLOCATIONS)
