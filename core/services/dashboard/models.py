from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class UnpaidProjectsSummary:
    projects: List[Any]
    count: int
    total_budget: float


@dataclass
class LegendEntry:
    name: str
    color: str | None
    opacity: float = 1.0


@dataclass
class LegendSection:
    title: str
    status: str
    entries: List[LegendEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass
class ProjectLegend:
    title: str = "Project Legend"
    sections: List[LegendSection] = field(default_factory=list)
    empty_message: str = "No active or upcoming projects"

    @property
    def is_empty(self) -> bool:
        return not self.sections


@dataclass
class DashboardMetrics:
    talent_count: int
    active_projects_count: int
    utilization: int
    upcoming_deadlines: List[Any]
    unpaid_projects: UnpaidProjectsSummary
