from __future__ import annotations

from typing import Any, Callable, Iterable

from core.domain.enums import ProjectStatus
from core.domain.records import record_value
from core.services.dashboard.models import LegendEntry, LegendSection, ProjectLegend
from core.state.paths import StatePath
from core.state.store import StateStore

# (status, section title, swatch opacity)
_SECTIONS = (
    (ProjectStatus.IN_PROGRESS, "In Progress", 1.0),
    (ProjectStatus.UPCOMING, "Upcoming", 0.6),
)


def build_project_legend(projects: Iterable[Any] | None) -> ProjectLegend:
    """Color legend for in-progress and upcoming projects; empty sections are left out."""
    rows = list(projects or [])
    legend = ProjectLegend()

    for status, title, opacity in _SECTIONS:
        entries = [
            LegendEntry(
                name=str(record_value(project, "name", "")),
                color=record_value(project, "color"),
                opacity=opacity,
            )
            for project in rows
            if record_value(project, "status") == status.value
        ]
        if entries:
            legend.sections.append(
                LegendSection(title=title, status=status.value, entries=entries)
            )
    return legend


def watch_project_legend(
    store: StateStore,
    on_change: Callable[[ProjectLegend], None],
) -> Callable[[], None]:
    def _rebuild(projects: Any, _old: Any) -> None:
        on_change(build_project_legend(projects))

    return store.subscribe(StatePath.PROJECTS, _rebuild)


__all__ = ["build_project_legend", "watch_project_legend"]
