from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

from core.events.state_events import StateEvents, bind_state_events
from core.exceptions import SubscriberCallbackError
from core.interfaces import DataSource
from core.services.availability import AvailabilityService
from core.services.dashboard import DashboardService
from core.services.data_loader import DataLoader, LoadReport
from core.state import StateStore, create_state_store
from infra.memory_source import InMemoryDataSource
from infra.operational_support import bind_trace_id
from infra.settings import DashboardSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    settings: DashboardSettings
    store: StateStore
    state_events: StateEvents
    dashboard_service: DashboardService
    availability_service: AvailabilityService
    data_loader: DataLoader
    unbind_state_events: Callable[[], None]

    def as_dict(self) -> dict[str, Any]:
        return {
            "settings": self.settings,
            "store": self.store,
            "state_events": self.state_events,
            "dashboard_service": self.dashboard_service,
            "availability_service": self.availability_service,
            "data_loader": self.data_loader,
        }


def build_service_graph(
    settings: DashboardSettings | None = None,
    source: DataSource | None = None,
    *,
    on_callback_error: Callable[[SubscriberCallbackError], None] | None = None,
    today: Callable[[], date] = date.today,
    sleep: Callable[[float], None] | None = None,
) -> ServiceGraph:
    settings = settings or DashboardSettings()
    state_events = StateEvents()

    def _report_callback_error(error: SubscriberCallbackError) -> None:
        state_events.report_callback_error(error)
        if on_callback_error is not None:
            on_callback_error(error)

    store = create_state_store(on_callback_error=_report_callback_error)
    unbind = bind_state_events(store, state_events)

    dashboard_service = DashboardService(
        store,
        today=today,
        deadline_horizon_days=settings.deadline_horizon_days,
        cap_utilization=settings.cap_utilization,
    )
    loader_kwargs: dict[str, Any] = {
        "max_retries": settings.loader_max_retries,
        "retry_delay": settings.loader_retry_delay,
    }
    if sleep is not None:
        loader_kwargs["sleep"] = sleep
    data_loader = DataLoader(store, source or InMemoryDataSource(), **loader_kwargs)

    return ServiceGraph(
        settings=settings,
        store=store,
        state_events=state_events,
        dashboard_service=dashboard_service,
        availability_service=AvailabilityService(store),
        data_loader=data_loader,
        unbind_state_events=unbind,
    )


def bootstrap_state(graph: ServiceGraph, trace_id: str | None = None) -> LoadReport:
    with bind_trace_id(trace_id) as bound:
        report = graph.data_loader.load_all()
        if report.ok:
            logger.info("State bootstrap complete (trace=%s).", bound)
        else:
            logger.warning(
                "State bootstrap finished with %s failed collection(s): %s",
                len(report.errors),
                ", ".join(error.collection for error in report.errors),
            )
        return report


__all__ = ["ServiceGraph", "build_service_graph", "bootstrap_state"]
