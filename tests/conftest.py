# tests/conftest.py
from datetime import date

import pytest

from core.services.dashboard import DashboardService
from core.state import create_state_store
from infra.memory_source import InMemoryDataSource
from infra.services import build_service_graph
from infra.settings import DashboardSettings


FIXED_TODAY = date(2026, 10, 18)


@pytest.fixture
def fixed_today():
    return FIXED_TODAY


@pytest.fixture
def reported_errors():
    return []


@pytest.fixture
def store(reported_errors):
    # separate store per test, failures collected instead of printed
    return create_state_store(on_callback_error=reported_errors.append)


@pytest.fixture
def dashboard(store, fixed_today):
    return DashboardService(store, today=lambda: fixed_today)


@pytest.fixture
def source():
    return InMemoryDataSource(
        {
            "areas": [{"id": "a-1", "name": "Design"}],
            "clients": [{"id": "c-1", "name": "Acme"}],
            "talents": [{"id": "t-1", "name": "Ana"}, {"id": "t-2", "name": "Bo"}],
            "projects": [
                {
                    "id": "p-1",
                    "name": "Website",
                    "status": "in_progress",
                    "color": "#3b82f6",
                    "end_date": "2026-10-25",
                    "budget": 1200,
                    "is_paid": False,
                },
            ],
            "allocations": [
                {"id": "al-1", "talent_id": "t-1", "project_id": "p-1",
                 "start_date": "2026-10-01", "end_date": "2026-10-31"},
            ],
        }
    )


@pytest.fixture
def services(source, fixed_today):
    sleeps: list[float] = []
    graph = build_service_graph(
        DashboardSettings(loader_retry_delay=0.0),
        source,
        today=lambda: fixed_today,
        sleep=sleeps.append,
    )
    data = graph.as_dict()
    data["graph"] = graph
    data["source"] = source
    data["sleeps"] = sleeps
    return data
