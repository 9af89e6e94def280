import pytest

from core.exceptions import DataLoadError, ValidationError
from core.interfaces import DataSource
from core.services.data_loader import DataLoader
from infra.memory_source import InMemoryDataSource


class _FlakySource(DataSource):
    """Fails the first ``failures[collection]`` fetches of a collection."""

    def __init__(self, inner: DataSource, failures: dict[str, int]):
        self._inner = inner
        self._failures = dict(failures)
        self.calls: list[str] = []

    def fetch_all(self, collection):
        self.calls.append(collection)
        if self._failures.get(collection, 0) > 0:
            self._failures[collection] -= 1
            raise ConnectionError(f"{collection} unavailable")
        return self._inner.fetch_all(collection)


def test_load_all_populates_store_and_toggles_loading(store, source):
    loading_states: list[bool] = []
    store.subscribe("ui.loading", lambda new, old: loading_states.append(new))
    loader = DataLoader(store, source, sleep=lambda _s: None)

    report = loader.load_all()

    assert report.ok
    assert set(report.data) == {"areas", "clients", "talents", "projects", "allocations"}
    assert len(store.get("talents")) == 2
    assert store.get("projects")[0]["name"] == "Website"
    assert loading_states == [True, False]
    assert loader.is_loading() is False
    assert loader.is_data_loaded()


def test_load_with_retry_uses_linear_backoff(store, source):
    sleeps: list[float] = []
    flaky = _FlakySource(source, {"talents": 2})
    loader = DataLoader(store, flaky, max_retries=3, retry_delay=0.5, sleep=sleeps.append)

    result = loader.load_with_retry("talents")

    assert result.ok
    assert len(result.data) == 2
    assert flaky.calls == ["talents", "talents", "talents"]
    assert sleeps == [0.5, 1.0]


def test_load_with_retry_gives_up_after_max_attempts(store, source, caplog):
    sleeps: list[float] = []
    flaky = _FlakySource(source, {"projects": 5})
    loader = DataLoader(store, flaky, max_retries=3, retry_delay=1.0, sleep=sleeps.append)

    with caplog.at_level("ERROR"):
        result = loader.load_with_retry("projects")

    assert result.data == []
    assert isinstance(result.error, DataLoadError)
    assert result.error.collection == "projects"
    assert result.error.attempts == 3
    assert isinstance(result.error.original, ConnectionError)
    assert sleeps == [1.0, 2.0]
    assert "Failed to load projects (attempt 3/3)" in caplog.text


def test_load_all_collects_errors_and_writes_empty_collection(store, source):
    store.set("projects", [{"name": "stale"}])
    flaky = _FlakySource(source, {"projects": 10})
    loader = DataLoader(store, flaky, max_retries=2, sleep=lambda _s: None)

    report = loader.load_all()

    assert not report.ok
    assert [error.collection for error in report.errors] == ["projects"]
    assert store.get("projects") == []
    assert len(store.get("talents")) == 2
    assert store.get("ui.loading") is False


def test_load_all_resets_loading_when_interrupted(store):
    class _Interrupting(DataSource):
        def fetch_all(self, collection):
            raise KeyboardInterrupt

    loader = DataLoader(store, _Interrupting(), sleep=lambda _s: None)

    with pytest.raises(KeyboardInterrupt):
        loader.load_all()

    assert store.get("ui.loading") is False


def test_reload_updates_single_collection_on_success(store, source):
    loader = DataLoader(store, source, sleep=lambda _s: None)
    source.replace("clients", [{"id": "c-9", "name": "Globex"}])

    result = loader.reload("clients")

    assert result.ok
    assert store.get("clients") == [{"id": "c-9", "name": "Globex"}]
    assert store.get("talents") == []


def test_reload_keeps_state_on_failure(store, source):
    store.set("talents", [{"id": "keep"}])
    loader = DataLoader(store, _FlakySource(source, {"talents": 9}), max_retries=2, sleep=lambda _s: None)

    result = loader.reload("talents")

    assert not result.ok
    assert store.get("talents") == [{"id": "keep"}]
    assert loader.is_loading() is False


def test_reload_rejects_unknown_collection(store, source):
    loader = DataLoader(store, source)

    with pytest.raises(ValidationError):
        loader.reload("invoices")


def test_loader_rejects_non_positive_retries(store, source):
    with pytest.raises(ValidationError):
        DataLoader(store, source, max_retries=0)


def test_in_memory_source_returns_copies():
    source = InMemoryDataSource({"talents": [{"id": "t-1"}]})

    rows = source.fetch_all("talents")
    rows[0]["id"] = "changed"

    assert source.fetch_all("talents") == [{"id": "t-1"}]
    assert source.fetch_all("areas") == []


def test_reload_all_refreshes_every_collection(store, source):
    loader = DataLoader(store, source, sleep=lambda _s: None)
    loader.load_all()
    source.replace("talents", [])

    report = loader.reload_all()

    assert report.ok
    assert store.get("talents") == []
    assert len(store.get("projects")) == 1
