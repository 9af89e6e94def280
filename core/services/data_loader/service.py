from __future__ import annotations

import logging
import time
from typing import Callable

from core.domain.enums import Collection
from core.exceptions import DataLoadError, ValidationError
from core.interfaces import DataSource
from core.services.data_loader.models import LoadReport, LoadResult
from core.state.paths import StatePath
from core.state.store import StateStore

logger = logging.getLogger(__name__)

_COLLECTION_PATHS = {
    Collection.AREAS.value: StatePath.AREAS,
    Collection.CLIENTS.value: StatePath.CLIENTS,
    Collection.TALENTS.value: StatePath.TALENTS,
    Collection.PROJECTS.value: StatePath.PROJECTS,
    Collection.ALLOCATIONS.value: StatePath.ALLOCATIONS,
}


class DataLoader:
    """
    Fills the state store from the persistence collaborator.

    Each collection is fetched with up to ``max_retries`` attempts and a linear
    backoff (``retry_delay * attempt`` seconds). ``ui.loading`` is raised for
    the duration of a load and always lowered again.
    """

    def __init__(
        self,
        store: StateStore,
        source: DataSource,
        *,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_retries < 1:
            raise ValidationError("max_retries must be at least 1.")
        self._store = store
        self._source = source
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._sleep = sleep

    def load_all(self) -> LoadReport:
        self._store.set(StatePath.UI_LOADING, True)
        report = LoadReport()
        try:
            results = [self.load_with_retry(collection) for collection in _COLLECTION_PATHS]
            for result in results:
                report.data[result.collection] = result.data
                if result.error is not None:
                    report.errors.append(result.error)

            for result in results:
                self._store.set(_COLLECTION_PATHS[result.collection], result.data)

            logger.info(
                "Loaded initial data: %s",
                ", ".join(f"{name}={len(rows)}" for name, rows in report.data.items()),
            )
            return report
        finally:
            self._store.set(StatePath.UI_LOADING, False)

    def reload(self, collection: str) -> LoadResult:
        if collection not in _COLLECTION_PATHS:
            raise ValidationError(f"Unknown data type: {collection}")

        self._store.set(StatePath.UI_LOADING, True)
        try:
            result = self.load_with_retry(collection)
            if result.error is None:
                self._store.set(_COLLECTION_PATHS[collection], result.data)
            return result
        finally:
            self._store.set(StatePath.UI_LOADING, False)

    def reload_all(self) -> LoadReport:
        return self.load_all()

    def load_with_retry(self, collection: str) -> LoadResult:
        last_error: Exception | None = None

        for attempt in range(1, self._max_retries + 1):
            try:
                data = self._source.fetch_all(collection)
                return LoadResult(collection=collection, data=list(data or []))
            except Exception as exc:
                last_error = exc
                logger.error(
                    "Failed to load %s (attempt %s/%s): %s",
                    collection,
                    attempt,
                    self._max_retries,
                    exc,
                )
                if attempt < self._max_retries:
                    self._sleep(self._retry_delay * attempt)

        return LoadResult(
            collection=collection,
            data=[],
            error=DataLoadError(collection, self._max_retries, last_error),
        )

    def is_data_loaded(self) -> bool:
        return all(isinstance(self._store.get(path), list) for path in _COLLECTION_PATHS.values())

    def is_loading(self) -> bool:
        return bool(self._store.get(StatePath.UI_LOADING))
