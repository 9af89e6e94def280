from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Mapping

from core.domain.enums import Collection
from core.exceptions import NotFoundError
from core.interfaces import DataSource


class InMemoryDataSource(DataSource):
    """Dict-backed data source for local runs and tests."""

    def __init__(self, collections: Mapping[str, Iterable[Any]] | None = None):
        self._collections: Dict[str, List[Any]] = {item.value: [] for item in Collection}
        for name, rows in (collections or {}).items():
            self._collections[name] = list(rows)

    def fetch_all(self, collection: str) -> List[Any]:
        if collection not in self._collections:
            raise NotFoundError(f"Unknown collection: {collection}")
        return copy.deepcopy(self._collections[collection])

    def replace(self, collection: str, rows: Iterable[Any]) -> None:
        self._collections[collection] = list(rows)
