from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List


class DataSource(ABC):
    """Persistence collaborator that supplies the initial state collections."""

    @abstractmethod
    def fetch_all(self, collection: str) -> List[Any]:
        """Return every record of ``collection`` (areas, clients, talents, projects, allocations)."""
        ...
