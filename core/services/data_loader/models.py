from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.exceptions import DataLoadError


@dataclass
class LoadResult:
    collection: str
    data: List[Any] = field(default_factory=list)
    error: Optional[DataLoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoadReport:
    data: Dict[str, List[Any]] = field(default_factory=dict)
    errors: List[DataLoadError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
