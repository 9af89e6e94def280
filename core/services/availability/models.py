from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

UNKNOWN_PROJECT_NAME = "Unknown Project"


@dataclass(frozen=True)
class AllocationConflict:
    allocation: Any
    project_name: str
    start_date: date
    end_date: date
