from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    UPCOMING = "upcoming"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Collection(str, Enum):
    AREAS = "areas"
    CLIENTS = "clients"
    TALENTS = "talents"
    PROJECTS = "projects"
    ALLOCATIONS = "allocations"


__all__ = ["ProjectStatus", "Collection"]
