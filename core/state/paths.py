from __future__ import annotations

from enum import Enum
from typing import Union

PATH_SEPARATOR = "."


class StatePath(str, Enum):
    """
    Known addresses inside the state tree.

    A nested path (``ui.currentPage``) cascades its notifications to the
    top-level key (``ui``); ``top_level`` names that key.
    """

    TALENTS = "talents"
    PROJECTS = "projects"
    ALLOCATIONS = "allocations"
    AREAS = "areas"
    CLIENTS = "clients"
    AUTH = "auth"
    UI = "ui"

    AUTH_USER = "auth.user"
    AUTH_IS_AUTHENTICATED = "auth.isAuthenticated"

    UI_CURRENT_PAGE = "ui.currentPage"
    UI_SELECTED_DATE = "ui.selectedDate"
    UI_DRAGGED_TALENT = "ui.draggedTalent"
    UI_LOADING = "ui.loading"
    UI_SELECTED_TALENT_ID = "ui.selectedTalentId"

    @property
    def segments(self) -> tuple[str, ...]:
        return split_path(self.value)

    @property
    def top_level(self) -> "StatePath":
        return StatePath(self.segments[0])

    @property
    def is_nested(self) -> bool:
        return len(self.segments) > 1

    @classmethod
    def top_level_keys(cls) -> tuple["StatePath", ...]:
        return tuple(path for path in cls if not path.is_nested)


PathLike = Union[StatePath, str]


def path_key(path: PathLike) -> str:
    return path.value if isinstance(path, StatePath) else str(path)


def split_path(path: PathLike) -> tuple[str, ...]:
    return tuple(path_key(path).split(PATH_SEPARATOR))


__all__ = ["StatePath", "PathLike", "PATH_SEPARATOR", "path_key", "split_path"]
