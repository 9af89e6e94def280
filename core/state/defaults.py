from __future__ import annotations

from typing import Any


def build_default_state() -> dict[str, Any]:
    """Fresh state tree with every top-level key present."""
    return {
        "talents": [],
        "projects": [],
        "allocations": [],
        "areas": [],
        "clients": [],
        "auth": {
            "user": None,
            "isAuthenticated": False,
        },
        "ui": {
            "currentPage": "dashboard",
            "selectedDate": None,
            "draggedTalent": None,
            "loading": False,
            "selectedTalentId": None,
        },
    }


__all__ = ["build_default_state"]
