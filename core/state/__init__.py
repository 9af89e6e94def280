from .defaults import build_default_state
from .paths import StatePath
from .store import StateStore, create_state_store

__all__ = [
    "StatePath",
    "StateStore",
    "build_default_state",
    "create_state_store",
]
