from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

from infra.path import APP_NAME, COMPANY_NAME


@dataclass(frozen=True)
class DashboardSettings:
    deadline_horizon_days: int = 30
    cap_utilization: bool = False
    loader_max_retries: int = 3
    loader_retry_delay: float = 1.0


def _as_bool(raw: object, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return default


def _as_int(raw: object, default: int, lo: int, hi: int) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if lo <= value <= hi else default


def _as_float(raw: object, default: float, lo: float, hi: float) -> float:
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if lo <= value <= hi else default


class DashboardSettingsStore:
    """Adapter around QSettings for persisted dashboard and loader preferences."""

    ORG_NAME = COMPANY_NAME
    APP_NAME = APP_NAME

    _KEY_DEADLINE_HORIZON = "dashboard/deadline_horizon_days"
    _KEY_CAP_UTILIZATION = "dashboard/cap_utilization"
    _KEY_LOADER_RETRIES = "loader/max_retries"
    _KEY_LOADER_RETRY_DELAY = "loader/retry_delay_seconds"

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(self.ORG_NAME, self.APP_NAME)

    def load_deadline_horizon_days(self, default_days: int = 30) -> int:
        raw = self._settings.value(self._KEY_DEADLINE_HORIZON, default_days)
        return _as_int(raw, default_days, 1, 365)

    def save_deadline_horizon_days(self, days: int) -> None:
        self._settings.setValue(self._KEY_DEADLINE_HORIZON, _as_int(days, 30, 1, 365))
        self._settings.sync()

    def load_cap_utilization(self, default: bool = False) -> bool:
        return _as_bool(self._settings.value(self._KEY_CAP_UTILIZATION, default), default)

    def save_cap_utilization(self, enabled: bool) -> None:
        self._settings.setValue(self._KEY_CAP_UTILIZATION, "true" if enabled else "false")
        self._settings.sync()

    def load_loader_max_retries(self, default: int = 3) -> int:
        return _as_int(self._settings.value(self._KEY_LOADER_RETRIES, default), default, 1, 10)

    def save_loader_max_retries(self, retries: int) -> None:
        self._settings.setValue(self._KEY_LOADER_RETRIES, _as_int(retries, 3, 1, 10))
        self._settings.sync()

    def load_loader_retry_delay(self, default: float = 1.0) -> float:
        raw = self._settings.value(self._KEY_LOADER_RETRY_DELAY, default)
        return _as_float(raw, default, 0.0, 60.0)

    def save_loader_retry_delay(self, seconds: float) -> None:
        self._settings.setValue(self._KEY_LOADER_RETRY_DELAY, _as_float(seconds, 1.0, 0.0, 60.0))
        self._settings.sync()

    def load_dashboard_settings(self) -> DashboardSettings:
        return DashboardSettings(
            deadline_horizon_days=self.load_deadline_horizon_days(),
            cap_utilization=self.load_cap_utilization(),
            loader_max_retries=self.load_loader_max_retries(),
            loader_retry_delay=self.load_loader_retry_delay(),
        )


__all__ = ["DashboardSettings", "DashboardSettingsStore"]
