from .legend import build_project_legend, watch_project_legend
from .models import (
    DashboardMetrics,
    LegendEntry,
    LegendSection,
    ProjectLegend,
    UnpaidProjectsSummary,
)
from .service import DashboardService

__all__ = [
    "DashboardService",
    "DashboardMetrics",
    "UnpaidProjectsSummary",
    "ProjectLegend",
    "LegendSection",
    "LegendEntry",
    "build_project_legend",
    "watch_project_legend",
]
