from .availability import AllocationConflict, AvailabilityService
from .dashboard import DashboardMetrics, DashboardService, ProjectLegend, UnpaidProjectsSummary
from .data_loader import DataLoader, LoadReport, LoadResult

__all__ = [
    "AvailabilityService",
    "AllocationConflict",
    "DashboardService",
    "DashboardMetrics",
    "ProjectLegend",
    "UnpaidProjectsSummary",
    "DataLoader",
    "LoadReport",
    "LoadResult",
]
