from .models import UNKNOWN_PROJECT_NAME, AllocationConflict
from .service import AvailabilityService

__all__ = ["AvailabilityService", "AllocationConflict", "UNKNOWN_PROJECT_NAME"]
