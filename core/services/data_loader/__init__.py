from .models import LoadReport, LoadResult
from .service import DataLoader

__all__ = ["DataLoader", "LoadReport", "LoadResult"]
