from core.domain.enums import Collection, ProjectStatus
from core.domain.records import parse_record_date, parse_record_datetime, record_value

__all__ = [
    "Collection",
    "ProjectStatus",
    "parse_record_date",
    "parse_record_datetime",
    "record_value",
]
