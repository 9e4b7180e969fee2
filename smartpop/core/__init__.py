"""集计与报表核心"""

from .lookup import RecordIndex, MISSING_NAME, OTHER_DEFECT_NAME
from .filters import filter_records, filter_worker_orders
from .aggregation import aggregate, build_report, achievement_rate, group_key
from .export import REPORT_HEADERS, format_rows, export_report, export_filename
from .reducer import apply

__all__ = [
    "RecordIndex",
    "MISSING_NAME",
    "OTHER_DEFECT_NAME",
    "filter_records",
    "filter_worker_orders",
    "aggregate",
    "build_report",
    "achievement_rate",
    "group_key",
    "REPORT_HEADERS",
    "format_rows",
    "export_report",
    "export_filename",
    "apply",
]
