"""Service exports."""

from .analytics_service import BatchAnalytics, summarize
from .export_service import export_csv
from .filter_service import filter_results, sort_results

__all__ = [
    "export_csv",
    "summarize",
    "BatchAnalytics",
    "filter_results",
    "sort_results",
]
