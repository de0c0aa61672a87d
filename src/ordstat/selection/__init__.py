"""Order-statistic selection (quickselect over an in-place Lomuto partition)."""

from ordstat.selection.metrics import (
    SelectionMetrics,
    get_selection_metrics,
    reset_selection_metrics,
)
from ordstat.selection.partition import RangeError, choose_pivot, is_partitioned, partition
from ordstat.selection.quickselect import select, select_in_range, select_with_stats
from ordstat.selection.types import SelectionResult, SelectionStats

__all__ = [
    "RangeError",
    "SelectionMetrics",
    "SelectionResult",
    "SelectionStats",
    "choose_pivot",
    "get_selection_metrics",
    "is_partitioned",
    "partition",
    "reset_selection_metrics",
    "select",
    "select_in_range",
    "select_with_stats",
]
