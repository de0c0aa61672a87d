"""Result and instrumentation types for selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ordstat.core import PivotStrategy


@dataclass
class SelectionStats:
    """Work counters for one selection call.

    Attributes:
        partitions: Number of partition passes
        comparisons: Element comparisons made by partition scans
        swaps: Element swaps actually performed (self-swaps are skipped)
        max_range: Size of the largest range that was partitioned
    """

    partitions: int = 0
    comparisons: int = 0
    swaps: int = 0
    max_range: int = 0

    def record_partition(self, size: int) -> None:
        self.partitions += 1
        if size > self.max_range:
            self.max_range = size

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "partitions": self.partitions,
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "max_range": self.max_range,
        }


@dataclass(frozen=True)
class SelectionResult:
    """Result of an instrumented selection.

    Attributes:
        value: The k-th smallest element (None when not found)
        found: Whether a value was selected
        k: Requested 1-based rank
        size: Length of the input sequence
        pivot: Pivot strategy used
        stats: Work counters
    """

    value: Any
    found: bool
    k: int
    size: int
    pivot: PivotStrategy
    stats: SelectionStats = field(default_factory=SelectionStats)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        Non-primitive values (e.g. numpy scalars) are converted with ``item()``
        when available, otherwise rendered with ``str``.
        """
        value = self.value
        if value is not None and not isinstance(value, (bool, int, float, str)):
            item = getattr(value, "item", None)
            value = item() if callable(item) else str(value)
        return {
            "value": value,
            "found": self.found,
            "k": self.k,
            "size": self.size,
            "pivot": self.pivot.value,
            "stats": self.stats.to_dict(),
        }
