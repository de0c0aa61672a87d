"""Selection metrics for observability.

Metrics exported:
- ordstat_selections_total{outcome}: Counter of selection requests by outcome
- ordstat_partitions_total{pivot}: Counter of partition passes by pivot strategy
- ordstat_comparisons_total{pivot}: Counter of element comparisons by pivot strategy

These metric names and label keys are stable contracts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ordstat.core import PivotStrategy, SelectionOutcome

METRIC_SELECTIONS = "ordstat_selections_total"
METRIC_PARTITIONS = "ordstat_partitions_total"
METRIC_COMPARISONS = "ordstat_comparisons_total"

LABEL_OUTCOME = "outcome"
LABEL_PIVOT = "pivot"


@dataclass
class SelectionMetrics:
    """In-process counters for selection calls."""

    selections_total: dict[str, int] = field(default_factory=dict)
    """Selection counter by outcome."""

    partitions_total: dict[str, int] = field(default_factory=dict)
    """Partition pass counter by pivot strategy."""

    comparisons_total: dict[str, int] = field(default_factory=dict)
    """Comparison counter by pivot strategy."""

    def record_selection(
        self,
        outcome: SelectionOutcome,
        pivot: PivotStrategy,
        partitions: int = 0,
        comparisons: int = 0,
    ) -> None:
        """Record one selection request and the work it did."""
        key = outcome.value
        self.selections_total[key] = self.selections_total.get(key, 0) + 1
        if partitions:
            p = pivot.value
            self.partitions_total[p] = self.partitions_total.get(p, 0) + partitions
            self.comparisons_total[p] = self.comparisons_total.get(p, 0) + comparisons

    def get_selection_count(self, outcome: SelectionOutcome | None = None) -> int:
        """Get selection count, optionally filtered by outcome."""
        if outcome is not None:
            return self.selections_total.get(outcome.value, 0)
        return sum(self.selections_total.values())

    def get_metrics(self) -> dict[str, Any]:
        """Get all metrics as dict (Prometheus-compatible structure)."""
        return {
            METRIC_SELECTIONS: {
                f"{{{LABEL_OUTCOME}={k!r}}}": v for k, v in self.selections_total.items()
            },
            METRIC_PARTITIONS: {
                f"{{{LABEL_PIVOT}={k!r}}}": v for k, v in self.partitions_total.items()
            },
            METRIC_COMPARISONS: {
                f"{{{LABEL_PIVOT}={k!r}}}": v for k, v in self.comparisons_total.items()
            },
        }

    def to_prometheus_lines(self) -> list[str]:
        """Export metrics in Prometheus text format."""
        lines: list[str] = []

        lines.append(f"# HELP {METRIC_SELECTIONS} Total selection requests")
        lines.append(f"# TYPE {METRIC_SELECTIONS} counter")
        for outcome, count in sorted(self.selections_total.items()):
            lines.append(f'{METRIC_SELECTIONS}{{{LABEL_OUTCOME}="{outcome}"}} {count}')

        lines.append(f"# HELP {METRIC_PARTITIONS} Total partition passes")
        lines.append(f"# TYPE {METRIC_PARTITIONS} counter")
        for pivot, count in sorted(self.partitions_total.items()):
            lines.append(f'{METRIC_PARTITIONS}{{{LABEL_PIVOT}="{pivot}"}} {count}')

        lines.append(f"# HELP {METRIC_COMPARISONS} Total element comparisons")
        lines.append(f"# TYPE {METRIC_COMPARISONS} counter")
        for pivot, count in sorted(self.comparisons_total.items()):
            lines.append(f'{METRIC_COMPARISONS}{{{LABEL_PIVOT}="{pivot}"}} {count}')

        return lines

    def initialize_zero_series(self) -> None:
        """Pre-populate zero-value series for all outcomes. Idempotent."""
        for outcome in SelectionOutcome:
            self.selections_total.setdefault(outcome.value, 0)

    def reset(self) -> None:
        """Reset all metrics."""
        self.selections_total.clear()
        self.partitions_total.clear()
        self.comparisons_total.clear()


# Global metrics instance
_metrics = SelectionMetrics()


def get_selection_metrics() -> SelectionMetrics:
    """Get global selection metrics instance."""
    return _metrics


def reset_selection_metrics() -> None:
    """Reset global selection metrics."""
    _metrics.reset()
