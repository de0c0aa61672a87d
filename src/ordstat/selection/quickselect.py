"""Quickselect: k-th smallest element without a full sort.

Narrows an inclusive range ``[left, right]`` with repeated partition passes,
keeping ``k`` relative to ``left``:

    rank_of_pivot = pivot_index - left + 1
    k == rank_of_pivot  -> answer is sequence[pivot_index]
    k <  rank_of_pivot  -> continue on [left, pivot_index - 1], same k
    k >  rank_of_pivot  -> continue on [pivot_index + 1, right], k - rank_of_pivot

Only one side is ever visited, so expected work is linear in the input size.
The narrowing runs as a loop; stack depth does not grow with the input.

Usage:
    data = [9, 17, 3, 16, 13]
    select(2, data)  # -> 9, data is reordered in place
    select(6, data)  # -> None (rank out of range)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ordstat.config import SelectorConfig
from ordstat.core import PivotStrategy, SelectionOutcome, T
from ordstat.selection.metrics import get_selection_metrics
from ordstat.selection.partition import RangeError, is_partitioned, partition
from ordstat.selection.types import SelectionResult, SelectionStats

if TYPE_CHECKING:
    import random
    from collections.abc import MutableSequence

logger = logging.getLogger(__name__)


def select_in_range(
    sequence: MutableSequence[T],
    k: int,
    left: int,
    right: int,
    *,
    strategy: PivotStrategy = PivotStrategy.LEFTMOST,
    rng: random.Random | None = None,
    stats: SelectionStats | None = None,
    check_invariants: bool = False,
) -> T:
    """Return the k-th smallest element of ``sequence[left..right]``.

    Args:
        sequence: Mutable, indexable sequence (reordered in place)
        k: 1-based rank relative to ``left``
        left: First index of the range
        right: Last index of the range (inclusive)
        strategy: Pivot selection strategy
        rng: RNG for the RANDOM strategy
        stats: Optional counters to update
        check_invariants: Verify every partition result

    Raises:
        RangeError: If the range is outside the sequence, empty, or ``k``
            does not fit in it
        AssertionError: If ``check_invariants`` is set and a partition pass
            breaks its postcondition
    """
    if not 0 <= left <= right < len(sequence):
        raise RangeError(
            f"select_in_range needs 0 <= left <= right < {len(sequence)}, "
            f"got left={left} right={right}"
        )
    if not 1 <= k <= right - left + 1:
        raise RangeError(f"k={k} outside range of size {right - left + 1}")

    while True:
        assert left <= right, f"range collapsed: left={left} right={right} k={k}"
        if left == right:
            return sequence[left]

        pivot_index = partition(sequence, left, right, strategy=strategy, rng=rng, stats=stats)
        if check_invariants and not is_partitioned(sequence, left, right, pivot_index):
            raise AssertionError(
                f"partition invariant broken: left={left} right={right} pivot_index={pivot_index}"
            )

        rank_of_pivot = pivot_index - left + 1
        if k == rank_of_pivot:
            return sequence[pivot_index]
        if k < rank_of_pivot:
            right = pivot_index - 1
        else:
            k -= rank_of_pivot
            left = pivot_index + 1


def select_with_stats(
    k: int,
    sequence: MutableSequence[T],
    *,
    config: SelectorConfig | None = None,
) -> SelectionResult:
    """Select the k-th smallest element and report the work it took.

    An empty sequence or ``k`` outside ``[1, len(sequence)]`` yields a result
    with ``found=False`` and ``value=None``; nothing is raised.
    """
    if config is None:
        config = SelectorConfig()

    size = len(sequence)
    stats = SelectionStats()
    metrics = get_selection_metrics()

    if size == 0 or k < 1 or k > size:
        logger.debug("No result for k=%s on sequence of size %d", k, size)
        metrics.record_selection(SelectionOutcome.NO_RESULT, config.pivot)
        return SelectionResult(
            value=None, found=False, k=k, size=size, pivot=config.pivot, stats=stats
        )

    logger.debug("Selecting k=%d of %d (pivot=%s)", k, size, config.pivot.value)
    rng = config.make_rng() if config.pivot is PivotStrategy.RANDOM else None
    value = select_in_range(
        sequence,
        k,
        0,
        size - 1,
        strategy=config.pivot,
        rng=rng,
        stats=stats,
        check_invariants=config.check_invariants,
    )
    metrics.record_selection(
        SelectionOutcome.FOUND,
        config.pivot,
        partitions=stats.partitions,
        comparisons=stats.comparisons,
    )
    return SelectionResult(value=value, found=True, k=k, size=size, pivot=config.pivot, stats=stats)


def select(
    k: int,
    sequence: MutableSequence[T],
    *,
    config: SelectorConfig | None = None,
) -> T | None:
    """Return the k-th smallest element (1-based) or None.

    ``sequence`` is reordered in place; no element is added or removed.

    Args:
        k: 1-based rank (1 -> minimum)
        sequence: Mutable, indexable sequence of mutually comparable elements
        config: Selector configuration (defaults to leftmost pivot)

    Returns:
        The element of rank ``k``, or None for an empty sequence or a rank
        outside ``[1, len(sequence)]``
    """
    return select_with_stats(k, sequence, config=config).value
