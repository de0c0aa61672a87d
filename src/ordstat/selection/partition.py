"""In-place Lomuto partitioning.

Rearranges ``sequence[left..right]`` (inclusive) around a pivot value so that

    ┌──────────┬─┬──────────┐
    │   <= x   │x│   >= x   │
    └──────────┴─┴──────────┘
    left       p        right

and returns ``p``. The scan always pivots on ``sequence[left]``; non-default
strategies first swap their chosen index into ``left``.

Equal elements may land on either side. With the LEFTMOST strategy an already
sorted (or reverse sorted) range degrades selection to O(n^2); this is accepted,
and RANDOM / MEDIAN_OF_THREE are available when inputs may be adversarial.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from ordstat.core import PivotStrategy, T

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

    from ordstat.selection.types import SelectionStats


class RangeError(Exception):
    """Non-retryable contract violation: malformed range bounds or rank.

    Raised only by the public range-level entry points. ``select`` never
    produces an invalid range, so callers of ``select`` never see it.
    """


def choose_pivot(
    sequence: Sequence[T],
    left: int,
    right: int,
    strategy: PivotStrategy = PivotStrategy.LEFTMOST,
    rng: random.Random | None = None,
) -> int:
    """Return the index of the pivot to use for ``[left, right]``."""
    if strategy is PivotStrategy.LEFTMOST:
        return left
    if strategy is PivotStrategy.RANDOM:
        if rng is None:
            rng = random.Random()
        return rng.randint(left, right)

    # MEDIAN_OF_THREE
    mid = (left + right) // 2
    a, b, c = sequence[left], sequence[mid], sequence[right]
    if a <= b:
        if b <= c:
            return mid
        return right if a <= c else left
    if a <= c:
        return left
    return right if b <= c else mid


def partition(
    sequence: MutableSequence[T],
    left: int,
    right: int,
    *,
    strategy: PivotStrategy = PivotStrategy.LEFTMOST,
    rng: random.Random | None = None,
    stats: SelectionStats | None = None,
) -> int:
    """Partition ``sequence[left..right]`` in place and return the pivot index.

    Args:
        sequence: Mutable, indexable sequence (reordered in place)
        left: First index of the range
        right: Last index of the range (inclusive)
        strategy: Pivot selection strategy
        rng: RNG for the RANDOM strategy
        stats: Optional counters to update

    Returns:
        Final index of the pivot element

    Raises:
        RangeError: If not ``0 <= left < right < len(sequence)``
    """
    if not 0 <= left < right < len(sequence):
        raise RangeError(
            f"partition needs 0 <= left < right < {len(sequence)}, got left={left} right={right}"
        )

    chosen = choose_pivot(sequence, left, right, strategy, rng)
    if chosen != left:
        sequence[left], sequence[chosen] = sequence[chosen], sequence[left]
        if stats is not None:
            stats.swaps += 1

    pivot = sequence[left]
    i = left
    swaps = 0
    for j in range(left + 1, right + 1):
        if sequence[j] <= pivot:
            i += 1
            if i != j:
                sequence[i], sequence[j] = sequence[j], sequence[i]
                swaps += 1
    if i != left:
        sequence[left], sequence[i] = sequence[i], sequence[left]
        swaps += 1

    if stats is not None:
        stats.record_partition(right - left + 1)
        stats.comparisons += right - left
        stats.swaps += swaps
    return i


def is_partitioned(
    sequence: Sequence[T],
    left: int,
    right: int,
    pivot_index: int,
) -> bool:
    """Check the partition postcondition for ``[left, right]`` around ``pivot_index``."""
    if not left <= pivot_index <= right:
        return False
    pivot = sequence[pivot_index]
    return all(sequence[i] <= pivot for i in range(left, pivot_index)) and all(
        pivot <= sequence[i] for i in range(pivot_index + 1, right + 1)
    )
