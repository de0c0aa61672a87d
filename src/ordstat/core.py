"""Core types and enums for ordstat."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar


class SupportsLessEqual(Protocol):
    """Element capability required by selection: ordering via ``<=``."""

    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessEqual)


class PivotStrategy(Enum):
    """How the partitioner picks its pivot within the active range."""

    LEFTMOST = "LEFTMOST"  # sequence[left], deterministic
    RANDOM = "RANDOM"  # uniform index in [left, right], seeded RNG
    MEDIAN_OF_THREE = "MEDIAN_OF_THREE"  # median of left, mid, right


class SelectionOutcome(Enum):
    """Outcome label of a selection request."""

    FOUND = "found"
    NO_RESULT = "no_result"
