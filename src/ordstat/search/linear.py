"""Linear search: first index whose element equals a target."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


def find_first_equal(target: Any, sequence: Iterable[Any]) -> int | None:
    """Return the index of the first element ``== target``, or None.

    Single read-only front-to-back pass; the sequence is not modified.
    """
    for i, item in enumerate(sequence):
        if item == target:
            return i
    return None
