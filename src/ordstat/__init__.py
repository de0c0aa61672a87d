"""ordstat - order-statistic selection.

Finds the k-th smallest element of a mutable sequence in place, without a
full sort (quickselect over a Lomuto partition).

Note: version is sourced from package metadata (pyproject.toml).
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from ordstat.config import SelectorConfig
from ordstat.core import PivotStrategy
from ordstat.search import find_first_equal
from ordstat.selection import select, select_with_stats


def _pkg_version() -> str:
    try:
        return version("ordstat")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _pkg_version()

__all__ = [
    "PivotStrategy",
    "SelectorConfig",
    "__version__",
    "find_first_equal",
    "select",
    "select_with_stats",
]
