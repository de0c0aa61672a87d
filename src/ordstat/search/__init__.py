"""Sequential search utilities."""

from ordstat.search.linear import find_first_equal

__all__ = ["find_first_equal"]
