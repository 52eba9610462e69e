# src/core/enums/sort_value_projection.py

from enum import Enum

class SortValueProjection(str, Enum):
    """
    Named sort value projections that can be selected for a column
    when a callable cannot be supplied (e.g. over HTTP).
    """
    CASEFOLD = "casefold"
    LENGTH = "length"
    ABSOLUTE = "absolute"
    NUMERIC = "numeric"
    NATURAL = "natural"

    @classmethod
    def list(cls):
        """Returns a list of all projection names."""
        return list(map(lambda c: c.value, cls))
