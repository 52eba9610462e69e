# src/core/enums/sort_order.py

from enum import Enum

class SortOrder(str, Enum):
    """
    Direction of a single sort key.
    Inheriting from 'str' keeps the values usable as plain strings on the wire.
    """
    ASC = "asc"
    DESC = "desc"

    @property
    def factor(self) -> int:
        """Returns +1 for ascending and -1 for descending order."""
        return 1 if self is SortOrder.ASC else -1
