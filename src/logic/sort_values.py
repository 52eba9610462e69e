# src/logic/sort_values.py

import math
import re
from typing import Any, Callable

from src.core.enums.sort_value_projection import SortValueProjection
from src.logic.compare import is_number

_DIGITS = re.compile(r"(\d+)")


def casefold_value(value: Any) -> Any:
    """Case-insensitive text; lists are folded element by element."""
    if isinstance(value, str):
        return value.casefold()
    if isinstance(value, (list, tuple)):
        return [casefold_value(item) for item in value]
    return value


def length_value(value: Any) -> int:
    if isinstance(value, (str, list, tuple, dict)):
        return len(value)
    return 0


def absolute_value(value: Any) -> Any:
    return abs(value) if is_number(value) else value


def numeric_value(value: Any) -> float:
    """Parses the value as a number; anything unparseable becomes NaN and sorts last."""
    if isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def natural_value(value: Any) -> list:
    """
    Splits text into alternating text and integer chunks so that "row10" sorts after "row9".
    """
    text = "" if value is None else str(value).strip()
    chunks: list = []
    for part in _DIGITS.split(text):
        if not part:
            continue
        chunks.append(int(part) if part.isdecimal() else part.casefold())
    return chunks


_PROJECTIONS: dict[SortValueProjection, Callable[[Any], Any]] = {
    SortValueProjection.CASEFOLD: casefold_value,
    SortValueProjection.LENGTH: length_value,
    SortValueProjection.ABSOLUTE: absolute_value,
    SortValueProjection.NUMERIC: numeric_value,
    SortValueProjection.NATURAL: natural_value,
}


def get_projection(projection: SortValueProjection) -> Callable[[Any], Any]:
    """Returns the get_sort_value function registered for a projection name."""
    try:
        return _PROJECTIONS[SortValueProjection(projection)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown sort value projection: {projection}. Expected one of {SortValueProjection.list()}")

