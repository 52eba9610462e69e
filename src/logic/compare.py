# src/logic/compare.py

import math
from decimal import Decimal
from typing import Any

# Ordering used for every sort value:
# - numbers compare numerically, NaN after every other number
# - strings compare by Unicode code point (locale independent)
# - a number sorts before a string
# - lists compare element-wise; a shorter list that is a prefix of a longer one sorts first
# - anything else gives no ordering signal (0)


def is_number(value: Any) -> bool:
    """bool is an int subclass but is not treated as a number."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_scalar_sort_value(value: Any) -> bool:
    return isinstance(value, str) or is_number(value)


def is_sort_value(value: Any) -> bool:
    """
    Checks whether a value can be compared directly: a string, a number,
    or a list/tuple made only of strings and numbers.
    """
    if isinstance(value, (list, tuple)):
        return all(is_scalar_sort_value(item) for item in value)
    return is_scalar_sort_value(value)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def _compare_scalars(a: Any, b: Any) -> int:
    a_is_number, b_is_number = is_number(a), is_number(b)
    if a_is_number and b_is_number:
        a_nan, b_nan = _is_nan(a), _is_nan(b)
        if a_nan or b_nan:
            return int(a_nan) - int(b_nan)
        return (a > b) - (a < b)
    if isinstance(a, str) and isinstance(b, str):
        return (a > b) - (a < b)
    if a_is_number and isinstance(b, str):
        return -1
    if isinstance(a, str) and b_is_number:
        return 1
    return 0


def _compare_sequences(a: list | tuple, b: list | tuple) -> int:
    for item_a, item_b in zip(a, b):
        order = _compare_scalars(item_a, item_b)
        if order != 0:
            return order
    return (len(a) > len(b)) - (len(a) < len(b))


def compare(a: Any, b: Any) -> int:
    """
    Compares two sort values, returning a negative number, zero or a positive number
    when a sorts before, together with or after b.
    A scalar compared with a list behaves like a one-element list.
    """
    a_is_seq = isinstance(a, (list, tuple))
    b_is_seq = isinstance(b, (list, tuple))
    if a_is_seq or b_is_seq:
        return _compare_sequences(a if a_is_seq else [a], b if b_is_seq else [b])
    return _compare_scalars(a, b)
