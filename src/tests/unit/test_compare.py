# src/tests/unit/test_compare.py

import math
from decimal import Decimal

import pytest

from src.logic.compare import compare, is_sort_value

def sign(value):
    return (value > 0) - (value < 0)

@pytest.mark.parametrize("a, b, expected", [
    (1, 2, -1),
    (2, 1, 1),
    (3, 3, 0),
    (1.5, 1, 1),
    (Decimal("2.5"), 3, -1),
    ("a", "b", -1),
    ("B", "a", -1),      # code point order, upper case first
    ("abc", "ab", 1),
    ("", "", 0),
    (5, "5", -1),        # numbers sort before strings
    ("5", 5, 1),
])
def test_compare_scalars(a, b, expected):
    assert sign(compare(a, b)) == expected

def test_compare_nan_sorts_after_numbers():
    assert compare(math.nan, 1e308) > 0
    assert compare(-1, math.nan) < 0
    assert compare(math.nan, math.nan) == 0

def test_compare_lists_element_wise():
    assert compare([1, 2, 3], [1, 3]) < 0
    assert compare(["b"], ["a", "z"]) > 0
    assert compare([1, "x"], [1, "x"]) == 0

def test_compare_shorter_prefix_sorts_first():
    """Test the array convention: a prefix-equal shorter list orders before the longer one."""
    assert compare([1, 2], [1, 2, 0]) < 0
    assert compare(["a", "b", "c"], ["a", "b"]) > 0
    assert compare([], [0]) < 0

def test_compare_scalar_against_list():
    assert compare(1, [1]) == 0
    assert compare(1, [1, 0]) < 0
    assert compare(["b"], "a") > 0

def test_compare_unsupported_values_tie():
    assert compare(None, 1) == 0
    assert compare({"a": 1}, {"b": 2}) == 0
    assert compare(True, False) == 0

@pytest.mark.parametrize("value, expected", [
    ("text", True),
    (3, True),
    (2.5, True),
    ([1, "a"], True),
    ((), True),
    (True, False),
    (None, False),
    ({"k": 1}, False),
    ([1, None], False),
    ([[1]], False),
])
def test_is_sort_value(value, expected):
    assert is_sort_value(value) is expected

def test_compare_decimal_nan_values():
    """Test that quiet and signalling Decimal NaNs sort after numbers without raising."""
    assert compare(Decimal("sNaN"), Decimal("1")) > 0
    assert compare(3, Decimal("sNaN")) < 0
    assert compare(Decimal("NaN"), Decimal("sNaN")) == 0
    assert compare([Decimal("1"), Decimal("sNaN")], [Decimal("1"), 2]) > 0
