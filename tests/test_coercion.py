import math

import pytest

from employee_api.app.core.coercion import to_number, to_positive_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        (55000, 55000),
        (2.5, 2.5),
        (3.0, 3),
        ("55000", 55000),
        ("  2021 ", 2021),
        ("-5", -5),
        (".5", 0.5),
        ("1e3", 1000),
        ("0x10", 16),
        ("0b101", 5),
        ("", 0),
        ("   ", 0),
        (None, 0),
        (True, 1),
        (False, 0),
    ],
)
def test_to_number_accepts_numeric_input(raw, expected):
    result = to_number(raw)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "raw",
    ["abc", "12abc", "1_000", "nan", "Infinity", "inf", "--5", "٣", "５５", "٢٠٢٢", [], {}, [1], math.nan, math.inf],
)
def test_to_number_rejects_non_numbers(raw):
    assert to_number(raw) is None


@pytest.mark.parametrize("raw, expected", [(1, 1), ("7", 7), ("7.0", 7), (True, 1)])
def test_to_positive_int(raw, expected):
    assert to_positive_int(raw) == expected


@pytest.mark.parametrize("raw", [0, -3, "0", "", None, "abc", 2.5, "1.5"])
def test_to_positive_int_rejects(raw):
    assert to_positive_int(raw) is None
