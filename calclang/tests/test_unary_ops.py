"""
Tests for sign folding on factors.
"""
import pytest

from calclang.evaluator import evaluate


@pytest.mark.parametrize(
    "source, expected",
    [
        ("-5", -5),
        ("+5", 5),
        ("--5", 5),
        ("-+-5", 5),
        ("+-5", -5),
        ("---5", -5),
        ("- - 5", 5),
        ("3 - -2", 5),
        ("3 * -2", -6),
        ("-(2 + 3)", -5),
        ("-(-(1))", 1),
    ],
)
def test_sign_folding(source, expected):
    assert evaluate(source, {}) == expected


def test_sign_applies_to_variables():
    assert evaluate("-a", {"a": 4}) == -4
    assert evaluate("--a", {"a": 4}) == 4


def test_negating_min_value_wraps():
    assert evaluate("-(0 - 2147483647 - 1)", {}) == -2147483648
