"""
Tests for expression errors raised by the evaluator.
"""
import pytest

from calclang.evaluator import evaluate
from calclang.exceptions import (
    CalcLangException,
    ExpressionSyntaxException,
    MalformedNumberException,
    UndefinedVariableException,
)


@pytest.mark.parametrize("source", ["007", "00", "01"])
def test_leading_zeros_rejected(source):
    with pytest.raises(MalformedNumberException) as exc:
        evaluate(source, {})
    assert exc.value.kind == "MalformedNumber"
    assert exc.value.literal == source


def test_letters_after_digits_rejected():
    with pytest.raises(MalformedNumberException):
        evaluate("12ab", {})


def test_literal_out_of_range_rejected():
    assert evaluate("2147483647", {}) == 2147483647
    with pytest.raises(MalformedNumberException):
        evaluate("2147483648", {})


def test_undefined_variable():
    with pytest.raises(UndefinedVariableException) as exc:
        evaluate("b + 1", {"a": 1})
    assert exc.value.varname == "b"
    assert exc.value.position == 0
    assert "Undefined variable 'b'" in str(exc.value)


def test_missing_closing_parenthesis():
    with pytest.raises(ExpressionSyntaxException, match="Missing closing parenthesis"):
        evaluate("(1 + 2", {})


@pytest.mark.parametrize("source", ["1 2", "1 )", "a b", "3 / 4"])
def test_trailing_characters(source):
    with pytest.raises(ExpressionSyntaxException, match="Unexpected trailing character"):
        evaluate(source, {"a": 1})


@pytest.mark.parametrize("source", ["", "   ", "1 +", "* 2", "1 + #", "()"])
def test_unexpected_characters(source):
    with pytest.raises(ExpressionSyntaxException, match="Unexpected character"):
        evaluate(source, {})


def test_tabs_are_not_skipped():
    with pytest.raises(ExpressionSyntaxException):
        evaluate("1 +\t2", {})


def test_syntax_error_reports_position():
    with pytest.raises(ExpressionSyntaxException) as exc:
        evaluate("1 + $", {})
    assert exc.value.position == 4
    assert "'$'" in str(exc.value)


def test_errors_share_base_and_syntax_error_type():
    with pytest.raises(CalcLangException):
        evaluate("(", {})
    with pytest.raises(SyntaxError):
        evaluate("(", {})


def test_overlong_literal_rejected():
    source = "9" * 5000
    with pytest.raises(MalformedNumberException):
        evaluate(source, {})
    with pytest.raises(MalformedNumberException):
        evaluate("10000000000", {})


def test_deep_nesting_is_a_syntax_error():
    source = "(" * 5000 + "1" + ")" * 5000
    with pytest.raises(ExpressionSyntaxException, match="nested too deeply"):
        evaluate(source, {})


def test_moderate_nesting_still_evaluates():
    assert evaluate("(" * 50 + "1" + ")" * 50, {}) == 1
