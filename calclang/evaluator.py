"""Expression evaluator for CalcLang.

A recursive descent parser that evaluates while it parses. Each grammar
rule is a function taking the :class:`~calclang.cursor.Cursor` and the
variable environment; there is no AST.

Grammar, lowest precedence first:

    expression := term (('+' | '-') term)*
    term       := factor ('*' factor)*
    factor     := ('+' | '-')* atom
    atom       := '(' expression ')' | number | identifier

Errors are raised as :mod:`calclang.exceptions` types and propagate
unchanged through every level of recursion.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from calclang.cursor import Cursor, is_word_char
from calclang.exceptions import (
    ExpressionSyntaxException,
    MalformedNumberException,
    UndefinedVariableException,
)
from calclang.operations import INT_MAX, Op, apply, negate

MAX_DIGITS = len(str(INT_MAX))


def parse_number(token: str, position: int) -> int:
    """
    Convert a literal token to an int.

    Raises:
        MalformedNumberException: On leading zeros, non-digit characters or
            a value above ``INT_MAX``.
    """
    if not token.isdigit() or (len(token) > 1 and token[0] == "0"):
        raise MalformedNumberException(token, position=position)
    if len(token) > MAX_DIGITS:
        raise MalformedNumberException(token, position=position)
    value = int(token)
    if value > INT_MAX:
        raise MalformedNumberException(token, position=position)
    return value


# ---- Highest precedence ----

def parse_atom(cursor: Cursor, env: dict[str, int]) -> int:
    """Parse a parenthesized expression, a number or a variable reference."""
    if cursor.eat("("):
        value = parse_expression(cursor, env)
        if not cursor.eat(")"):
            raise cursor.error("Missing closing parenthesis")
        return value

    if not is_word_char(cursor.ch):
        raise cursor.error("Unexpected character")

    start = cursor.pos
    token = cursor.take_word()
    if token[0].isdigit():
        return parse_number(token, start)
    if token not in env:
        raise UndefinedVariableException(token, position=start)
    return env[token]


def parse_factor(cursor: Cursor, env: dict[str, int]) -> int:
    """Parse any number of leading signs followed by an atom."""
    negative = False
    while True:
        if cursor.eat("-"):
            negative = not negative
        elif not cursor.eat("+"):
            break
    value = parse_atom(cursor, env)
    return negate(value) if negative else value


def parse_term(cursor: Cursor, env: dict[str, int]) -> int:
    """Parse multiplication expressions."""
    result = parse_factor(cursor, env)
    while cursor.eat("*"):
        result = apply(Op.MUL, result, parse_factor(cursor, env))
    return result


# ---- Entry point ----

def parse_expression(cursor: Cursor, env: dict[str, int]) -> int:
    """Parse addition and subtraction expressions."""
    result = parse_term(cursor, env)
    while True:
        if cursor.eat("+"):
            result = apply(Op.ADD, result, parse_term(cursor, env))
        elif cursor.eat("-"):
            result = apply(Op.SUB, result, parse_term(cursor, env))
        else:
            return result


def evaluate(expression: str, env: dict[str, int]) -> int:
    """
    Evaluate an expression against a variable environment.

    The environment is only read, and only for the duration of the call.

    Parameters:
        expression (str): The expression text, without the trailing ``;``.
        env (dict[str, int]): Variables assigned so far.

    Returns:
        int: The value of the expression.

    Raises:
        ExpressionSyntaxException: If the expression does not parse.
        UndefinedVariableException: If a variable is read before assignment.
        MalformedNumberException: If a literal is not a valid integer.
    """
    cursor = Cursor(expression)
    try:
        value = parse_expression(cursor, env)
    except RecursionError:
        raise ExpressionSyntaxException(
            "Expression nested too deeply", position=cursor.pos
        ) from None
    cursor.skip_spaces()
    if not cursor.at_end:
        raise cursor.error("Unexpected trailing character")
    return value


__all__ = ["evaluate"]
