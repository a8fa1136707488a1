"""Arithmetic on interpreter values.

Values are 32-bit signed integers. Every operator result is wrapped back
into that range with two's complement semantics, so ``2147483647 + 1``
evaluates to ``-2147483648``.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum
import operator

INT_BITS = 32
INT_MAX = 2 ** (INT_BITS - 1) - 1
INT_MIN = -(2 ** (INT_BITS - 1))


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator symbol for nicer debug output.
        """
        return self.value


OPERATORS = {
    Op.ADD: operator.add,
    Op.SUB: operator.sub,
    Op.MUL: operator.mul,
}


def wrap(value: int) -> int:
    """Wrap an arbitrary Python int into the 32-bit signed range."""
    value &= (1 << INT_BITS) - 1
    if value > INT_MAX:
        value -= 1 << INT_BITS
    return value


def apply(op: Op, left: int, right: int) -> int:
    """
    Apply a binary operator to two values.

    Args:
        op (Op): The operator.
        left (int): Left operand.
        right (int): Right operand.

    Returns:
        int: The wrapped result.
    """
    return wrap(OPERATORS[op](left, right))


def negate(value: int) -> int:
    """Negate a value, wrapping ``INT_MIN`` onto itself."""
    return wrap(-value)


__all__ = ["Op", "INT_MAX", "INT_MIN", "apply", "negate", "wrap"]
