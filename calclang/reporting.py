"""Formatting of interpreter results.

Bindings are printed one per line as ``name = value`` in the order the
mapping yields them. A failed run prints the single word ``error``.


File: reporting.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from calclang.interpreter import Outcome

ERROR_TOKEN = "error"


def format_bindings(bindings: dict[str, int]) -> list[str]:
    """Return ``name = value`` lines for every binding."""
    return [f"{name} = {value}" for name, value in bindings.items()]


def format_outcome(outcome: Outcome) -> list[str]:
    """
    Render an outcome as output lines.

    Args:
        outcome (Outcome): Result of :meth:`Interpreter.execute_program`.

    Returns:
        list[str]: The bindings on success, or ``["error"]``.
    """
    if not outcome.ok:
        return [ERROR_TOKEN]
    return format_bindings(outcome.bindings)
