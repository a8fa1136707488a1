"""Interpreter.

Executes CalcLang programs: a sequence of ``identifier = expression;``
lines evaluated top to bottom.

1. Execution Model
The program text is split into lines on newline characters only. Each
trimmed, non-empty line is checked against the statement shape, its target
identifier is validated, and its expression is handed to
:func:`calclang.evaluator.evaluate` together with the current environment.
Blank lines are skipped.

2. Environment
Each call to :meth:`Interpreter.execute_program` builds a fresh
insertion-ordered dictionary. Bindings therefore report in the order of
their first assignment, and reassignment updates a value without moving it.

3. Error Handling
The first line that fails (bad shape, bad identifier, or any evaluation
error) aborts the run. Its binding is never written and later lines are
not examined. The exception is kept on the returned :class:`Outcome` so
callers can inspect it, but the reported result is a plain failure.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
import sys
from dataclasses import dataclass, field
from enum import Enum

from calclang.evaluator import evaluate
from calclang.exceptions import (
    CalcLangException,
    InvalidIdentifierException,
    InvalidStatementShapeException,
)

IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
STATEMENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\s*=\s*.+;")


class State(str, Enum):
    """
    Interpreter run states.

    A run is ``RUNNING`` while lines are being executed and ends in exactly
    one of the terminal states.
    """
    RUNNING = "running"
    ABORTED = "aborted"
    COMPLETED = "completed"


@dataclass
class Outcome:
    """Result of running a program."""
    state: State
    bindings: dict[str, int] = field(default_factory=dict)
    error: CalcLangException | None = None
    line: int | None = None

    @property
    def ok(self) -> bool:
        """True when every line executed."""
        return self.state is State.COMPLETED


def parse_statement(statement: str, line: int | None = None) -> tuple[str, str]:
    """
    Split a trimmed statement into its target and expression text.

    Args:
        statement (str): A trimmed, non-empty program line.
        line (int | None): Line number for error messages.

    Returns:
        tuple: (identifier, expression) with the ``;`` removed.

    Raises:
        InvalidStatementShapeException: If the line is not ``ident = expr;``.
        InvalidIdentifierException: If the target is not an identifier.
    """
    if not STATEMENT.fullmatch(statement):
        raise InvalidStatementShapeException(statement, line)

    target, expression = statement.split("=", 1)
    identifier = target.strip()
    if not IDENTIFIER.fullmatch(identifier):
        raise InvalidIdentifierException(identifier, line)

    expression = expression.strip()
    return identifier, expression[:-1].rstrip()


class Interpreter:
    """Line-by-line assignment interpreter."""

    def __init__(self, file: str = "<stdin>", debug: bool = False):
        """
        Initialize the interpreter.

        Args:
            file (str): Name of the program source, used in trace output.
            debug (bool): Write a per-line trace to stderr.
        """
        self.file = file
        self.debug = debug

    def _trace(self, message: str) -> None:
        if self.debug:
            print(f"{self.file}: {message}", file=sys.stderr)

    def execute_line(self, statement: str, env: dict[str, int], line: int | None = None) -> str:
        """
        Execute one trimmed statement against ``env``.

        ``env`` is only written once the expression has evaluated.

        Returns:
            str: The identifier that was bound.
        """
        identifier, expression = parse_statement(statement, line)
        try:
            value = evaluate(expression, env)
        except CalcLangException as e:
            e.line = line
            raise
        env[identifier] = value
        self._trace(f"line {line}: {identifier} = {value}")
        return identifier

    def execute_program(self, text: str) -> Outcome:
        """
        Run a complete program.

        Args:
            text (str): Program source, one statement per line.

        Returns:
            Outcome: ``COMPLETED`` with all bindings, or ``ABORTED`` with the
            first error and no bindings.
        """
        env: dict[str, int] = {}
        for line_num, raw in enumerate(text.split("\n"), start=1):
            statement = raw.strip()
            if not statement:
                continue
            try:
                self.execute_line(statement, env, line_num)
            except CalcLangException as e:
                self._trace(f"line {line_num}: {type(e).__name__}: {e}")
                return Outcome(State.ABORTED, error=e, line=line_num)
        return Outcome(State.COMPLETED, bindings=env)


def execute_program(text: str) -> Outcome:
    """Run ``text`` with a fresh :class:`Interpreter`."""
    return Interpreter().execute_program(text)
