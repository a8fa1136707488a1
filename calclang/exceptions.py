"""Errors.

Every failure the interpreter can report is a :class:`CalcLangException`
carrying a ``kind`` tag. The evaluator raises them from whatever depth of
the recursive descent it has reached; the statement interpreter catches them
once, at the line boundary, and aborts the run.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class CalcLangException(Exception):
    """
    Base class for all interpreter errors.
    """
    kind = "Error"

    def __init__(self, message, line=None, position=None):
        self.line = line
        self.position = position
        if position is not None:
            message += f" at position {position}"
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)


class InvalidStatementShapeException(CalcLangException):
    """
    Error for lines that are not of the form ``identifier = expression;``.
    """
    kind = "InvalidStatementShape"

    def __init__(self, statement, line=None):
        self.statement = statement
        super().__init__(f"Invalid statement '{statement}'", line)


class InvalidIdentifierException(CalcLangException):
    """
    Error for an assignment target that is not a valid identifier.
    """
    kind = "InvalidIdentifier"

    def __init__(self, identifier, line=None):
        self.identifier = identifier
        super().__init__(f"Invalid identifier '{identifier}'", line)


class ExpressionSyntaxException(CalcLangException, SyntaxError):
    """
    Error for expressions that do not parse.
    """
    kind = "SyntaxError"


class UndefinedVariableException(CalcLangException):
    """
    Error for undefined variables.
    """
    kind = "UndefinedVariable"

    def __init__(self, varname, line=None, position=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, position)


class MalformedNumberException(CalcLangException):
    """
    Error for integer literals with leading zeros, stray letters or
    values outside the 32-bit signed range.
    """
    kind = "MalformedNumber"

    def __init__(self, literal, line=None, position=None):
        self.literal = literal
        super().__init__(f"Malformed number '{literal}'", line, position)
