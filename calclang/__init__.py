"""CalcLang.

A line-oriented interpreter for integer assignment programs.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from calclang.evaluator import evaluate
from calclang.interpreter import Interpreter, Outcome, State, execute_program

__all__ = ["Interpreter", "Outcome", "State", "evaluate", "execute_program"]
