"""
Utility functions shared across CalcLang tests.
"""
from pathlib import Path
import sys

from calclang.interpreter import Interpreter
from calclang.reporting import format_outcome

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def run_source(*lines: str) -> list[str]:
    """
    Run the given program lines and return the reported output lines.
    """
    outcome = Interpreter("<test>").execute_program("\n".join(lines))
    return format_outcome(outcome)
