"""
CalcLang Interpreter

This is the main entry point for the CalcLang interpreter.

Workflow:
1. The program is read from the file named on the command line, or from
   standard input up to a line reading ``END``.
2. The Interpreter validates each line as an ``identifier = expression;``
   assignment.
3. The Evaluator parses and evaluates each expression against the variables
   assigned so far.
4. The final bindings are printed, or ``error`` if any line failed.

Set ``CALCDEBUG`` to trace each line and the failing error on stderr.
"""
import os
import sys

from calclang.interpreter import Interpreter
from calclang.reporting import format_outcome

SENTINEL = "END"
PROMPT = "Enter your program (type 'END' to finish):"


def print_usage():
    """
    Print usage.
    """
    print()
    print("CalcLang Interpreter")
    print()
    print("Usage:")
    print("    calc [<program.calc>]")
    print()
    print("Arguments:")
    print("    <program.calc>")
    print("        Path to a source file of assignments, one per line:")
    print("            x = 2;")
    print("            y = (x + 1) * 3;")
    print()
    print("Run with no arguments to type a program on standard input,")
    print(f"finishing with a line containing only '{SENTINEL}'.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    CALCDEBUG")
    print("        When set, trace each executed line on stderr.")


def read_program(stream) -> str:
    """
    Read lines from ``stream`` until the sentinel line or end of input.
    """
    lines: list[str] = []
    for line in stream:
        line = line.rstrip("\r\n")
        if line == SENTINEL:
            break
        lines.append(line)
    return "".join(f"{line}\n" for line in lines)


def run_program(code: str, name: str) -> int:
    """
    Run a CalcLang program and print its result.
    """
    interpreter = Interpreter(name, debug=bool(os.environ.get("CALCDEBUG")))
    outcome = interpreter.execute_program(code)
    for line in format_outcome(outcome):
        print(line)
    return 0 if outcome.ok else 1


def run_script(script_name: str) -> int:
    """
    Run a CalcLang source file.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return run_program(code, script_name)


def run_stdin() -> int:
    """
    Prompt for a program on standard input and run it.
    """
    print(PROMPT)
    return run_program(read_program(sys.stdin), "<stdin>")


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: read the program from standard input.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a program and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        return run_stdin()
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 1


def cli() -> None:
    """Console script wrapper around :func:`main`."""
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
