"""
Lint script runner.
"""
import subprocess

def main():
    """
    Lint the CalcLang project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./calclang",
        "./calc.py",
        "--exclude=calclang/tests",
        "--max-line-length=100",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./calclang",
        "./calc.py",
        "--ignore=tests",
    ], check=True)


if __name__ == "__main__":
    main()
