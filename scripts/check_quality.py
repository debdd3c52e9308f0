#!/usr/bin/env python3
"""Ruff formatting, ruff linting and mypy over the package.

Usage:
    scripts/check_quality.py          # check only
    scripts/check_quality.py --fix    # let ruff rewrite what it can
"""

import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()

LINT_TARGETS = ["inlineref", "tests", "scripts"]
TYPE_TARGETS = ["inlineref"]


def run_command(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")

    tool_path = Path(sys.executable).parent / command[0]
    if tool_path.exists():
        command = [str(tool_path), *command[1:]]

    try:
        result = subprocess.run(command, check=False, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[bold red]Error running {description}: {e}[/bold red]")
        sys.exit(1)

    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Run formatting, linting and type checks")
    parser.add_argument("--fix", action="store_true", help="Auto-fix issues where possible")
    args = parser.parse_args()

    if args.fix:
        checks = [
            (["ruff", "format", *LINT_TARGETS], "Ruff Formatting (Fix)"),
            (["ruff", "check", "--fix", *LINT_TARGETS], "Ruff Linting (Fix)"),
        ]
    else:
        checks = [
            (["ruff", "format", "--check", *LINT_TARGETS], "Ruff Formatting (Check)"),
            (["ruff", "check", *LINT_TARGETS], "Ruff Linting (Check)"),
        ]
    checks.append((["mypy", *TYPE_TARGETS], "Mypy Type Checking"))

    results = [run_command(command, description) for command, description in checks]
    if not all(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
