"""Decorator to handle StageResult for CLI display."""

import functools
import sys
from collections.abc import Callable
from typing import TypeVar

import typer

from ._display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Walk up the Typer context chain for the --display value (default yaml)."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, display_format: str = "yaml") -> F:
    """Wrap a command function to display its StageResult.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, YAML or JSON)

    Exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()

        result = func(*args, **kwargs)
        display.status(result.announce)

        for progress_percent, message in result.progress_callback(result):
            display.info(f"Progress: {message} ({progress_percent:.1%})")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")
        if not result.output:
            raise ValueError("progress_callback must set result.output to a non-empty dict")

        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        display.output(result.output, format=display_format)
        sys.exit(0 if result.success else 1)

    return wrapper  # type: ignore[return-value]
