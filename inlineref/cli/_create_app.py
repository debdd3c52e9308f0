"""Create the main Typer CLI app."""

import logging
from pathlib import Path

import typer

from inlineref import __version__
from inlineref.cli.ref import ref
from inlineref.logging_config import setup_logging


def _configure_logging() -> None:
    """Apply the configured log level, or INFO when no config file exists yet."""
    from inlineref.api.config.InlineRefConfig import InlineRefConfig

    try:
        log_config = InlineRefConfig.load().log
    except ValueError:
        setup_logging(logging.INFO)
        return
    setup_logging(log_config.numeric_level, Path(log_config.file).expanduser() if log_config.file else None)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Inline reference CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(ref(), name="ref")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
    ) -> None:
        if version:
            typer.echo(f"irefc {__version__}")
            raise typer.Exit()

        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        _configure_logging()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
