"""Ref Typer app factory."""

import typer

from inlineref.api.inline.cmd_render import cmd_render
from inlineref.api.inline.cmd_resolve import cmd_resolve
from inlineref.api.inline.cmd_show import cmd_show
from inlineref.cli._handle_stage_result import _extract_display_format, _handle_stage_result


def ref() -> typer.Typer:
    """Create and configure the ref Typer app."""
    app = typer.Typer(
        name="ref",
        help="Resolve and render inline references",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="File holding editor markup"),
        owner_type: str = typer.Option(..., "--owner-type", help="Type name of the owning entity"),
        owner_id: str = typer.Option(..., "--owner-id", help="Identity of the owning entity"),
        field: str = typer.Option(..., "--field", help="Content field name"),
    ) -> None:
        """Replace marked links and images by [REF:id] tokens and persist their records."""
        _handle_stage_result(cmd_resolve, _extract_display_format(ctx))(
            path=path, owner_type=owner_type, owner_id=owner_id, field=field
        )

    @app.command(name="render")
    def render_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="File holding normalized text"),
        owner_type: str = typer.Option(..., "--owner-type", help="Type name of the owning entity"),
        owner_id: str = typer.Option(..., "--owner-id", help="Identity of the owning entity"),
        field: str = typer.Option(..., "--field", help="Content field name"),
        editor_markers: bool = typer.Option(False, "--editor-markers", help="Embed skyline-* marker attributes"),
        nullify: bool = typer.Option(False, "--nullify", help="Leave out href/src target attributes"),
    ) -> None:
        """Render [REF:id] tokens back into markup."""
        _handle_stage_result(cmd_render, _extract_display_format(ctx))(
            path=path,
            owner_type=owner_type,
            owner_id=owner_id,
            field=field,
            editor_markers=editor_markers,
            nullify=nullify,
        )

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        owner_type: str = typer.Option(..., "--owner-type", help="Type name of the owning entity"),
        owner_id: str = typer.Option(..., "--owner-id", help="Identity of the owning entity"),
        field: str = typer.Option(..., "--field", help="Content field name"),
    ) -> None:
        """List the reference records owned by an entity field."""
        _handle_stage_result(cmd_show, _extract_display_format(ctx))(
            owner_type=owner_type, owner_id=owner_id, field=field
        )

    return app
