"""Rewrite Typer app factory."""

import typer

from urlmapper.api.rewrite.cmd_file import cmd_file
from urlmapper.api.rewrite.cmd_pairs import cmd_pairs
from urlmapper.api.rewrite.cmd_string import cmd_string
from urlmapper.cli._handle_stage_result import _handle_stage_result


def rewrite() -> typer.Typer:
    """Create and configure the rewrite Typer app."""
    app = typer.Typer(
        name="rewrite",
        help="Apply the configured mappings",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="pairs")
    def pairs_cmd() -> None:
        """Show the derived search/replace pairs in application order."""
        _handle_stage_result(cmd_pairs)()

    @app.command(name="string")
    def string_cmd(
        text: str = typer.Argument(..., help="Text to rewrite"),
    ) -> None:
        """Rewrite a string."""
        _handle_stage_result(cmd_string)(text)

    @app.command(name="file")
    def file_cmd(
        path: str = typer.Argument(..., help="File to rewrite"),
        output: str = typer.Option("", "--output", "-o", help="Write the rewritten text here"),
    ) -> None:
        """Rewrite the text of a file without modifying it."""
        _handle_stage_result(cmd_file)(path, output)

    return app
