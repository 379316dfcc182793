"""Mapping Typer app factory."""

import typer

from urlmapper.api.mapping.cmd_add import cmd_add
from urlmapper.api.mapping.cmd_check import cmd_check
from urlmapper.api.mapping.cmd_import import cmd_import
from urlmapper.api.mapping.cmd_list import cmd_list
from urlmapper.api.mapping.cmd_remove import cmd_remove
from urlmapper.cli._handle_stage_result import _handle_stage_result


def mapping() -> typer.Typer:
    """Create and configure the mapping Typer app."""
    app = typer.Typer(
        name="mapping",
        help="Manage local prefix to remote base mappings",
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

    @app.command(name="list")
    def list_cmd() -> None:
        """List the effective mappings."""
        _handle_stage_result(cmd_list)()

    @app.command(name="add")
    def add_cmd(
        local_prefix: str = typer.Argument(..., help="Local upload prefix, e.g. wp-content/uploads/audio"),
        remote_base: str = typer.Argument(..., help="Remote base URL, e.g. https://cdn.example/audio/"),
    ) -> None:
        """Append a mapping."""
        _handle_stage_result(cmd_add)(local_prefix, remote_base)

    @app.command(name="remove")
    def remove_cmd(
        local_prefix: str = typer.Argument(..., help="Local upload prefix to remove"),
    ) -> None:
        """Remove every mapping for a local prefix."""
        _handle_stage_result(cmd_remove)(local_prefix)

    @app.command(name="check")
    def check_cmd() -> None:
        """Report duplicate and overlapping local prefixes."""
        _handle_stage_result(cmd_check)()

    @app.command(name="import")
    def import_cmd(
        path: str = typer.Argument(..., help="YAML or JSON settings file with 'mappings' and 'meta_keys'"),
    ) -> None:
        """Replace mappings and meta keys from a settings file."""
        _handle_stage_result(cmd_import)(path)

    return app
