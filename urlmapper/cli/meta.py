"""Meta Typer app factory."""

import typer

from urlmapper.api.meta.cmd_add import cmd_add
from urlmapper.api.meta.cmd_get import cmd_get
from urlmapper.api.meta.cmd_keys import cmd_keys
from urlmapper.api.meta.cmd_set_keys import cmd_set_keys
from urlmapper.cli._handle_stage_result import _handle_stage_result


def meta() -> typer.Typer:
    """Create and configure the meta Typer app."""
    app = typer.Typer(
        name="meta",
        help="Object metadata and the rewrite whitelist",
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

    @app.command(name="keys")
    def keys_cmd() -> None:
        """Show the effective meta-key whitelist."""
        _handle_stage_result(cmd_keys)()

    @app.command(name="set-keys")
    def set_keys_cmd(
        keys: list[str] = typer.Argument(None, help="Meta keys to whitelist; none restores the defaults"),
    ) -> None:
        """Replace the meta-key whitelist."""
        _handle_stage_result(cmd_set_keys)("\n".join(keys or []))

    @app.command(name="get")
    def get_cmd(
        object_id: int = typer.Argument(..., help="Object id"),
        meta_key: str = typer.Argument(..., help="Meta key"),
        multi: bool = typer.Option(False, "--multi", help="Return every stored row instead of the latest"),
    ) -> None:
        """Read a metadata value through the rewrite filter."""
        _handle_stage_result(cmd_get)(object_id, meta_key, not multi)

    @app.command(name="add")
    def add_cmd(
        object_id: int = typer.Argument(..., help="Object id"),
        meta_key: str = typer.Argument(..., help="Meta key"),
        value: str = typer.Argument(..., help="Value; JSON arrays and objects are stored structured"),
    ) -> None:
        """Store a metadata row."""
        _handle_stage_result(cmd_add)(object_id, meta_key, value)

    return app
