"""CLI - main entry point."""

import sys
from contextlib import suppress


def _configured_log_level() -> str:
    """Log level from the config file; commands report a broken config themselves."""
    from urlmapper.api.config.URLMapperConfig import URLMapperConfig

    with suppress(ValueError):
        return URLMapperConfig.load().log.level
    return "INFO"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from urlmapper.cli._create_app import _create_app
    from urlmapper.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-v"]):
        from urlmapper.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"urlmap {result.output.get('full_version', result.output.get('version', 'unknown'))}")
        return 0 if result.success else 1

    configure_logging(level=_configured_log_level())

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
