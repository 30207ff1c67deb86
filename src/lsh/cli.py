"""lsh command line entry point."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger

from lsh import __version__
from lsh.config import load_settings
from lsh.core import Shell
from lsh.errors import SetupError, ShellExit, report_error
from lsh.logging_utils import configure_logging
from lsh.readers import batch_lines, interactive_lines

app = typer.Typer(name="lsh", help="A minimal command shell.", add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lsh {__version__}")
        raise typer.Exit()


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    script: Path | None = typer.Argument(None, help="Batch file to run instead of reading stdin"),  # noqa: B008
    version: bool = typer.Option(  # noqa: FBT001
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Run lsh interactively, or run a batch file when one is given."""
    if ctx.args:
        logger.debug("cli.args.error extra={}", ctx.args)
        report_error()
        raise typer.Exit(1)

    settings = load_settings()
    configure_logging(settings.log_level)
    shell = Shell(settings)
    try:
        lines = batch_lines(script) if script is not None else interactive_lines(settings.prompt)
        for line in lines:
            shell.execute(line)
    except ShellExit as exc:
        raise typer.Exit(exc.status) from None
    except (SetupError, MemoryError) as exc:
        logger.debug("cli.fatal kind={} detail={}", type(exc).__name__, exc)
        report_error()
        raise typer.Exit(1) from exc
