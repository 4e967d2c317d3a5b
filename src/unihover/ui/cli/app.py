"""Typer application wiring for the unihover CLI."""

from __future__ import annotations

from pathlib import Path

from rich.traceback import Traceback
import typer

from unihover.core.user_dir import configure_user_dir
from unihover.version import get_version

from .commands import inspect, list_fonts, scan, set_font
from .state import (
    debug_enabled,
    emit_error,
    get_cli_state,
    install_log_handler,
    set_cli_state,
)


app = typer.Typer(
    help="Preview Unicode escape sequences such as \\u00e9, \\x41, u\\1F600 or 0xFF.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"unihover {get_version()}")
        raise typer.Exit(code=0)


@app.callback()
def _app_root(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help=("Increase CLI verbosity. Combine multiple times for additional diagnostics."),
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
    ),
    home: Path | None = typer.Option(
        None,
        "--home",
        help="Override the user directory holding settings.yml.",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the installed version and exit.",
    ),
) -> None:
    _ = version
    ctx.obj = get_cli_state()
    set_cli_state(verbosity=verbose, debug=debug)
    install_log_handler(verbose)
    if home is not None:
        configure_user_dir(root=home)


app.command(name="inspect")(inspect)
app.command(name="scan")(scan)
app.command(name="fonts")(list_fonts)
app.command(name="set-font")(set_font)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
