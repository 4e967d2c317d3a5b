"""List every escape sequence found in a file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich import box
from rich.markup import escape
from rich.table import Table
import typer

from unihover.core.decoder import decode_token
from unihover.core.matcher import find_tokens
from unihover.core.renderer import Annotation, render

from .._options import ConfigOption
from ..state import emit_error, get_cli_state, render_message
from ..utils import ensure_enabled, line_and_column, resolve_config


def scan(
    path: Annotated[
        Path,
        typer.Argument(
            metavar="PATH",
            help="Text file to scan for escape sequences.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    config_path: ConfigOption = None,
) -> None:
    """Print a table of the escape sequences in PATH."""
    config = resolve_config(config_path)
    ensure_enabled(config)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        emit_error(f"Unable to read {path}.", exception=exc)
        raise typer.Exit(code=1) from exc

    table = Table(
        title=f"Escape sequences in {escape(path.name)}",
        box=box.SQUARE,
        header_style="bold cyan",
    )
    table.add_column("Position", style="magenta")
    table.add_column("Token")
    table.add_column("Code point")
    table.add_column("Character", style="green")

    rows = 0
    for token in find_tokens(text):
        code_point = decode_token(token)
        if code_point is None:
            continue
        line, column = line_and_column(text, token.start)
        result = render(code_point, config.font)
        if isinstance(result, Annotation):
            label = escape(result.block_label)
        else:
            label = f"[red]{result.marker}[/red]"
        table.add_row(f"{line}:{column}", escape(token.text), f"U+{result.hex_label}", label)
        rows += 1

    if not rows:
        render_message("info", f"No escape sequences found in {path.name}.")
        return
    get_cli_state().console.print(table)


__all__ = ["scan"]
