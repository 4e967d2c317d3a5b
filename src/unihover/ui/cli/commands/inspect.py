"""Preview the escape sequence found at a given offset."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.markup import escape
from rich.table import Table
import typer

from unihover.core.query import Hover, query
from unihover.core.renderer import Annotation

from .._options import ConfigOption, MarkupOption
from ..state import get_cli_state, render_message
from ..utils import ensure_enabled, resolve_config


def _hover_table(hover: Hover) -> Table:
    table = Table(
        title=f"Escape {escape(hover.token.text)} at {hover.token.start}-{hover.token.end}",
        box=box.SQUARE,
        show_header=False,
        header_style="bold cyan",
    )
    table.add_column("Field", style="magenta")
    table.add_column("Value")

    content = hover.content
    if isinstance(content, Annotation):
        table.add_row("Glyph", escape(content.glyph))
        table.add_row("Unicode", f"U+{content.hex_label}")
        table.add_row("Decimal", str(content.decimal_label))
        table.add_row("Character", escape(content.block_label))
        table.add_row("See", content.reference_url)
    else:
        table.add_row(content.marker, f"[red]U+{content.hex_label}[/red]")
    return table


def inspect(
    text: Annotated[
        str,
        typer.Argument(help="Source text containing escape sequences."),
    ],
    offset: Annotated[
        int,
        typer.Option("--offset", "-o", min=0, help="Cursor offset within TEXT."),
    ] = 0,
    config_path: ConfigOption = None,
    markup: MarkupOption = False,
) -> None:
    """Show the preview for the escape sequence under the cursor."""
    config = resolve_config(config_path)
    ensure_enabled(config)

    hover = query(text, offset, config)
    if hover is None:
        render_message("info", f"No escape sequence at offset {offset}.")
        raise typer.Exit(code=1)

    if markup:
        typer.echo(hover.markup.value)
        return
    get_cli_state().console.print(_hover_table(hover))


__all__ = ["inspect"]
