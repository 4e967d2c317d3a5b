"""Inspect and choose the preview font."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.table import Table
import typer

from unihover.core.exceptions import UnihoverError
from unihover.core.preferences import FONT_CHOICES, SettingsFileStore, resolve_font_choice

from ..state import emit_error, get_cli_state


def list_fonts() -> None:
    """Print the candidate fonts and mark the current selection."""
    store = SettingsFileStore()
    current = store.get()

    table = Table(
        title="Unicode Preview Fonts",
        box=box.SQUARE,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right")
    table.add_column("Font", style="magenta")
    table.add_column("Current", justify="center")
    for index, family in enumerate(FONT_CHOICES, start=1):
        table.add_row(str(index), family, "*" if family == current.family else "")

    console = get_cli_state().console
    console.print(table)
    console.print(f"Current font: {current.family} ({current.size}px)")


def _prompt_for_font(current: str) -> str:
    typer.echo("Select Unicode Preview Font")
    for index, family in enumerate(FONT_CHOICES, start=1):
        typer.echo(f"  {index:2d}. {family}")
    return typer.prompt(f"Current font: {current}. Choose a number or name")


def set_font(
    family: Annotated[
        str | None,
        typer.Argument(
            metavar="[FONT]",
            help="Font name or its number in `unihover fonts`. Prompts when omitted.",
        ),
    ] = None,
) -> None:
    """Choose the font used to draw preview glyphs."""
    store = SettingsFileStore()
    entry = family if family is not None else _prompt_for_font(store.get().family)

    try:
        selected = resolve_font_choice(entry)
        store.set(selected)
    except UnihoverError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Unicode preview font set to: {selected}")


__all__ = ["list_fonts", "set_font"]
