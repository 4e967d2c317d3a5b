"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


OUTPUT_PANEL = "Output"
CONFIG_PANEL = "Configuration"

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="YAML settings file (defaults to settings.yml in the user directory).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=CONFIG_PANEL,
    ),
]

MarkupOption = Annotated[
    bool,
    typer.Option(
        "--markup",
        help="Print the raw tooltip markup instead of a summary table.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]
