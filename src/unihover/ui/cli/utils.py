"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from unihover.core.config import HoverConfig, load_config_file
from unihover.core.preferences import SettingsFileStore

from .state import render_message


def resolve_config(config_path: Path | None) -> HoverConfig:
    """Load the settings file given on the command line or the user default."""
    if config_path is not None:
        return load_config_file(config_path)
    return SettingsFileStore().config()


def ensure_enabled(config: HoverConfig) -> None:
    """Exit early when the preview is switched off in the settings."""
    if config.enabled:
        return
    render_message("info", "Unicode hover preview is disabled in the settings.")
    raise typer.Exit(code=1)


def line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Return 1-based line and column numbers for ``offset``."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


__all__ = ["ensure_enabled", "line_and_column", "resolve_config"]
