"""CLI command implementations exposed via `unihover.ui.cli`."""

from __future__ import annotations

from .fonts import list_fonts, set_font
from .inspect import inspect
from .scan import scan


__all__ = ["inspect", "list_fonts", "scan", "set_font"]
