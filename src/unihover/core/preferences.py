"""Font preference storage shared by the renderer and the font picker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from unihover.core.config import FontPreference, HoverConfig, load_config, read_settings
from unihover.core.exceptions import ConfigurationError, PreferenceError
from unihover.core.user_dir import SETTINGS_FILENAME, get_user_dir


logger = logging.getLogger(__name__)

FONT_CHOICES: tuple[str, ...] = (
    "Arial Unicode MS",
    "Segoe UI Symbol",
    "Segoe UI Emoji",
    "Apple Color Emoji",
    "Noto Color Emoji",
    "SF Pro Display",
    "Helvetica Neue",
    "Arial",
    "Times New Roman",
    "Courier New",
)


def _validate_family(family: str) -> str:
    cleaned = family.strip() if isinstance(family, str) else ""
    if not cleaned:
        raise PreferenceError("Font family must be a non-empty string.")
    return cleaned


def resolve_font_choice(entry: str) -> str:
    """Map a picker entry (name or 1-based index) onto ``FONT_CHOICES``."""
    value = entry.strip()
    if value.isdigit():
        index = int(value)
        if 1 <= index <= len(FONT_CHOICES):
            return FONT_CHOICES[index - 1]
        raise PreferenceError(f"Font index must be between 1 and {len(FONT_CHOICES)}, got {index}.")
    lowered = value.casefold()
    for family in FONT_CHOICES:
        if family.casefold() == lowered:
            return family
    raise PreferenceError(f"Unknown font '{value}'.")


@runtime_checkable
class FontPreferenceStore(Protocol):
    """Read/write access to the font used by the renderer.

    ``get`` after a successful ``set(family)`` returns ``family`` until the
    next ``set``.
    """

    def get(self) -> FontPreference: ...

    def set(self, family: str) -> None: ...


class InMemoryFontStore:
    """Font preference held in memory, seeded from a configuration snapshot."""

    def __init__(self, config: HoverConfig | None = None) -> None:
        config = config or HoverConfig()
        self._preference = config.font

    def get(self) -> FontPreference:
        return self._preference

    def set(self, family: str) -> None:
        family = _validate_family(family)
        self._preference = FontPreference(family=family, size=self._preference.size)


class SettingsFileStore:
    """Font preference persisted in the YAML settings file.

    Every ``get`` re-reads the file so that edits made by other processes are
    picked up. Unrelated keys in the file are preserved on write, and a file
    that cannot be parsed is never overwritten.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or get_user_dir().data_path(SETTINGS_FILENAME, create=False)

    def config(self) -> HoverConfig:
        return load_config(read_settings(self.path))

    def get(self) -> FontPreference:
        return self.config().font

    def set(self, family: str) -> None:
        family = _validate_family(family)
        settings: dict[str, Any] = read_settings(self.path, strict=True)
        settings.pop("font_family", None)
        settings["fontFamily"] = family
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                yaml.safe_dump(settings, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigurationError(f"Unable to write settings file {self.path}: {exc}") from exc
        logger.info("Font preference set to %s in %s", family, self.path)


__all__ = [
    "FONT_CHOICES",
    "FontPreferenceStore",
    "InMemoryFontStore",
    "SettingsFileStore",
    "resolve_font_choice",
]
