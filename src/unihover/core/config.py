"""Configuration models read by the hover pipeline.

HoverConfig

`enabled` (`bool`)
: Toggle the hover preview. When `False`, queries return nothing regardless
  of the text under the cursor.

`font_family` (`str`, alias `fontFamily`)
: CSS font family used to draw the glyph. Defaults to `Arial Unicode MS`.

`font_size` (`int`, alias `fontSize`)
: Base font size in pixels. The glyph itself is drawn at twice this size.
  Defaults to `24`.

Both the camelCase host keys and the snake_case field names are accepted.
Unknown keys are ignored so that a shared settings file can hold other
entries.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from unihover.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "Arial Unicode MS"
DEFAULT_FONT_SIZE = 24


class FontPreference(BaseModel):
    """Font used to draw the preview glyph."""

    model_config = ConfigDict(frozen=True)

    family: str = DEFAULT_FONT_FAMILY
    size: int = DEFAULT_FONT_SIZE


class HoverConfig(BaseModel):
    """Settings snapshot taken once per hover query."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    enabled: bool = True
    font_family: str = Field(default=DEFAULT_FONT_FAMILY, alias="fontFamily", min_length=1)
    font_size: int = Field(default=DEFAULT_FONT_SIZE, alias="fontSize", gt=0)

    @property
    def font(self) -> FontPreference:
        return FontPreference(family=self.font_family, size=self.font_size)


def _field_keys(rejected: set[str]) -> set[str]:
    keys: set[str] = set()
    for name, field in HoverConfig.model_fields.items():
        candidates = {name, field.alias or name}
        if candidates & rejected:
            keys |= candidates
    return keys


def load_config(data: Mapping[str, Any] | None = None) -> HoverConfig:
    """Build a configuration from host settings, falling back to defaults.

    Invalid entries are dropped one field at a time so that a bad font size
    does not discard a valid font family.
    """
    if data is None:
        return HoverConfig()
    if not isinstance(data, Mapping):
        logger.warning("Ignoring configuration of type %s; using defaults.", type(data).__name__)
        return HoverConfig()

    payload = dict(data)
    try:
        return HoverConfig.model_validate(payload)
    except ValidationError as exc:
        rejected = {str(error["loc"][0]) for error in exc.errors() if error.get("loc")}
        logger.warning(
            "Ignoring invalid configuration values: %s", ", ".join(sorted(rejected)) or "-"
        )
        dropped = _field_keys(rejected)

    cleaned = {key: value for key, value in payload.items() if key not in dropped}
    try:
        return HoverConfig.model_validate(cleaned)
    except ValidationError:
        return HoverConfig()


def _unusable_settings(
    message: str, *, strict: bool, cause: BaseException | None = None
) -> dict[str, Any]:
    if strict:
        raise ConfigurationError(message) from cause
    logger.warning(message)
    return {}


def read_settings(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load the YAML settings mapping at ``path``.

    Missing files yield an empty mapping. Unreadable or malformed files also
    yield an empty mapping unless ``strict`` is set, in which case they raise
    :class:`ConfigurationError` so that writers leave them untouched.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError) as exc:
        return _unusable_settings(
            f"Unable to read settings file {path}: {exc}", strict=strict, cause=exc
        )

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        return _unusable_settings(
            f"Settings file {path} is not valid YAML: {exc}", strict=strict, cause=exc
        )

    if data is None:
        return {}
    if not isinstance(data, dict):
        return _unusable_settings(
            f"Settings file {path} does not contain a mapping.", strict=strict
        )
    return data


def load_config_file(path: Path) -> HoverConfig:
    return load_config(read_settings(path))


__all__ = [
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "FontPreference",
    "HoverConfig",
    "load_config",
    "load_config_file",
    "read_settings",
]
