"""Core detection, decoding and rendering pipeline."""

from __future__ import annotations

from .blocks import BLOCK_RANGES, BlockRange, classify, find_block
from .config import FontPreference, HoverConfig, load_config, load_config_file
from .decoder import decode, decode_token
from .exceptions import ConfigurationError, PreferenceError, UnihoverError
from .matcher import EscapeToken, find_tokens, match
from .preferences import (
    FONT_CHOICES,
    FontPreferenceStore,
    InMemoryFontStore,
    SettingsFileStore,
    resolve_font_choice,
)
from .query import Hover, query
from .renderer import Annotation, HoverMarkup, InvalidCodePoint, render, to_markup


__all__ = [
    "BLOCK_RANGES",
    "FONT_CHOICES",
    "Annotation",
    "BlockRange",
    "ConfigurationError",
    "EscapeToken",
    "FontPreference",
    "FontPreferenceStore",
    "Hover",
    "HoverConfig",
    "HoverMarkup",
    "InMemoryFontStore",
    "InvalidCodePoint",
    "PreferenceError",
    "SettingsFileStore",
    "UnihoverError",
    "classify",
    "decode",
    "decode_token",
    "find_block",
    "find_tokens",
    "load_config",
    "load_config_file",
    "match",
    "query",
    "render",
    "resolve_font_choice",
    "to_markup",
]
