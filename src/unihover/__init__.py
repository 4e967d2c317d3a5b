"""Primary public API for unihover."""

from __future__ import annotations

from unihover.core import (
    BLOCK_RANGES,
    FONT_CHOICES,
    Annotation,
    BlockRange,
    EscapeToken,
    FontPreference,
    FontPreferenceStore,
    Hover,
    HoverConfig,
    HoverMarkup,
    InMemoryFontStore,
    InvalidCodePoint,
    SettingsFileStore,
    classify,
    decode,
    find_tokens,
    load_config,
    match,
    query,
    render,
    to_markup,
)
from unihover.core.exceptions import ConfigurationError, PreferenceError, UnihoverError
from unihover.core.user_dir import (
    UnihoverUserDir,
    configure_user_dir,
    get_user_dir,
    user_dir_context,
)
from unihover.version import get_version


__version__ = get_version()


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
    "UnihoverUserDir",
    "__version__",
    "classify",
    "configure_user_dir",
    "decode",
    "find_tokens",
    "get_user_dir",
    "load_config",
    "match",
    "query",
    "render",
    "to_markup",
    "user_dir_context",
]
