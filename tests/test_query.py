from __future__ import annotations

import pytest

from unihover.core.config import FontPreference, HoverConfig
from unihover.core.query import query
from unihover.core.renderer import Annotation, InvalidCodePoint


def test_query_end_to_end_unicode_escape() -> None:
    text = "char is \\u00e9 today"
    hover = query(text, text.index("\\u") + 3)

    assert hover is not None
    assert hover.token.text == "\\u00e9"
    assert hover.span == (8, 14)
    assert hover.code_point == 233
    assert hover.is_valid
    assert isinstance(hover.content, Annotation)
    assert hover.content.block_label == "Latin-1 Supplement"
    assert hover.content.hex_label == "00E9"
    assert hover.content.reference_url == "https://symbl.cc/en/00E9/"
    assert hover.markup.is_trusted


def test_query_lone_surrogate_yields_invalid_annotation() -> None:
    hover = query("0xD800", 2)

    assert hover is not None
    assert not hover.is_valid
    assert isinstance(hover.content, InvalidCodePoint)
    assert hover.content.marker == "Invalid Unicode"
    assert not hasattr(hover.content, "glyph")
    assert hover.markup.value == "**Invalid Unicode:** U+D800"


def test_query_out_of_range_value_yields_invalid_annotation() -> None:
    hover = query("0x110000", 0)
    assert hover is not None
    assert isinstance(hover.content, InvalidCodePoint)
    assert hover.content.hex_label == "110000"


@pytest.mark.parametrize("text", ["0x41", "\\u00e9", "0xD800", "u\\1F600"])
def test_query_disabled_configuration_returns_nothing(text: str) -> None:
    assert query(text, 1, HoverConfig(enabled=False)) is None


def test_query_without_token_returns_nothing() -> None:
    assert query("nothing to see", 4) is None


def test_query_uses_font_from_configuration() -> None:
    config = HoverConfig(font_family="Courier New", font_size=10)
    hover = query("0x41", 0, config)
    assert hover is not None
    assert "font-family: 'Courier New', sans-serif" in hover.markup.value
    assert "font-size: 10px" in hover.markup.value


def test_query_font_override_takes_precedence() -> None:
    config = HoverConfig(font_family="Courier New")
    hover = query("0x41", 0, config, font=FontPreference(family="Arial", size=12))
    assert hover is not None
    assert "font-family: 'Arial', sans-serif" in hover.markup.value


def test_query_is_idempotent() -> None:
    text = "arrow u\\2192"
    assert query(text, 8) == query(text, 8)
