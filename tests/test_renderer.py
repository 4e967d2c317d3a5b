from __future__ import annotations

import pytest

from unihover.core.config import FontPreference
from unihover.core.decoder import decode
from unihover.core.renderer import (
    Annotation,
    InvalidCodePoint,
    is_displayable,
    reference_url,
    render,
    to_markup,
)


FONT = FontPreference()


def test_render_latin_small_e_acute() -> None:
    result = render(0xE9, FONT)
    assert result == Annotation(
        code_point=233,
        glyph="é",
        hex_label="00E9",
        decimal_label=233,
        block_label="Latin-1 Supplement",
        reference_url="https://symbl.cc/en/00E9/",
    )


def test_render_astral_code_point_keeps_full_hex() -> None:
    result = render(0x1F600, FONT)
    assert isinstance(result, Annotation)
    assert result.glyph == "\U0001F600"
    assert result.hex_label == "1F600"
    assert result.reference_url == "https://symbl.cc/en/1F600/"
    assert result.block_label == "Emoticons"


def test_reference_url_matches_hex_label() -> None:
    assert reference_url(0x2192) == "https://symbl.cc/en/2192/"
    assert render(0x2192).reference_url == reference_url(0x2192)


@pytest.mark.parametrize("code_point", [0x0, 0x41, 0xE9, 0x2192, 0xFFFF, 0x1F600, 0x10FFFF])
def test_hex_label_decodes_back_to_code_point(code_point: int) -> None:
    result = render(code_point, FONT)
    assert isinstance(result, Annotation)
    assert decode("0x" + result.hex_label) == code_point


@pytest.mark.parametrize("code_point", [0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000, 0xFFFFFFFF])
def test_render_invalid_code_points_degrade(code_point: int) -> None:
    result = render(code_point, FONT)
    assert isinstance(result, InvalidCodePoint)
    assert result.marker == "Invalid Unicode"
    assert result.hex_label == f"{code_point:X}"
    assert not hasattr(result, "glyph")
    assert not hasattr(result, "reference_url")


def test_is_displayable_boundaries() -> None:
    assert is_displayable(0xD7FF)
    assert not is_displayable(0xD800)
    assert not is_displayable(0xDFFF)
    assert is_displayable(0xE000)
    assert not is_displayable(-1)


def test_render_is_idempotent() -> None:
    first = render(0x2211, FONT)
    second = render(0x2211, FONT)
    assert first == second
    assert to_markup(first, FONT) == to_markup(second, FONT)


def test_markup_contains_font_styles_and_link() -> None:
    font = FontPreference(family="Noto Color Emoji", size=20)
    markup = to_markup(render(0x1F600, font), font)
    assert markup.supports_html is True
    assert markup.is_trusted is True
    assert "font-family: 'Noto Color Emoji', sans-serif" in markup.value
    assert "font-size: 20px" in markup.value
    assert "font-size: 40px" in markup.value
    assert "<strong>Unicode:</strong> U+1F600" in markup.value
    assert "<strong>Decimal:</strong> 128512" in markup.value
    assert "<strong>Character:</strong> Emoticons" in markup.value
    assert '<a href="https://symbl.cc/en/1F600/" target="_blank"> symbl.cc</a>' in markup.value


def test_markup_escapes_html_sensitive_glyphs() -> None:
    markup = to_markup(render(0x3C, FONT), FONT)
    assert ">&lt;</div>" in markup.value
    assert "><</div>" not in markup.value


def test_markup_escapes_font_family() -> None:
    font = FontPreference(family="Evil'</div>", size=24)
    markup = to_markup(render(0x41, font), font)
    assert "</div>'" not in markup.value
    assert "Evil&#x27;&lt;/div&gt;" in markup.value


def test_invalid_markup_is_plain_markdown() -> None:
    markup = to_markup(render(0xD800, FONT), FONT)
    assert markup.value == "**Invalid Unicode:** U+D800"
    assert markup.supports_html is False
    assert markup.is_trusted is False
