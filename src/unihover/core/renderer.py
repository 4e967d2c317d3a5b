"""Turn decoded code points into hover annotations and markup."""

from __future__ import annotations

from dataclasses import dataclass
import html
import logging

from unihover.core.blocks import classify
from unihover.core.config import FontPreference


logger = logging.getLogger(__name__)

MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)
REFERENCE_URL = "https://symbl.cc/en/{hex_label}/"
INVALID_MARKER = "Invalid Unicode"


@dataclass(frozen=True, slots=True)
class Annotation:
    """Preview content for a displayable code point."""

    code_point: int
    glyph: str
    hex_label: str
    decimal_label: int
    block_label: str
    reference_url: str


@dataclass(frozen=True, slots=True)
class InvalidCodePoint:
    """Degraded preview for values that have no glyph."""

    code_point: int
    hex_label: str
    marker: str = INVALID_MARKER


RenderResult = Annotation | InvalidCodePoint


@dataclass(frozen=True, slots=True)
class HoverMarkup:
    """Markup handed to the host tooltip."""

    value: str
    supports_html: bool = False
    is_trusted: bool = False


def is_displayable(code_point: int) -> bool:
    """Return whether ``code_point`` maps to a scalar value."""
    return 0 <= code_point <= MAX_CODE_POINT and code_point not in SURROGATE_RANGE


def hex_label(code_point: int) -> str:
    return f"{code_point:04X}"


def reference_url(code_point: int) -> str:
    return REFERENCE_URL.format(hex_label=hex_label(code_point))


def render(code_point: int, font: FontPreference | None = None) -> RenderResult:
    """Build the annotation for ``code_point``.

    Out-of-range values and lone surrogates produce an ``InvalidCodePoint``
    carrying only the raw hex value. The font does not change the annotation
    itself; it is accepted here so callers can pass the same preference to
    :func:`to_markup`.
    """
    if not is_displayable(code_point):
        logger.debug("Code point %X cannot be displayed", code_point)
        return InvalidCodePoint(code_point=code_point, hex_label=f"{code_point:X}")

    label = hex_label(code_point)
    return Annotation(
        code_point=code_point,
        glyph=chr(code_point),
        hex_label=label,
        decimal_label=code_point,
        block_label=classify(code_point),
        reference_url=reference_url(code_point),
    )


def _annotation_html(annotation: Annotation, font: FontPreference) -> str:
    family = html.escape(font.family, quote=True)
    glyph = html.escape(annotation.glyph, quote=False)
    url = html.escape(annotation.reference_url, quote=True)
    return (
        f'<div style="font-family: \'{family}\', sans-serif; font-size: {font.size}px; '
        'text-align: center; padding: 10px;">\n'
        f'  <div style="font-size: {font.size * 2}px; margin-bottom: 10px;">{glyph}</div>\n'
        '  <div style="font-size: 12px; color: #888;">\n'
        f"    <strong>Unicode:</strong> U+{annotation.hex_label}<br />\n"
        f"    <strong>Decimal:</strong> {annotation.decimal_label}<br />\n"
        f"    <strong>Character:</strong> {html.escape(annotation.block_label)}<br />\n"
        f'    <strong>See:</strong><a href="{url}" target="_blank"> symbl.cc</a>\n'
        "  </div>\n"
        "</div>"
    )


def to_markup(result: RenderResult, font: FontPreference) -> HoverMarkup:
    """Render ``result`` as tooltip markup.

    Successful annotations become trusted HTML styled with ``font``; invalid
    code points become a plain Markdown line.
    """
    if isinstance(result, InvalidCodePoint):
        return HoverMarkup(value=f"**{result.marker}:** U+{result.hex_label}")
    return HoverMarkup(
        value=_annotation_html(result, font),
        supports_html=True,
        is_trusted=True,
    )


__all__ = [
    "INVALID_MARKER",
    "MAX_CODE_POINT",
    "Annotation",
    "HoverMarkup",
    "InvalidCodePoint",
    "RenderResult",
    "hex_label",
    "is_displayable",
    "reference_url",
    "render",
    "to_markup",
]
