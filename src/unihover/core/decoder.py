"""Decode escape tokens into integer code points."""

from __future__ import annotations

import logging
import re

from unihover.core.matcher import EscapeToken


logger = logging.getLogger(__name__)

# Families keyed by their two-character prefix, in matcher order.
ESCAPE_PREFIXES: dict[str, str] = {
    "u\\": "backslash-suffix",
    "\\u": "unicode",
    "\\x": "byte",
    "0x": "hex-literal",
}

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def escape_family(token: str) -> str | None:
    """Return the family name selected by the token prefix."""
    return ESCAPE_PREFIXES.get(token[:2])


def parse_hex(payload: str) -> int | None:
    """Parse a bare hexadecimal payload, returning ``None`` when malformed."""
    if not _HEX_DIGITS.fullmatch(payload):
        return None
    return int(payload, 16)


def decode(token: str) -> int | None:
    """Return the code point encoded by ``token``.

    ``None`` covers both unknown prefixes and payloads that are not plain
    hexadecimal digits (``"\\x"``, ``"0x_1"``...). Values are not clamped to
    the Unicode range.
    """
    family = escape_family(token)
    if family is None:
        logger.debug("Unknown escape prefix in %r", token)
        return None
    value = parse_hex(token[2:])
    if value is None:
        logger.debug("Malformed %s payload in %r", family, token)
    return value


def decode_token(token: EscapeToken) -> int | None:
    return decode(token.text)


__all__ = ["ESCAPE_PREFIXES", "decode", "decode_token", "escape_family", "parse_hex"]
