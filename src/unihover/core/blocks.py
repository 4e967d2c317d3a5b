"""Coarse Unicode block labels used by the hover preview.

The table is intentionally small: a handful of ranges that cover common
Latin text, punctuation, arrows, operators and emoji. Entries are scanned in
declaration order and the first inclusive match wins, so overlapping ranges
resolve to whichever appears first.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BlockRange:
    """Inclusive code point range mapped to a display label."""

    low: int
    high: int
    label: str

    def contains(self, code_point: int) -> bool:
        return self.low <= code_point <= self.high


BLOCK_RANGES: tuple[BlockRange, ...] = (
    BlockRange(0x0020, 0x007F, "ASCII Character"),
    BlockRange(0x00A0, 0x00FF, "Latin-1 Supplement"),
    BlockRange(0x0100, 0x017F, "Latin Extended-A"),
    BlockRange(0x0180, 0x024F, "Latin Extended-B"),
    BlockRange(0x2000, 0x206F, "General Punctuation"),
    BlockRange(0x2190, 0x21FF, "Arrows"),
    BlockRange(0x2200, 0x22FF, "Mathematical Operators"),
    BlockRange(0x1F600, 0x1F64F, "Emoticons"),
    BlockRange(0x1F300, 0x1F5FF, "Miscellaneous Symbols"),
)


def find_block(code_point: int) -> BlockRange | None:
    """Return the first table entry covering ``code_point``."""
    for block in BLOCK_RANGES:
        if block.contains(code_point):
            return block
    return None


def fallback_label(code_point: int) -> str:
    return f"Unicode Block (U+{code_point:X})"


def classify(code_point: int) -> str:
    """Return the block label for ``code_point``, never empty."""
    block = find_block(code_point)
    if block is None:
        return fallback_label(code_point)
    return block.label


__all__ = ["BLOCK_RANGES", "BlockRange", "classify", "fallback_label", "find_block"]
