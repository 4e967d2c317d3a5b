"""Locate Unicode escape sequences in raw source text."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import re


ESCAPE_PATTERN = re.compile(
    r"u\\[0-9a-fA-F]{4,6}"
    r"|\\u[0-9a-fA-F]{4}"
    r"|\\x[0-9a-fA-F]{2}"
    r"|0x[0-9a-fA-F]+"
)


@dataclass(frozen=True, slots=True)
class EscapeToken:
    """Escape sequence candidate and its character span in the source."""

    text: str
    start: int
    end: int

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


def _line_bounds(text: str, offset: int) -> tuple[int, int]:
    start = text.rfind("\n", 0, offset) + 1
    end = text.find("\n", offset)
    if end == -1:
        end = len(text)
    return start, end


def match(text: str, offset: int) -> EscapeToken | None:
    """Return the escape token touching ``offset``, or ``None``.

    Matches are searched on the line containing the offset only. A cursor
    sitting right after the last digit still selects the token.
    """
    if not text or offset < 0 or offset > len(text):
        return None

    line_start, line_end = _line_bounds(text, offset)
    for found in ESCAPE_PATTERN.finditer(text, line_start, line_end):
        start, end = found.span()
        if start > offset:
            break
        if offset <= end:
            return EscapeToken(found.group(0), start, end)
    return None


def find_tokens(text: str) -> Iterator[EscapeToken]:
    """Yield every escape token in ``text`` from left to right."""
    for found in ESCAPE_PATTERN.finditer(text):
        yield EscapeToken(found.group(0), found.start(), found.end())


__all__ = ["ESCAPE_PATTERN", "EscapeToken", "find_tokens", "match"]
