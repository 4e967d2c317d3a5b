"""Single entry point invoked by a host on hover."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from unihover.core.config import FontPreference, HoverConfig
from unihover.core.decoder import decode_token
from unihover.core.matcher import EscapeToken, match
from unihover.core.renderer import (
    Annotation,
    HoverMarkup,
    InvalidCodePoint,
    RenderResult,
    render,
    to_markup,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Hover:
    """Annotation anchored at the span of the token it describes."""

    token: EscapeToken
    code_point: int
    content: RenderResult
    markup: HoverMarkup

    @property
    def span(self) -> tuple[int, int]:
        return self.token.span

    @property
    def is_valid(self) -> bool:
        return isinstance(self.content, Annotation)


def query(
    text: str,
    offset: int,
    config: HoverConfig | None = None,
    *,
    font: FontPreference | None = None,
) -> Hover | None:
    """Resolve the hover preview for ``offset`` in ``text``.

    Returns ``None`` when the preview is disabled, when no escape sequence
    touches the offset, or when its payload is malformed. Code points without
    a glyph still yield a ``Hover`` whose content is an ``InvalidCodePoint``.
    ``font`` overrides the font carried by ``config``.
    """
    config = config or HoverConfig()
    if not config.enabled:
        return None

    token = match(text, offset)
    if token is None:
        return None

    code_point = decode_token(token)
    if code_point is None:
        return None

    font = font or config.font
    content = render(code_point, font)
    if isinstance(content, InvalidCodePoint):
        logger.debug("Token %r at %d decodes to invalid code point", token.text, token.start)
    return Hover(
        token=token,
        code_point=code_point,
        content=content,
        markup=to_markup(content, font),
    )


__all__ = ["Hover", "query"]
