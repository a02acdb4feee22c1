"""Rendering contract shared by every markdown renderer, plus the plain-text fallback"""

import logging
import unicodedata
from typing import Protocol, runtime_checkable

from helpdoc.render.styled import StyledText


logger = logging.getLogger(__name__)

ALLOWED_CONTROLS = frozenset('\t\n\r\f')


@runtime_checkable
class MarkdownRenderer(Protocol):
    """Turn raw markdown into styled text; must never raise for str or bytes input."""

    def render(self, markdown: str | bytes, base_url: str | None = None) -> StyledText: ...


def as_text(markdown: str | bytes) -> str:
    """Decode bytes as UTF-8, or one character per byte when that fails."""
    if isinstance(markdown, str):
        return markdown
    try:
        return markdown.decode('utf-8')
    except UnicodeDecodeError:
        return markdown.decode('latin-1')


def plain_fallback(markdown: str | bytes) -> StyledText:
    """Unstyled input text; undecodable bytes count one character per byte."""
    return StyledText.unstyled(as_text(markdown))


def is_renderable(text: str) -> bool:
    """False when text holds control characters (other than whitespace) or lone surrogates."""
    for ch in text:
        if ch in ALLOWED_CONTROLS:
            continue
        if unicodedata.category(ch) in ('Cc', 'Cs'):
            return False
    return True


def decode_for_render(markdown: str | bytes) -> str | None:
    """Return text that is safe to style, or None when the fallback path must be taken."""
    if isinstance(markdown, bytes):
        try:
            markdown = markdown.decode('utf-8')
        except UnicodeDecodeError:
            logger.debug("Input is not valid UTF-8; rendering %d bytes as plain text", len(markdown))
            return None
    if not is_renderable(markdown):
        logger.debug("Input contains control characters; rendering as plain text")
        return None
    return markdown
