"""Block layout renderer: lays out parsed block nodes, styling $...$ formulas"""

import logging

from helpdoc.core.inline import split_math_spans, tokenize_math
from helpdoc.core.models import BlockNode, CodeBlock, Heading, OrderedList, Paragraph, UnorderedList
from helpdoc.core.parse import parse
from helpdoc.render.base import decode_for_render, plain_fallback
from helpdoc.render.native import BULLET
from helpdoc.render.style import RenderStyle
from helpdoc.render.styled import StyledText, StyledTextBuilder


logger = logging.getLogger(__name__)


class BlockRenderer:
    """Render through the block parser instead of a markdown engine.

    Headings, paragraphs, bullets, ordinals and code blocks come from
    `parse`; inline text only gets formula styling for `$...$` spans. Links
    are not recognized, so `base_url` has nothing to resolve.
    """

    def __init__(self, style: RenderStyle | None = None):
        self.style = style or RenderStyle()

    def _inline(self, out: StyledTextBuilder, text: str, style: str = '') -> None:
        for segment, is_math in split_math_spans(text):
            if not is_math:
                out.append(segment, style)
                continue
            for run in tokenize_math(segment):
                out.append(run.base, self.style.math)
                out.append(run.sub, self.style.subscript)

    def _node(self, out: StyledTextBuilder, node: BlockNode) -> None:
        match node:
            case Heading(level=level, text=text):
                out.append(text, self.style.heading_style(level))
            case Paragraph(text=text):
                self._inline(out, text, self.style.paragraph)
            case UnorderedList(items=items):
                for i, item in enumerate(items):
                    if i:
                        out.append('\n')
                    out.append(BULLET, self.style.bullet)
                    self._inline(out, item)
            case OrderedList(items=items):
                for i, item in enumerate(items):
                    if i:
                        out.append('\n')
                    out.append(f"{i + 1}. ", self.style.bullet)
                    self._inline(out, item)
            case CodeBlock(code=code):
                out.append(code, self.style.code)

    def render(self, markdown: str | bytes, base_url: str | None = None) -> StyledText:
        text = decode_for_render(markdown)
        if text is None:
            return plain_fallback(markdown)
        out = StyledTextBuilder()
        for i, node in enumerate(parse(text)):
            if i:
                out.append('\n\n')
            self._node(out, node)
        styled = out.build()
        if text.strip() and not styled.plain.strip():
            logger.debug("Block layout produced no visible text; rendering as plain text")
            return plain_fallback(markdown)
        return styled
