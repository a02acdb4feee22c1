"""Native renderer: markdown-it token stream to styled text, with plain-text fallback"""

import logging
from urllib.parse import urljoin

from markdown_it import MarkdownIt
from markdown_it.token import Token

from helpdoc.render.base import decode_for_render, plain_fallback
from helpdoc.render.style import RenderStyle
from helpdoc.render.styled import StyledText, StyledTextBuilder


logger = logging.getLogger(__name__)

BULLET = '• '
QUOTE_BAR = '│ '
RULE = '─' * 40
LIST_INDENT = '  '


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, with raw HTML treated as text."""
    try:
        return MarkdownIt(preset, options_update={"html": False, "linkify": False})
    except KeyError as e:
        raise ValueError(f"Unknown MarkdownIt preset: {preset!r}") from e


class _TokenWriter:
    """Walks one token stream; created per render call and then discarded."""

    def __init__(self, style: RenderStyle, base_url: str | None):
        self.style = style
        self.base_url = base_url
        self.out = StyledTextBuilder()
        self.styles: list[str] = []
        self.lists: list[int | None] = []     # None for bullet lists, next ordinal otherwise
        self.quote_depth = 0
        self.pending = 0                      # newlines owed before the next text
        self.at_line_start = True
        self.marker: str | None = None
        self.row_started = False

    # --- output primitives ---

    def _block(self, newlines: int) -> None:
        """Request a break before the next text; nothing is owed at document start."""
        if self.out.length:
            self.pending = max(self.pending, newlines)

    def _start_line(self) -> None:
        if self.pending:
            self.out.append('\n' * self.pending)
            self.pending = 0
            self.at_line_start = True
        if not self.at_line_start:
            return
        self.out.append(QUOTE_BAR * self.quote_depth, self.style.quote)
        depth = len(self.lists)
        if self.marker is not None:
            self.out.append(LIST_INDENT * (depth - 1))
            self.out.append(self.marker, self.style.bullet)
            self.marker = None
        else:
            self.out.append(LIST_INDENT * depth)
        self.at_line_start = False

    def _write(self, text: str, extra: str = '') -> None:
        style = ' '.join(s for s in (*self.styles, extra) if s)
        for i, piece in enumerate(text.split('\n')):
            if i:
                self.out.append('\n')
                self.at_line_start = True
            if piece:
                self._start_line()
                self.out.append(piece, style)

    def _resolve(self, target: str) -> str:
        if not target or self.base_url is None:
            return target
        return urljoin(self.base_url, target)

    # --- block tokens ---

    def heading_open(self, tok: Token) -> None:
        self._block(2)
        level = int(tok.tag[1:]) if tok.tag[1:].isdigit() else 6
        self.styles.append(self.style.heading_style(level))

    def paragraph_open(self, tok: Token) -> None:
        if not tok.hidden:
            self._block(2)
        self.styles.append(self.style.paragraph)

    def bullet_list_open(self, tok: Token) -> None:
        self._block(1 if self.lists else 2)
        self.lists.append(None)

    def ordered_list_open(self, tok: Token) -> None:
        self._block(1 if self.lists else 2)
        start = tok.attrGet('start')
        self.lists.append(int(start) if start is not None else 1)

    def list_close(self, tok: Token) -> None:
        self.lists.pop()
        self._block(1 if self.lists else 2)

    def list_item_open(self, tok: Token) -> None:
        self._block(1)
        ordinal = self.lists[-1] if self.lists else None
        if ordinal is None:
            self.marker = BULLET
        else:
            self.marker = f"{ordinal}. "
            self.lists[-1] = ordinal + 1

    def list_item_close(self, tok: Token) -> None:
        if self.marker is not None:
            self._start_line()

    def blockquote_open(self, tok: Token) -> None:
        self._block(2)
        self.quote_depth += 1
        self.styles.append(self.style.quote)

    def blockquote_close(self, tok: Token) -> None:
        self.quote_depth -= 1
        self.styles.pop()
        self._block(2)

    def fence(self, tok: Token) -> None:
        self._block(2)
        self._write(tok.content.rstrip('\n'), self.style.code)

    code_block = fence

    def hr(self, tok: Token) -> None:
        self._block(2)
        self._write(RULE, self.style.rule)
        self._block(2)

    def tr_open(self, tok: Token) -> None:
        self._block(1)
        self.row_started = False

    def cell_open(self, tok: Token) -> None:
        if self.row_started:
            self._write(' | ')
        self.row_started = True

    def close_style(self, tok: Token) -> None:
        if self.styles:
            self.styles.pop()

    # --- inline tokens ---

    def inline(self, tok: Token) -> None:
        for child in tok.children or []:
            handler = self.INLINE.get(child.type)
            if handler is not None:
                handler(self, child)
            elif child.content:
                self._write(child.content)

    def text(self, tok: Token) -> None:
        self._write(tok.content)

    def softbreak(self, tok: Token) -> None:
        self._write(' ')

    def hardbreak(self, tok: Token) -> None:
        self._write('\n')

    def code_inline(self, tok: Token) -> None:
        self._write(tok.content, self.style.code_inline)

    def em_open(self, tok: Token) -> None:
        self.styles.append(self.style.emphasis)

    def strong_open(self, tok: Token) -> None:
        self.styles.append(self.style.strong)

    def s_open(self, tok: Token) -> None:
        self.styles.append('strike')

    def link_open(self, tok: Token) -> None:
        href = self._resolve(str(tok.attrGet('href') or ''))
        self.styles.append(f"{self.style.link} link {href}".strip() if href else self.style.link)

    def image(self, tok: Token) -> None:
        src = self._resolve(str(tok.attrGet('src') or ''))
        label = tok.content or src
        self._write(label, f"{self.style.link} link {src}".strip() if src else self.style.link)

    INLINE = {
        'text': text,
        'softbreak': softbreak,
        'hardbreak': hardbreak,
        'code_inline': code_inline,
        'em_open': em_open,
        'em_close': close_style,
        'strong_open': strong_open,
        'strong_close': close_style,
        's_open': s_open,
        's_close': close_style,
        'link_open': link_open,
        'link_close': close_style,
        'image': image,
    }

    BLOCK = {
        'heading_open': heading_open,
        'heading_close': close_style,
        'paragraph_open': paragraph_open,
        'paragraph_close': close_style,
        'bullet_list_open': bullet_list_open,
        'bullet_list_close': list_close,
        'ordered_list_open': ordered_list_open,
        'ordered_list_close': list_close,
        'list_item_open': list_item_open,
        'list_item_close': list_item_close,
        'blockquote_open': blockquote_open,
        'blockquote_close': blockquote_close,
        'fence': fence,
        'code_block': code_block,
        'hr': hr,
        'tr_open': tr_open,
        'th_open': cell_open,
        'td_open': cell_open,
        'inline': inline,
    }

    def write(self, tokens: list[Token]) -> StyledText:
        for tok in tokens:
            handler = self.BLOCK.get(tok.type)
            if handler is not None:
                handler(self, tok)
            elif tok.nesting == 0 and tok.content:
                self._block(2)
                self._write(tok.content.rstrip('\n'))
        return self.out.build()


class NativeMarkdownRenderer:
    """Styled rendering through markdown-it; falls back to the input as plain text."""

    def __init__(self, style: RenderStyle | None = None, preset: str = "commonmark"):
        self.style = style or RenderStyle()
        self.preset = preset
        self._md = _make_parser(preset)

    def render(self, markdown: str | bytes, base_url: str | None = None) -> StyledText:
        text = decode_for_render(markdown)
        if text is None:
            return plain_fallback(markdown)
        try:
            tokens = self._md.parse(text)
            styled = _TokenWriter(self.style, base_url).write(tokens)
        except Exception:
            logger.debug("markdown-it rejected input; rendering as plain text", exc_info=True)
            return plain_fallback(markdown)
        if text.strip() and not styled.plain.strip():
            logger.debug("Rendering produced no visible text; rendering as plain text")
            return plain_fallback(markdown)
        return styled
