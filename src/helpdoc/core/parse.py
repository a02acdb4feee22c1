"""Single-pass block parser: raw help text to an ordered list of block nodes"""

import re
from dataclasses import dataclass, field

from helpdoc.core.models import (
    BlockKind,
    BlockNode,
    CodeBlock,
    Heading,
    OrderedList,
    Paragraph,
    UnorderedList,
)


LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')
FENCE_RE = re.compile(r'^ {0,3}```(.*)$')
HEADING_RE = re.compile(r'^(#{1,6})[ \t]+(\S.*)$')
BULLET_RE = re.compile(r'^[ \t]*[-*+][ \t]+(\S.*)$')
ORDINAL_RE = re.compile(r'^[ \t]*\d{1,9}[.)][ \t]+(\S.*)$')


@dataclass
class _Accumulator:
    """The one block currently being built; kind None means nothing is open."""
    kind:     BlockKind | None = None
    lines:    list[str] = field(default_factory=list)
    language: str = ""

    def start(self, kind: BlockKind, first: str | None = None, language: str = '') -> None:
        self.kind = kind
        self.lines = [] if first is None else [first]
        self.language = language

    def flush(self, nodes: list[BlockNode]) -> None:
        """Emit the open block (if it yields a node) and reset to nothing open."""
        kind, lines = self.kind, self.lines
        if kind == BlockKind.paragraph:
            text = ' '.join(lines).strip()
            if text:
                nodes.append(Paragraph(text=text))
        elif kind == BlockKind.unordered_list and lines:
            nodes.append(UnorderedList(items=lines))
        elif kind == BlockKind.ordered_list and lines:
            nodes.append(OrderedList(items=lines))
        elif kind == BlockKind.code_block:
            nodes.append(CodeBlock(language=self.language, code='\n'.join(lines)))
        self.kind, self.lines, self.language = None, [], ""


def _fence_language(info: str) -> str:
    """Return the first word after the opening backticks, or '' when absent."""
    words = info.split()
    return words[0] if words else ""


def _append_or_start(acc: _Accumulator, kind: BlockKind, text: str, nodes: list[BlockNode]) -> None:
    """Coalesce text into an open block of the same kind, else flush and start one."""
    if acc.kind == kind:
        acc.lines.append(text)
        return
    acc.flush(nodes)
    acc.start(kind, text)


def split_lines(source: str) -> list[str]:
    """Split on \\r\\n, \\r or \\n; a trailing line break does not add an empty line."""
    if not source:
        return []
    lines = LINE_BREAK_RE.split(source)
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def parse(source: str | bytes) -> list[BlockNode]:
    """Parse source into headings, paragraphs, lists and code blocks in source order.

    Never raises: malformed fences are closed at end of input and any line
    that matches no construct becomes paragraph text. Bytes are decoded as
    UTF-8 with replacement characters.
    """
    if isinstance(source, bytes):
        source = source.decode('utf-8', errors='replace')

    nodes: list[BlockNode] = []
    acc = _Accumulator()

    for line in split_lines(source):
        fence = FENCE_RE.match(line)
        if acc.kind == BlockKind.code_block:
            if fence:
                acc.flush(nodes)
            else:
                acc.lines.append(line)
            continue

        if fence:
            acc.flush(nodes)
            acc.start(BlockKind.code_block, language=_fence_language(fence.group(1)))
            continue

        if not line.strip():
            acc.flush(nodes)
            continue

        if m := HEADING_RE.match(line):
            acc.flush(nodes)
            nodes.append(Heading(level=len(m.group(1)), text=m.group(2).strip()))
            continue

        if m := BULLET_RE.match(line):
            _append_or_start(acc, BlockKind.unordered_list, m.group(1).strip(), nodes)
        elif m := ORDINAL_RE.match(line):
            _append_or_start(acc, BlockKind.ordered_list, m.group(1).strip(), nodes)
        else:
            _append_or_start(acc, BlockKind.paragraph, line.strip(), nodes)

    acc.flush(nodes)
    return nodes
