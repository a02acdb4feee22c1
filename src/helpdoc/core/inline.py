"""Inline math spans and math run tokenization for help-text formulas"""

import re
from dataclasses import dataclass
from typing import Literal


MATH_RUN_RE = re.compile(r'(Δ([A-Za-z]+))|(arg max_([A-Za-z]+))|(([A-Za-z]+)_([A-Za-z]+))')

RunKind = Literal['plain', 'delta', 'subscripted']


@dataclass(frozen=True)
class MathRun:
    """A piece of a formula: plain text, or a base with a lowered subscript."""
    kind: RunKind
    base: str
    sub:  str = ''


def split_math_spans(text: str) -> list[tuple[str, bool]]:
    """Split text on '$' into (segment, is_math) pairs; odd segments are math.

    Empty segments are dropped. A '$' without a closing partner is literal
    text and stays with the plain segment before it.
    """
    parts = text.split('$')
    if len(parts) % 2 == 0:
        tail = parts.pop()
        parts[-1] += '$' + tail
    return [(part, i % 2 == 1) for i, part in enumerate(parts) if part]


def tokenize_math(text: str) -> list[MathRun]:
    """Break a math span into plain, Δ-prefixed, and subscripted runs."""
    runs: list[MathRun] = []
    cursor = 0
    for m in MATH_RUN_RE.finditer(text):
        if m.start() > cursor:
            runs.append(MathRun('plain', text[cursor:m.start()]))
        if m.group(1):
            runs.append(MathRun('delta', 'Δ', m.group(2)))
        elif m.group(3):
            runs.append(MathRun('subscripted', 'arg max', m.group(4)))
        else:
            runs.append(MathRun('subscripted', m.group(6), m.group(7)))
        cursor = m.end()
    if cursor < len(text):
        runs.append(MathRun('plain', text[cursor:]))
    return runs
