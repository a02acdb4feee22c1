"""Styled text value: plain characters plus style spans over them"""

from dataclasses import dataclass, field

from rich.text import Text


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) character range of plain text carrying a rich style string."""
    start: int
    end:   int
    style: str


@dataclass(frozen=True)
class StyledText:
    """Renderer output; `plain` is the unstyled projection used for assertions and fallback."""
    plain: str
    spans: tuple[Span, ...] = ()

    def __len__(self) -> int:
        return len(self.plain)

    def __str__(self) -> str:
        return self.plain

    @classmethod
    def unstyled(cls, text: str) -> "StyledText":
        return cls(plain=text)

    def styles_at(self, index: int) -> list[str]:
        """Return the styles covering the character at index, in span order."""
        return [s.style for s in self.spans if s.start <= index < s.end]

    def to_rich(self) -> Text:
        """Build a rich Text for terminal display.

        Each run between span boundaries is appended with the combined style of
        the spans covering it.
        """
        bounds = {0, len(self.plain)}
        for s in self.spans:
            bounds.update((s.start, s.end))
        edges = sorted(b for b in bounds if 0 <= b <= len(self.plain))

        text = Text()
        for start, end in zip(edges, edges[1:]):
            styles = [s.style for s in self.spans if s.start <= start and end <= s.end]
            text.append(self.plain[start:end], style=' '.join(styles) or None)
        return text


@dataclass
class StyledTextBuilder:
    """Accumulates text pieces and the spans styling them."""
    parts:  list[str] = field(default_factory=list)
    spans:  list[Span] = field(default_factory=list)
    length: int = 0

    def append(self, text: str, style: str = '') -> None:
        if not text:
            return
        if style:
            self.spans.append(Span(self.length, self.length + len(text), style))
        self.parts.append(text)
        self.length += len(text)

    def build(self) -> StyledText:
        return StyledText(plain=''.join(self.parts), spans=tuple(self.spans))
