"""Recording renderer: a test double that captures exactly what callers pass in"""

from dataclasses import dataclass, field

from helpdoc.render.base import as_text
from helpdoc.render.styled import StyledText


MOCK_TAG = "[MOCK]\n"


@dataclass
class RecordingRenderer:
    """Record every input unmodified and return it tagged, without styling."""
    tag:       str = MOCK_TAG
    inputs:    list[str | bytes] = field(default_factory=list)
    base_urls: list[str | None] = field(default_factory=list)

    @property
    def last_input(self) -> str | bytes:
        return self.inputs[-1] if self.inputs else ""

    @property
    def last_base_url(self) -> str | None:
        return self.base_urls[-1] if self.base_urls else None

    def render(self, markdown: str | bytes, base_url: str | None = None) -> StyledText:
        self.inputs.append(markdown)
        self.base_urls.append(base_url)
        return StyledText.unstyled(self.tag + as_text(markdown))
