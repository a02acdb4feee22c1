"""Explicit style configuration handed to renderers at construction"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style


class RenderStyle(BaseModel):
    """Rich style strings per construct; an empty string means unstyled."""
    model_config = ConfigDict(frozen=True)

    h1:          str = Field(default="bold underline magenta", description="Level 1 headings")
    h2:          str = Field(default="bold magenta",           description="Level 2 headings")
    h3:          str = Field(default="bold",                   description="Level 3 headings")
    heading:     str = Field(default="bold dim",               description="Levels 4-6")
    paragraph:   str = ""
    bullet:      str = "cyan"
    code:        str = "green"
    code_inline: str = "bold green"
    emphasis:    str = "italic"
    strong:      str = "bold"
    link:        str = "underline blue"
    quote:       str = "dim"
    rule:        str = "dim"
    math:        str = "italic"
    subscript:   str = "dim"

    @field_validator("*")
    @classmethod
    def _valid_rich_style(cls, value: str) -> str:
        if value:
            try:
                Style.parse(value)
            except StyleSyntaxError as e:
                raise ValueError(f"Invalid style {value!r}: {e}") from e
        return value

    def heading_style(self, level: int) -> str:
        """Return the style for a heading level; levels past 3 share `heading`."""
        return {1: self.h1, 2: self.h2, 3: self.h3}.get(level, self.heading)
