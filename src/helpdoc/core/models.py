"""Block node models produced by the block parser"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BlockKind(str, Enum):
    """Restrict block nodes to a closed set of constructs"""
    heading = "heading"
    paragraph = "paragraph"
    unordered_list = "unordered_list"
    ordered_list = "ordered_list"
    code_block = "code_block"


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_Node):
    """A single `#`-prefixed line; headings never coalesce."""
    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    text: str


class Paragraph(_Node):
    """Consecutive plain lines joined with a single space."""
    kind: Literal["paragraph"] = "paragraph"
    text: str


class UnorderedList(_Node):
    kind: Literal["unordered_list"] = "unordered_list"
    items: tuple[str, ...] = Field(..., min_length=1)


class OrderedList(_Node):
    """Ordinal labels are discarded; position determines order."""
    kind: Literal["ordered_list"] = "ordered_list"
    items: tuple[str, ...] = Field(..., min_length=1)


class CodeBlock(_Node):
    """Verbatim fence content, newline-joined, fence lines excluded."""
    kind: Literal["code_block"] = "code_block"
    language: str = ""
    code: str = ""


BlockNode = Annotated[
    Union[Heading, Paragraph, UnorderedList, OrderedList, CodeBlock],
    Field(discriminator="kind"),
]

BLOCK_LIST: TypeAdapter[list[BlockNode]] = TypeAdapter(list[BlockNode])
