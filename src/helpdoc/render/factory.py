"""Renderer lookup by configured name"""

from helpdoc.render.base import MarkdownRenderer
from helpdoc.render.blocks import BlockRenderer
from helpdoc.render.native import NativeMarkdownRenderer
from helpdoc.render.style import RenderStyle


RENDERERS = ('native', 'blocks')


def make_renderer(name: str, style: RenderStyle | None = None, preset: str = "commonmark") -> MarkdownRenderer:
    """Return the renderer registered under name ('native' or 'blocks')."""
    if name == 'native':
        return NativeMarkdownRenderer(style=style, preset=preset)
    if name == 'blocks':
        return BlockRenderer(style=style)
    raise ValueError(f"Unknown renderer {name!r}; expected one of {', '.join(RENDERERS)}")
