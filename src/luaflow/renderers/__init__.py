"""luaflow renderers.

Renderers turn the segmenter's directive stream into output text.

Available Renderers:
- TextRenderer: tab-indented, single-space separated source text

"""

from luaflow.renderers.protocol import DirectiveRenderer
from luaflow.renderers.text import RenderState, TextRenderer, render

__all__ = ["DirectiveRenderer", "RenderState", "TextRenderer", "render"]
