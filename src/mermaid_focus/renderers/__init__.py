"""Renderers that turn a model plus visibility state into diagram text."""

from mermaid_focus.renderers.base import Renderer
from mermaid_focus.renderers.text import TextRenderer, format_edge, format_node, render

__all__ = ["Renderer", "TextRenderer", "format_edge", "format_node", "render"]
