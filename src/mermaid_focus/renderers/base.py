"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from mermaid_focus.ir.model import DiagramModel
from mermaid_focus.visibility import VisibilityState


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, model: DiagramModel, state: VisibilityState) -> str:
        """Render the visible part of a model to an output string."""
        ...
