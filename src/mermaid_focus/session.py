"""Viewing session — ties a parsed model to its visibility state and consumers.

Every visibility command re-renders the whole diagram from the immutable
model and hands the new text to the registered render handlers (the
external drawing engine). Node clicks coming back from the drawing engine
are delivered through ``dispatch_click`` to the registered click handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from mermaid_focus.config import RenderConfig
from mermaid_focus.ir.model import DiagramModel
from mermaid_focus.ir.reachability import ReachabilityIndex
from mermaid_focus.parsers import parse
from mermaid_focus.renderers.base import Renderer
from mermaid_focus.renderers.text import TextRenderer
from mermaid_focus.visibility import VisibilityState

logger = logging.getLogger(__name__)

RenderHandler = Callable[[str], None]
ClickHandler = Callable[[str], None]


@dataclass(frozen=True)
class SidebarEntry:
    id: str
    label: str
    visible: bool


class ViewSession:
    """One interactive view over a diagram."""

    def __init__(
        self,
        model: DiagramModel,
        config: RenderConfig | None = None,
        on_render: RenderHandler | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.model = model
        self.config = config or RenderConfig()
        self.index = ReachabilityIndex.from_model(model)
        self.state = VisibilityState.for_model(model)
        self.renderer: Renderer = renderer or TextRenderer(self.config)
        self._render_handlers: list[RenderHandler] = []
        self._click_handlers: list[ClickHandler] = []
        if on_render is not None:
            self._render_handlers.append(on_render)

    @classmethod
    def from_text(
        cls,
        src: str,
        config: RenderConfig | None = None,
        on_render: RenderHandler | None = None,
    ) -> ViewSession:
        return cls(parse(src), config=config, on_render=on_render)

    # ── Handlers ──────────────────────────────────────────────────────────────

    def on_render(self, handler: RenderHandler) -> None:
        self._render_handlers.append(handler)

    def on_node_click(self, handler: ClickHandler) -> None:
        self._click_handlers.append(handler)

    def dispatch_click(self, node_id: str) -> bool:
        """Deliver a click on ``node_id`` to the click handlers. Hidden ids are ignored."""
        if not self.state.is_visible(node_id):
            logger.debug("click on hidden node %r ignored", node_id)
            return False
        for handler in self._click_handlers:
            handler(node_id)
        return True

    # ── Rendering ─────────────────────────────────────────────────────────────

    def text(self) -> str:
        return self.renderer.render(self.model, self.state)

    def refresh(self) -> str:
        text = self.text()
        for handler in self._render_handlers:
            handler(text)
        return text

    # ── Visibility commands ───────────────────────────────────────────────────

    def toggle(self, node_id: str, visible: bool) -> str:
        self.state.set_visible(node_id, visible)
        return self.refresh()

    def show_all(self) -> str:
        self.state.show_all()
        return self.refresh()

    def hide_all(self) -> str:
        self.state.hide_all()
        return self.refresh()

    def show_descendants(self, node_id: str) -> str:
        self.state.show_descendants(node_id, self.index)
        return self.refresh()

    def show_ancestors(self, node_id: str) -> str:
        self.state.show_ancestors(node_id, self.index)
        return self.refresh()

    # ── Sidebar ───────────────────────────────────────────────────────────────

    def sidebar_entries(self) -> list[SidebarEntry]:
        """Declared nodes with their display labels and current visibility."""
        return [
            SidebarEntry(id=node.id, label=node.display_label, visible=self.state.is_visible(node.id))
            for node in self.model.iter_nodes()
        ]
