"""mermaid-focus: show and hide parts of a Mermaid flowchart while keeping it valid."""

from mermaid_focus.config import RenderConfig
from mermaid_focus.ir.model import DiagramModel
from mermaid_focus.ir.reachability import ReachabilityIndex
from mermaid_focus.parsers import parse
from mermaid_focus.renderers.text import render
from mermaid_focus.session import ViewSession
from mermaid_focus.visibility import VisibilityState

__all__ = [
    "DiagramModel",
    "ReachabilityIndex",
    "RenderConfig",
    "ViewSession",
    "VisibilityState",
    "filter_dsl",
    "parse",
    "render",
]


def filter_dsl(src: str, hidden: list[str] | None = None, config: RenderConfig | None = None) -> str:
    """Parse a Mermaid flowchart string and render it with ``hidden`` ids removed.

    Args:
        src: Mermaid flowchart source.
        hidden: Node ids to hide; every other id stays visible.
        config: Render configuration; defaults to ``RenderConfig()``.

    Returns:
        The regenerated flowchart text.
    """
    model = parse(src)
    state = VisibilityState.for_model(model)
    for node_id in hidden or []:
        state.set_visible(node_id, False)
    return render(model, state, config)
