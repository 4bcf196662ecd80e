"""Filtered Mermaid text renderer.

Regenerates flowchart source from a DiagramModel restricted to the ids a
VisibilityState marks visible. Sections that end up empty are left out
entirely, so a hidden node never leaves behind a dangling edge, an empty
subgraph block or a class/click directive naming it.
"""

from __future__ import annotations

from mermaid_focus.config import RenderConfig
from mermaid_focus.ir.model import DiagramModel, Edge, Node, Subgraph
from mermaid_focus.visibility import VisibilityState

# ─── Line Formatting ─────────────────────────────────────────────────────────


def format_node(node: Node) -> str:
    return f"{node.id}{node.open}{node.label}{node.close}"


def format_edge(edge: Edge) -> str:
    return f"{edge.from_id} {edge.operator} {edge.to_id}"


def format_click(node_id: str, callback: str) -> str:
    return f"click {node_id} {callback}"


# ─── Sections ────────────────────────────────────────────────────────────────


def _subgraph_block(model: DiagramModel, sg: Subgraph, state: VisibilityState, indent: str) -> list[str]:
    kept = [n for n in model.members(sg) if state.is_visible(n.id)]
    if not kept:
        return []
    lines = [f"{indent}{sg.header_line}"]
    if sg.direction_line is not None:
        lines.append(f"{indent * 2}{sg.direction_line}")
    lines.extend(f"{indent * 2}{format_node(n)}" for n in kept)
    lines.append(f"{indent}end")
    return lines


def _class_assignments(model: DiagramModel, state: VisibilityState, indent: str) -> list[str]:
    lines: list[str] = []
    for assignment in model.class_assignments:
        ids = [i for i in assignment.node_ids if state.is_visible(i)]
        if ids:
            lines.append(f"{indent}class {','.join(ids)} {assignment.class_name}")
    return lines


def _visible_edges(model: DiagramModel, state: VisibilityState) -> list[Edge]:
    return [e for e in model.edges if state.is_visible(e.from_id) and state.is_visible(e.to_id)]


def _click_targets(model: DiagramModel, state: VisibilityState, edges: list[Edge]) -> list[str]:
    """Visible declared nodes in container order, then undeclared edge endpoints."""
    targets: dict[str, None] = {}
    for node in model.iter_nodes():
        if state.is_visible(node.id):
            targets.setdefault(node.id)
    for edge in edges:
        for node_id in (edge.from_id, edge.to_id):
            if node_id not in model.nodes:
                targets.setdefault(node_id)
    return list(targets)


# ─── Renderer ────────────────────────────────────────────────────────────────


class TextRenderer:
    """Renders a DiagramModel back to flowchart text under a visibility filter."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def render(self, model: DiagramModel, state: VisibilityState) -> str:
        indent = self.config.indent
        sections: list[list[str]] = []

        if model.front_matter:
            sections.append(list(model.front_matter))

        head = [model.directive or self.config.default_directive]
        head.extend(f"{indent}{cd.line}" for cd in model.class_definitions)
        sections.append(head)

        for sg in model.subgraphs:
            sections.append(_subgraph_block(model, sg, state, indent))

        sections.append([f"{indent}{format_node(n)}" for n in model.top_level_nodes() if state.is_visible(n.id)])
        sections.append(_class_assignments(model, state, indent))

        edges = _visible_edges(model, state)
        if self.config.click_hooks:
            callback = self.config.click_callback
            sections.append([f"{indent}{format_click(i, callback)}" for i in _click_targets(model, state, edges)])

        sections.append([f"{indent}{format_edge(e)}" for e in edges])

        blocks = ["\n".join(section) for section in sections if section]
        return "\n\n".join(blocks) + "\n"


def render(model: DiagramModel, state: VisibilityState, config: RenderConfig | None = None) -> str:
    """Render ``model`` as flowchart text keeping only the ids ``state`` marks visible."""
    return TextRenderer(config).render(model, state)
