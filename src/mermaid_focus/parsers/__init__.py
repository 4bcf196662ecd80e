"""Parser entry point — Mermaid flowchart text to DiagramModel."""

from __future__ import annotations

from mermaid_focus.ir.model import DiagramModel
from mermaid_focus.parsers.flowchart import FlowchartParser
from mermaid_focus.parsers.lines import (
    EdgeDeclaration,
    NodeDeclaration,
    parse_edge_line,
    parse_node_line,
    strip_comment,
)

__all__ = [
    "EdgeDeclaration",
    "FlowchartParser",
    "NodeDeclaration",
    "parse",
    "parse_edge_line",
    "parse_node_line",
    "strip_comment",
]


def parse(src: str) -> DiagramModel:
    """Parse flowchart text into an immutable DiagramModel. Never raises on bad lines."""
    return FlowchartParser().parse(src)
