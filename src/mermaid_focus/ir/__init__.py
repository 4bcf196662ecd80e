"""Intermediate representation: structural model and reachability index."""

from mermaid_focus.ir.model import (
    ClassAssignment,
    ClassDefinition,
    DiagramModel,
    DroppedLine,
    Edge,
    Node,
    Subgraph,
    normalize_label,
)
from mermaid_focus.ir.reachability import ReachabilityIndex

__all__ = [
    "ClassAssignment",
    "ClassDefinition",
    "DiagramModel",
    "DroppedLine",
    "Edge",
    "Node",
    "ReachabilityIndex",
    "Subgraph",
    "normalize_label",
]
