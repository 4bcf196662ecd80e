"""Structural model of a parsed flowchart.

These types are the frozen output of the parser: nodes, subgraphs, edges,
style directives and the lines the parser could not place. Nothing here is
mutated after ``parse()`` returns; interactivity lives in VisibilityState.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from mermaid_focus.types import NodeShape


def normalize_label(label: str) -> str:
    """Collapse literal ``\\n`` escape sequences into single spaces."""
    return label.replace("\\n", " ")


@dataclass(frozen=True)
class Node:
    id: str
    label: str
    shape: NodeShape | None = None
    subgraph_id: str | None = None

    @property
    def open(self) -> str:
        return (self.shape or NodeShape.default()).open

    @property
    def close(self) -> str:
        return (self.shape or NodeShape.default()).close

    @property
    def display_label(self) -> str:
        return normalize_label(self.label)


@dataclass(frozen=True)
class Subgraph:
    id: str
    header_line: str
    node_ids: tuple[str, ...] = ()
    direction_line: str | None = None


@dataclass(frozen=True)
class Edge:
    from_id: str
    to_id: str
    operator: str

    @property
    def is_forward(self) -> bool:
        return ">" in self.operator

    @property
    def is_backward(self) -> bool:
        return "<" in self.operator


@dataclass(frozen=True)
class ClassDefinition:
    name: str
    style: str
    line: str


@dataclass(frozen=True)
class ClassAssignment:
    node_ids: tuple[str, ...]
    class_name: str


@dataclass(frozen=True)
class DroppedLine:
    """A source line the parser skipped, kept for diagnostics."""

    lineno: int
    text: str
    reason: str


@dataclass(frozen=True)
class DiagramModel:
    front_matter: tuple[str, ...] = ()
    directive: str | None = None
    subgraphs: tuple[Subgraph, ...] = ()
    top_level_ids: tuple[str, ...] = ()
    nodes: Mapping[str, Node] = field(default_factory=lambda: MappingProxyType({}))
    edges: tuple[Edge, ...] = ()
    class_definitions: tuple[ClassDefinition, ...] = ()
    class_assignments: tuple[ClassAssignment, ...] = ()
    dropped: tuple[DroppedLine, ...] = ()

    @property
    def known_ids(self) -> list[str]:
        """Declared node ids followed by ids that only appear in edges."""
        seen: dict[str, None] = dict.fromkeys(self.nodes)
        for edge in self.edges:
            seen.setdefault(edge.from_id)
            seen.setdefault(edge.to_id)
        return list(seen)

    def members(self, subgraph: Subgraph) -> list[Node]:
        return [self.nodes[node_id] for node_id in subgraph.node_ids]

    def top_level_nodes(self) -> list[Node]:
        return [self.nodes[node_id] for node_id in self.top_level_ids]

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every declared node, subgraph members first, then top-level nodes."""
        for subgraph in self.subgraphs:
            yield from self.members(subgraph)
        yield from self.top_level_nodes()
