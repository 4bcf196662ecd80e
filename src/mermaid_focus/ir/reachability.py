"""Reachability index — directed closure queries over a diagram's edges.

Arcs are stored in the descendant direction in a networkx DiGraph: an
operator containing ``>`` points from the first id to the second, one
containing ``<`` points back, one containing both yields both arcs.
Operators with neither (``---``, ``===``) contribute no arcs.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from mermaid_focus.ir.model import DiagramModel, Edge


class ReachabilityIndex:
    """Breadth-first descendant/ancestor queries, built once per model."""

    def __init__(self, digraph: nx.DiGraph) -> None:
        self.digraph = digraph
        self._reversed = digraph.reverse(copy=False)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], ids: Iterable[str] = ()) -> ReachabilityIndex:
        digraph: nx.DiGraph = nx.DiGraph()
        digraph.add_nodes_from(ids)
        for edge in edges:
            digraph.add_node(edge.from_id)
            digraph.add_node(edge.to_id)
            if edge.is_forward:
                digraph.add_edge(edge.from_id, edge.to_id)
            if edge.is_backward:
                digraph.add_edge(edge.to_id, edge.from_id)
        return cls(digraph)

    @classmethod
    def from_model(cls, model: DiagramModel) -> ReachabilityIndex:
        return cls.from_edges(model.edges, model.known_ids)

    def descendants(self, node_id: str) -> list[str]:
        """``node_id`` followed by everything reachable along forward arcs, BFS order."""
        return _closure(self.digraph, node_id)

    def ancestors(self, node_id: str) -> list[str]:
        """``node_id`` followed by everything that reaches it, BFS order."""
        return _closure(self._reversed, node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.digraph

    def arc_count(self) -> int:
        return self.digraph.number_of_edges()


def _closure(digraph: nx.DiGraph, start: str) -> list[str]:
    if start not in digraph:
        return [start]
    return [start] + [target for _, target in nx.bfs_edges(digraph, start)]
