"""Flowchart parser — line-oriented and permissive.

Builds a DiagramModel from Mermaid flowchart text. Every line is classified
on its own; anything unrecognised is dropped and recorded for diagnostics
instead of raising.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from mermaid_focus.ir.model import (
    ClassAssignment,
    ClassDefinition,
    DiagramModel,
    DroppedLine,
    Edge,
    Node,
    Subgraph,
)
from mermaid_focus.parsers.lines import parse_edge_line, parse_node_line, strip_comment

logger = logging.getLogger(__name__)

# ─── Line patterns ───────────────────────────────────────────────────────────

_FRONT_MATTER_FENCE = "---"
_DIRECTIVE_RE = re.compile(r"(?:flowchart|graph)(?:\s|$)", re.IGNORECASE)
_CLASS_DEF_RE = re.compile(r"classDef\s+(\S+)\s+(.+)")
_CLASS_RE = re.compile(r"class\s+(.+?)\s+(\S+)")
_CLICK_RE = re.compile(r"click\s+[A-Za-z][\w-]*\s+\S.*")
_SUBGRAPH_RE = re.compile(r"subgraph(?:\s+(.*))?", re.IGNORECASE)
_SUBGRAPH_ID_RE = re.compile(r"[A-Za-z][\w-]*")
_DIRECTION_RE = re.compile(r"direction\s+(TB|TD|BT|LR|RL)", re.IGNORECASE)
_END_RE = re.compile(r"end", re.IGNORECASE)
_ID_LIST_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass
class _OpenSubgraph:
    id: str
    header_line: str
    node_ids: list[str] = field(default_factory=list)
    direction_line: str | None = None

    def freeze(self) -> Subgraph:
        return Subgraph(
            id=self.id,
            header_line=self.header_line,
            node_ids=tuple(self.node_ids),
            direction_line=self.direction_line,
        )


@dataclass
class _Builder:
    """Mutable accumulator; frozen into a DiagramModel by ``build()``."""

    lines: list[str]
    pos: int = 0
    front_matter: list[str] = field(default_factory=list)
    directive: str | None = None
    subgraphs: list[_OpenSubgraph] = field(default_factory=list)
    current: _OpenSubgraph | None = None
    top_level_ids: list[str] = field(default_factory=list)
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    class_definitions: list[ClassDefinition] = field(default_factory=list)
    class_assignments: list[ClassAssignment] = field(default_factory=list)
    dropped: list[DroppedLine] = field(default_factory=list)

    # ── Preamble ──────────────────────────────────────────────────────────────

    def take_front_matter(self) -> None:
        if not self.lines or self.lines[0].strip() != _FRONT_MATTER_FENCE:
            return
        self.front_matter.append(self.lines[0])
        self.pos = 1
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            self.front_matter.append(line)
            self.pos += 1
            if line.strip() == _FRONT_MATTER_FENCE:
                break
        else:
            logger.debug("front matter opened on line 1 is never closed")
        if self.pos < len(self.lines) and not self.lines[self.pos].strip():
            self.pos += 1

    def take_directive(self) -> None:
        for idx in range(self.pos, len(self.lines)):
            if _DIRECTIVE_RE.match(self.lines[idx].strip()):
                for skipped in range(self.pos, idx):
                    self.drop(skipped, "precedes the flowchart directive", quiet_if_blank=True)
                self.directive = self.lines[idx].strip()
                self.pos = idx + 1
                return
        logger.debug("no flowchart directive found; the default will be used on render")

    # ── Body ──────────────────────────────────────────────────────────────────

    def parse_body(self) -> None:
        while self.pos < len(self.lines):
            self.parse_line(self.pos, self.lines[self.pos])
            self.pos += 1

    def parse_line(self, idx: int, raw: str) -> None:
        text = raw.strip()
        if not text or text.startswith("%%"):
            return
        code = strip_comment(text)
        if not code:
            return

        m = _CLASS_DEF_RE.fullmatch(code)
        if m:
            self.class_definitions.append(ClassDefinition(name=m.group(1), style=m.group(2), line=code))
            return

        m = _CLASS_RE.fullmatch(code)
        if m:
            ids = tuple(i for i in _ID_LIST_SPLIT_RE.split(m.group(1)) if i)
            self.class_assignments.append(ClassAssignment(node_ids=ids, class_name=m.group(2)))
            return

        if _CLICK_RE.match(code):
            # Interaction hooks are regenerated by the renderer.
            return

        m = _SUBGRAPH_RE.fullmatch(code)
        if m:
            self.open_subgraph(code, m.group(1) or "")
            return

        m = _DIRECTION_RE.fullmatch(code)
        if m and self.current is not None:
            self.current.direction_line = code
            return

        if _END_RE.fullmatch(code):
            if self.current is None:
                logger.debug("line %d: 'end' with no open subgraph", idx + 1)
            self.current = None
            return

        decl = parse_node_line(code)
        if decl is not None:
            self.declare_node(Node(id=decl.id, label=decl.label, shape=decl.shape))
            return

        edge = parse_edge_line(code)
        if edge is not None:
            self.edges.append(Edge(from_id=edge.from_id, to_id=edge.to_id, operator=edge.operator))
            return

        self.drop(idx, "unrecognised statement")

    def open_subgraph(self, header_line: str, rest: str) -> None:
        m = _SUBGRAPH_ID_RE.match(rest.strip())
        sg_id = m.group(0) if m else f"sg{len(self.subgraphs) + 1}"
        if self.current is not None:
            logger.debug("subgraph %r replaces open subgraph %r; nesting is not supported", sg_id, self.current.id)
        self.current = _OpenSubgraph(id=sg_id, header_line=header_line)
        self.subgraphs.append(self.current)

    def declare_node(self, node: Node) -> None:
        previous = self.nodes.get(node.id)
        if previous is not None:
            # Attributes follow the latest declaration; the container stays put.
            self.nodes[node.id] = replace(node, subgraph_id=previous.subgraph_id)
            return
        if self.current is not None:
            node = replace(node, subgraph_id=self.current.id)
            self.current.node_ids.append(node.id)
        else:
            self.top_level_ids.append(node.id)
        self.nodes[node.id] = node

    def drop(self, idx: int, reason: str, quiet_if_blank: bool = False) -> None:
        text = self.lines[idx].strip()
        if quiet_if_blank and (not text or text.startswith("%%")):
            return
        logger.debug("line %d dropped (%s): %s", idx + 1, reason, text)
        self.dropped.append(DroppedLine(lineno=idx + 1, text=text, reason=reason))

    def build(self) -> DiagramModel:
        return DiagramModel(
            front_matter=tuple(self.front_matter),
            directive=self.directive,
            subgraphs=tuple(sg.freeze() for sg in self.subgraphs),
            top_level_ids=tuple(self.top_level_ids),
            nodes=MappingProxyType(dict(self.nodes)),
            edges=tuple(self.edges),
            class_definitions=tuple(self.class_definitions),
            class_assignments=tuple(self.class_assignments),
            dropped=tuple(self.dropped),
        )


class FlowchartParser:
    """Flowchart diagram parser."""

    def parse(self, src: str) -> DiagramModel:
        builder = _Builder(lines=src.splitlines())
        builder.take_front_matter()
        builder.take_directive()
        builder.parse_body()
        model = builder.build()
        logger.debug(
            "parsed %d nodes, %d edges, %d subgraphs (%d lines dropped)",
            len(model.nodes),
            len(model.edges),
            len(model.subgraphs),
            len(model.dropped),
        )
        return model
