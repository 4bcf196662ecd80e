"""Single-line classifiers — node declarations and edge declarations.

Each function looks at one source line in isolation; the flowchart parser
decides which classifier to try and in what order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mermaid_focus.types import NodeShape

_COMMENT_MARKER = "%%"

_NODE_ID_RE = re.compile(r"[A-Za-z][\w-]*")
_EDGE_RE = re.compile(r"([A-Za-z][\w-]*?)\s*([<>=.\-]{2,})\s*([A-Za-z][\w-]*)")
_LINK_TAIL = r"\s*[<>=.\-]{2,}\s*[A-Za-z]"

_SHAPES_BY_PRECEDENCE: list[NodeShape] = NodeShape.by_precedence()


@dataclass(frozen=True)
class NodeDeclaration:
    id: str
    label: str
    shape: NodeShape

    @property
    def open(self) -> str:
        return self.shape.open

    @property
    def close(self) -> str:
        return self.shape.close


@dataclass(frozen=True)
class EdgeDeclaration:
    from_id: str
    operator: str
    to_id: str


def strip_comment(line: str) -> str:
    """Drop everything from the first ``%%`` onward and trim whitespace."""
    idx = line.find(_COMMENT_MARKER)
    if idx != -1:
        line = line[:idx]
    return line.strip()


def match_shape(rest: str) -> tuple[NodeShape, str] | None:
    """Match ``rest`` against the shape catalog, longest open token first."""
    for shape in _SHAPES_BY_PRECEDENCE:
        if not (rest.startswith(shape.open) and rest.endswith(shape.close)):
            continue
        if len(rest) <= len(shape.open) + len(shape.close):
            continue
        label = rest[len(shape.open) : len(rest) - len(shape.close)]
        if _is_quoted(label) or not _closes_before_link(label, shape):
            return (shape, label)
    return None


def _closes_before_link(label: str, shape: NodeShape) -> bool:
    """True when the label closes the shape and continues with a link to another id, as in ``x] --> B[y``."""
    return re.search(re.escape(shape.close) + _LINK_TAIL, label) is not None


def _is_quoted(label: str) -> bool:
    return len(label) >= 2 and label.startswith('"') and label.endswith('"')


def parse_node_line(line: str) -> NodeDeclaration | None:
    """Parse ``id<open>label<close>``. Returns None when the line is not a node."""
    text = strip_comment(line)
    if not text:
        return None
    m = _NODE_ID_RE.match(text)
    if not m:
        return None
    node_id = m.group(0)
    # A trailing hyphen belongs to a link operator, as in ``A-->B]``.
    if node_id.endswith("-"):
        return None
    matched = match_shape(text[m.end() :].lstrip())
    if matched is None:
        return None
    shape, label = matched
    return NodeDeclaration(id=node_id, label=label, shape=shape)


def parse_edge_line(line: str) -> EdgeDeclaration | None:
    """Parse ``<id> <operator> <id>`` where operator is a run of two or more of ``< > = . -``."""
    text = strip_comment(line)
    m = _EDGE_RE.fullmatch(text)
    if not m:
        return None
    return EdgeDeclaration(from_id=m.group(1), operator=m.group(2), to_id=m.group(3))
