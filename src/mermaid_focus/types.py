"""Shared type definitions for mermaid-focus.

The node shape catalog used by the line parser and the text renderer.
"""

from __future__ import annotations

from enum import Enum


class NodeShape(Enum):
    """Delimiter pairs recognised around a node label, as (open, close)."""

    Circle = ("((", "))")  # id((Label))
    Subroutine = ("[[", "]]")  # id[[Label]]
    Hexagon = ("{{", "}}")  # id{{Label}}
    Stadium = ("([", "])")  # id([Label])
    Cylinder = ("[(", ")]")  # id[(Label)]
    Parallelogram = ("[/", "/]")  # id[/Label/]
    ParallelogramAlt = ("[\\", "\\]")  # id[\Label\]
    Trapezoid = ("[/", "\\]")  # id[/Label\]
    TrapezoidAlt = ("[\\", "/]")  # id[\Label/]
    Rounded = ("(", ")")  # id(Label)
    Asymmetric = (">", "]")  # id>Label]
    Rectangle = ("[", "]")  # id[Label]
    Rhombus = ("{", "}")  # id{Label}

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]

    @classmethod
    def default(cls) -> NodeShape:
        return cls.Rectangle

    @classmethod
    def by_precedence(cls) -> list[NodeShape]:
        """Catalog ordered longest open token first, declaration order within a length."""
        return sorted(cls, key=lambda shape: -len(shape.open))
