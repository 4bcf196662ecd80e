"""Tests for mermaid_focus.parsers.lines — node shapes and edge lines."""

import pytest

from mermaid_focus.parsers.lines import parse_edge_line, parse_node_line, strip_comment
from mermaid_focus.types import NodeShape

# ─── Comments ────────────────────────────────────────────────────────────────


def test_strip_comment_inline():
    assert strip_comment("    A[Start] %% first node") == "A[Start]"


def test_strip_comment_whole_line():
    assert strip_comment("%% nothing here") == ""


def test_comment_only_line_is_not_a_node():
    assert parse_node_line("   %% A[Start]") is None


# ─── Shapes ──────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "line,shape,label",
    [
        ("A[Rect]", NodeShape.Rectangle, "Rect"),
        ("A(Round)", NodeShape.Rounded, "Round"),
        ("A((Circle))", NodeShape.Circle, "Circle"),
        ("A[[Sub]]", NodeShape.Subroutine, "Sub"),
        ("A{{Hex}}", NodeShape.Hexagon, "Hex"),
        ("A([Stadium])", NodeShape.Stadium, "Stadium"),
        ("A[(Database)]", NodeShape.Cylinder, "Database"),
        ("A[/In/]", NodeShape.Parallelogram, "In"),
        ("A[\\Out\\]", NodeShape.ParallelogramAlt, "Out"),
        ("A[/Top\\]", NodeShape.Trapezoid, "Top"),
        ("A[\\Bottom/]", NodeShape.TrapezoidAlt, "Bottom"),
        ("A>Flag]", NodeShape.Asymmetric, "Flag"),
        ("A{Decide?}", NodeShape.Rhombus, "Decide?"),
    ],
)
def test_each_shape(line, shape, label):
    decl = parse_node_line(line)
    assert decl is not None
    assert decl.id == "A"
    assert decl.shape == shape
    assert decl.label == label


def test_circle_wins_over_round_edge():
    decl = parse_node_line("id((Label))")
    assert decl.shape == NodeShape.Circle
    assert decl.label == "Label"
    assert (decl.open, decl.close) == ("((", "))")


def test_cylinder_wins_over_rectangle():
    decl = parse_node_line("db[(Label)]")
    assert decl.shape == NodeShape.Cylinder
    assert decl.label == "Label"


def test_catalog_has_thirteen_shapes_longest_first():
    order = NodeShape.by_precedence()
    assert len(order) == 13
    lengths = [len(s.open) for s in order]
    assert lengths == sorted(lengths, reverse=True)


# ─── Node ids and labels ─────────────────────────────────────────────────────


def test_hyphenated_id():
    decl = parse_node_line("  load-data[Load data]  ")
    assert decl.id == "load-data"
    assert decl.label == "Load data"


def test_space_between_id_and_shape():
    decl = parse_node_line("A [Start]")
    assert decl.id == "A"
    assert decl.label == "Start"


def test_label_kept_verbatim():
    decl = parse_node_line('A["Line one\\nLine two"]')
    assert decl.label == '"Line one\\nLine two"'


def test_quoted_label_may_contain_close_token():
    decl = parse_node_line('A["a] b"]')
    assert decl.label == '"a] b"'


def test_empty_label_is_not_a_node():
    assert parse_node_line("A[]") is None


def test_bare_id_is_not_a_node():
    assert parse_node_line("A") is None


def test_id_must_start_with_letter():
    assert parse_node_line("1A[x]") is None


def test_edge_with_inline_shapes_is_not_a_node():
    assert parse_node_line("A[x] --> B[y]") is None


def test_operator_before_asymmetric_is_not_a_node():
    assert parse_node_line("A-->B]") is None


# ─── Edges ───────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("op", ["-->", "---", "==>", "-.->", "<-->", "<==>", "<-.->", "<--", "--->"])
def test_edge_operators(op):
    edge = parse_edge_line(f"A {op} B")
    assert edge is not None
    assert (edge.from_id, edge.operator, edge.to_id) == ("A", op, "B")


def test_edge_without_spaces():
    edge = parse_edge_line("A-->B")
    assert (edge.from_id, edge.operator, edge.to_id) == ("A", "-->", "B")


def test_edge_between_hyphenated_ids():
    edge = parse_edge_line("load-data --> clean-data")
    assert (edge.from_id, edge.operator, edge.to_id) == ("load-data", "-->", "clean-data")


def test_edge_with_trailing_comment():
    edge = parse_edge_line("A --> B %% why")
    assert edge.to_id == "B"


def test_labelled_edge_is_not_recognised():
    assert parse_edge_line("A -->|yes| B") is None


def test_chained_edge_is_not_recognised():
    assert parse_edge_line("A --> B --> C") is None


# ─── Nested delimiters and bare references ───────────────────────────────────


@pytest.mark.parametrize(
    "line,shape,label",
    [
        ("A[Array[0]]", NodeShape.Rectangle, "Array[0]"),
        ("B(call (x))", NodeShape.Rounded, "call (x)"),
        ("C{map{k}}", NodeShape.Rhombus, "map{k}"),
    ],
)
def test_label_with_nested_delimiters(line, shape, label):
    decl = parse_node_line(line)
    assert decl is not None
    assert decl.shape == shape
    assert decl.label == label


def test_edge_between_circles_is_not_a_node():
    assert parse_node_line("A((x)) --> B((y))") is None


def test_bare_hyphenated_id_is_not_an_edge():
    assert parse_edge_line("load-data") is None


def test_single_character_operator_is_not_an_edge():
    assert parse_edge_line("A - B") is None
