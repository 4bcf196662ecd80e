"""Cross-component properties: parse, index, visibility and render together."""

import pytest

from mermaid_focus import parse, render
from mermaid_focus.ir.reachability import ReachabilityIndex
from mermaid_focus.visibility import VisibilityState


def _visible_render(src: str, *, hide_all: bool = False, show: tuple[str, ...] = ()) -> str:
    model = parse(src)
    state = VisibilityState.for_model(model)
    if hide_all:
        state.hide_all()
    for node_id in show:
        state.set_visible(node_id, True)
    return render(model, state)


def test_chain_focus_descendants():
    model = parse("flowchart TD\n    A --> B\n    B --> C\n")
    index = ReachabilityIndex.from_model(model)
    state = VisibilityState.for_model(model)
    state.hide_all()
    state.show_descendants("A", index)
    assert set(state.visible_ids()) == {"A", "B", "C"}
    state.hide_all()
    state.show_descendants("C", index)
    assert set(state.visible_ids()) == {"C"}


def test_chain_focus_ancestors():
    model = parse("flowchart TD\n    A --> B\n    B --> C\n")
    index = ReachabilityIndex.from_model(model)
    state = VisibilityState.for_model(model)
    state.hide_all()
    state.show_ancestors("C", index)
    assert set(state.visible_ids()) == {"A", "B", "C"}


def test_dangling_endpoint_shown_only_when_made_visible():
    src = "flowchart TD\n    A[a]\n    A --> ghost\n"
    assert "ghost" not in _visible_render(src, hide_all=True, show=("A",))
    out = _visible_render(src, hide_all=True, show=("A", "ghost"))
    assert "    A --> ghost" in out


def test_round_trip_without_front_matter_or_directive():
    src = "A[a]\nB(b)\nA --> B\n"
    model = parse(src)
    again = parse(render(model, VisibilityState.for_model(model)))
    assert again.directive == "flowchart TD"
    assert list(again.nodes) == ["A", "B"]
    assert again.edges == model.edges


def test_model_is_immutable():
    model = parse("flowchart TD\n    A[a]\n")
    with pytest.raises(TypeError):
        model.nodes["B"] = model.nodes["A"]  # type: ignore[index]
    assert list(model.nodes) == ["A"]


def test_filter_dsl_hides_requested_ids():
    from mermaid_focus import filter_dsl

    out = filter_dsl("flowchart TD\n    A[a]\n    B[b]\n    A --> B\n", hidden=["B"])
    assert out == "flowchart TD\n\n    A[a]\n\n    click A onNodeClick\n"
