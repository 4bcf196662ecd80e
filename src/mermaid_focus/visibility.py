"""Per-session visibility map over node ids."""

from __future__ import annotations

from collections.abc import Iterable

from mermaid_focus.ir.model import DiagramModel
from mermaid_focus.ir.reachability import ReachabilityIndex


class VisibilityState:
    """Mapping of node id to visible flag. Ids never stored count as visible."""

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._visible: dict[str, bool] = dict.fromkeys(ids, True)

    @classmethod
    def for_model(cls, model: DiagramModel) -> VisibilityState:
        return cls(model.known_ids)

    def is_visible(self, node_id: str) -> bool:
        return self._visible.get(node_id, True)

    def set_visible(self, node_id: str, visible: bool) -> None:
        self._visible[node_id] = visible

    def show_all(self) -> None:
        for node_id in self._visible:
            self._visible[node_id] = True

    def hide_all(self) -> None:
        for node_id in self._visible:
            self._visible[node_id] = False

    def show_descendants(self, node_id: str, index: ReachabilityIndex) -> None:
        for reached in index.descendants(node_id):
            self._visible[reached] = True

    def show_ancestors(self, node_id: str, index: ReachabilityIndex) -> None:
        for reached in index.ancestors(node_id):
            self._visible[reached] = True

    def visible_ids(self) -> list[str]:
        return [node_id for node_id, visible in self._visible.items() if visible]

    def hidden_ids(self) -> list[str]:
        return [node_id for node_id, visible in self._visible.items() if not visible]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._visible

    def __repr__(self) -> str:
        return f"VisibilityState(visible={len(self.visible_ids())}, hidden={len(self.hidden_ids())})"
