"""Centralized configuration for mermaid-focus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the filtered text renderer."""

    default_directive: str = "flowchart TD"
    indent: str = "    "
    click_hooks: bool = True
    click_callback: str = "onNodeClick"

    def __post_init__(self) -> None:
        if not self.default_directive.strip():
            raise ValueError("default_directive must not be empty")
        if not self.click_callback.isidentifier():
            raise ValueError(f"click_callback '{self.click_callback}' is not a valid identifier")
