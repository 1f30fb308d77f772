"""Canvas geometry and default sizes for composition."""

from __future__ import annotations

from dataclasses import dataclass, field

from lookalike.engine.mapper import View
from lookalike.svg.serializer import Viewport


def _default_viewports() -> dict[View, Viewport]:
    return {
        View.PORTRAIT: Viewport(width=200, height=200),
        View.FULL_BODY: Viewport(width=200, height=400),
    }


def _default_sizes() -> dict[View, int]:
    return {View.PORTRAIT: 200, View.FULL_BODY: 400}


@dataclass
class CompositionConfig:
    """Controls the output document of the compositor."""

    # Asset coordinate space per view
    viewports: dict[View, Viewport] = field(default_factory=_default_viewports)

    # Rendered height in pixels when the caller gives no size
    default_sizes: dict[View, int] = field(default_factory=_default_sizes)

    include_declaration: bool = False

    def viewport(self, view: View) -> Viewport:
        return self.viewports[View(view)]

    def size_for(self, view: View, size: float | None = None) -> float:
        return self.default_sizes[View(view)] if size is None else size
