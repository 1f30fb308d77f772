"""Shared builders for part templates.

Head parts are drawn in a 200x200 space centered on x=100; body parts use
the lower half of the 200x400 full body space.
"""

from __future__ import annotations

HEAD_CANVAS = 200
BODY_CANVAS = 400


def svg_template(*elements: str, height: int = HEAD_CANVAS) -> str:
    """Wrap template elements in the part's own ``<svg>`` element."""
    lines = [f'<svg viewBox="0 0 200 {height}">']
    lines.extend(e for e in elements if e)
    lines.append("</svg>")
    return "\n".join(lines)


def mirrored(markup: str) -> str:
    """``markup`` plus its reflection about x=100."""
    return f'<g>{markup}</g><g transform="translate(200,0) scale(-1,1)">{markup}</g>'


def radial_gradient(grad_id: str, stops: list[tuple[int, str, float]], cx: str = "50%", cy: str = "50%", r: str = "50%") -> str:
    """Radial gradient from (offset %, color, opacity) stops."""
    stop_markup = "".join(
        f'<stop offset="{offset}%" stop-color="{color}" stop-opacity="{opacity:g}"/>'
        for offset, color, opacity in stops
    )
    return f'<radialGradient id="{grad_id}" cx="{cx}" cy="{cy}" r="{r}">{stop_markup}</radialGradient>'


def linear_gradient(grad_id: str, stops: list[tuple[int, str, float]], vertical: bool = True) -> str:
    x2, y2 = ("0%", "100%") if vertical else ("100%", "0%")
    stop_markup = "".join(
        f'<stop offset="{offset}%" stop-color="{color}" stop-opacity="{opacity:g}"/>'
        for offset, color, opacity in stops
    )
    return f'<linearGradient id="{grad_id}" x1="0%" y1="0%" x2="{x2}" y2="{y2}">{stop_markup}</linearGradient>'


def defs(*gradients: str) -> str:
    return "<defs>" + "".join(gradients) + "</defs>"
