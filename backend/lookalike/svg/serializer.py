"""Write composed avatar documents."""

from __future__ import annotations

from dataclasses import dataclass

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

PLACEHOLDER_BACKGROUND = "#E5E7EB"
PLACEHOLDER_FIGURE = "#9CA3AF"


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def output_size(self, size: float) -> tuple[float, float]:
        """Pixel (width, height) for a render whose height is ``size``."""
        return (size * self.aspect, size)


def _fmt(value: float) -> str:
    """Compact number formatting: 200.0 -> '200', 62.5 -> '62.5'."""
    return f"{value:g}"


def _open_svg(viewport: Viewport, size: float, label: str) -> str:
    width, height = viewport.output_size(size)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg"'
        f' viewBox="0 0 {viewport.width} {viewport.height}"'
        f' width="{_fmt(width)}" height="{_fmt(height)}"'
        f' role="img" aria-label="{label}">'
    )


def serialize_avatar(
    groups: list[str],
    viewport: Viewport,
    size: float,
    include_declaration: bool = False,
) -> str:
    """Wrap layer groups, already in paint order, in one clipped document."""
    lines: list[str] = []
    if include_declaration:
        lines.append(XML_DECLARATION)
    lines.append(_open_svg(viewport, size, "Avatar"))
    lines.append("  <defs>")
    lines.append('    <clipPath id="avatar-clip">')
    lines.append(f'      <rect x="0" y="0" width="{viewport.width}" height="{viewport.height}" rx="8" />')
    lines.append("    </clipPath>")
    lines.append("  </defs>")
    lines.append('  <g clip-path="url(#avatar-clip)">')
    for group in groups:
        lines.append(f"    {group}")
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)


def serialize_placeholder(
    viewport: Viewport,
    size: float,
    include_declaration: bool = False,
) -> str:
    """Neutral silhouette shown when no layer produced markup."""
    w, h = viewport.width, viewport.height
    lines: list[str] = []
    if include_declaration:
        lines.append(XML_DECLARATION)
    lines.append(_open_svg(viewport, size, "Avatar placeholder"))
    lines.append(f'  <rect width="100%" height="100%" fill="{PLACEHOLDER_BACKGROUND}" rx="8" />')
    lines.append(
        f'  <circle cx="{_fmt(w / 2)}" cy="{_fmt(h * 0.35)}" r="{_fmt(w * 0.2)}"'
        f' fill="{PLACEHOLDER_FIGURE}" />'
    )
    lines.append(
        f'  <ellipse cx="{_fmt(w / 2)}" cy="{_fmt(h * 0.85)}" rx="{_fmt(w * 0.3)}" ry="{_fmt(h * 0.2)}"'
        f' fill="{PLACEHOLDER_FIGURE}" />'
    )
    lines.append("</svg>")
    return "\n".join(lines)


def layer_group(layer: str, part_id: str, content: str) -> str:
    """One layer's markup, labelled for debugging and styling."""
    return f'<!-- {layer}: {part_id} -->\n    <g class="layer-{layer}">{content}</g>'
