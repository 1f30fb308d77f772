"""Glasses and headwear templates."""

from __future__ import annotations

from lookalike.assets.base import mirrored, svg_template
from lookalike.models.attributes import Glasses, Headwear

_BRIDGE = '<path d="M80 92Q100 84 120 92" stroke="{{glassesFrame}}" stroke-width="3" fill="none"/>'
_TEMPLES = mirrored('<path d="M32 88L22 86" stroke="{{glassesFrame}}" stroke-width="3" stroke-linecap="round"/>')


def _lens(shape: str, lens: str = "{{glassesLens}}", frame_width: float = 3) -> str:
    return (
        f'<{shape} fill="{lens}" stroke="{{{{glassesFrame}}}}" stroke-width="{frame_width:g}"/>'
        f'<{shape} fill="none" stroke="#FFFFFF" stroke-width=".6" opacity=".25" transform="translate(1,1)"/>'
    )


_LENSES: dict[Glasses, str] = {
    Glasses.READING: mirrored(_lens('rect x="34" y="86" width="44" height="20" rx="6"', frame_width=2)),
    Glasses.ROUND: mirrored(_lens('circle cx="56" cy="92" r="20"')),
    Glasses.SQUARE: mirrored(_lens('rect x="32" y="78" width="48" height="30" rx="3"')),
    Glasses.AVIATOR: mirrored(_lens('path d="M32 80L80 80Q82 100 66 110Q44 114 36 100Q30 90 32 80Z"', frame_width=2)),
    Glasses.CAT: mirrored(_lens('path d="M30 78Q56 80 80 84Q80 104 60 108Q38 108 34 92Q30 84 30 78Z"')),
    Glasses.SUNGLASSES: mirrored(_lens('rect x="32" y="78" width="48" height="30" rx="8"', lens="#1A1A1A")),
    Glasses.AVIATOR_SUN: mirrored(_lens('path d="M32 80L80 80Q82 100 66 110Q44 114 36 100Q30 90 32 80Z"', lens="#2B2B2B", frame_width=2)),
    Glasses.SPORT: (
        '<path d="M28 82Q100 70 172 82L168 100Q140 112 104 100L96 100Q60 112 32 100Z"'
        ' fill="#30343A" stroke="{{glassesFrame}}" stroke-width="3"/>'
        '<path d="M40 86Q100 78 160 86" stroke="#FFFFFF" stroke-width="1" fill="none" opacity=".3"/>'
    ),
}

GLASSES: dict[str, str] = {
    style.value: svg_template(lenses, _BRIDGE, _TEMPLES) for style, lenses in _LENSES.items()
}

_BRIM_SHADOW = '<path d="M36 62Q100 76 164 62" stroke="{{skinAO}}" stroke-width="6" fill="none" opacity=".25"/>'

_HEADWEAR: dict[Headwear, list[str]] = {
    Headwear.CAP: [
        '<path d="M34 60Q34 12 100 10Q166 12 166 60Z" fill="{{headwear}}"/>',
        '<path d="M100 60Q150 56 186 68Q150 74 100 66Z" fill="{{headwearShadow}}"/>',
        '<circle cx="100" cy="12" r="4" fill="{{headwearShadow}}"/>',
        '<path d="M100 12L100 60" stroke="{{headwearShadow}}" stroke-width="1.5" opacity=".6"/>',
        _BRIM_SHADOW,
    ],
    Headwear.BEANIE: [
        '<path d="M30 66Q28 4 100 2Q172 4 170 66Z" fill="{{headwear}}"/>',
        '<rect x="28" y="54" width="144" height="18" rx="6" fill="{{headwearShadow}}"/>',
        *(f'<path d="M{x} 58L{x} 70" stroke="{{{{headwear}}}}" stroke-width="2" opacity=".5"/>' for x in range(40, 164, 12)),
    ],
    Headwear.FEDORA: [
        '<ellipse cx="100" cy="58" rx="86" ry="12" fill="{{headwearShadow}}"/>',
        '<path d="M46 58Q44 12 100 8Q156 12 154 58Z" fill="{{headwear}}"/>',
        '<path d="M80 10Q100 22 120 10" stroke="{{headwearShadow}}" stroke-width="3" fill="none"/>',
        '<rect x="46" y="44" width="108" height="10" fill="{{topDeep}}"/>',
    ],
    Headwear.BUCKET: [
        '<path d="M24 70L48 22Q100 6 152 22L176 70Q100 80 24 70Z" fill="{{headwear}}"/>',
        '<path d="M44 46Q100 56 156 46" stroke="{{headwearShadow}}" stroke-width="2" fill="none"/>',
        _BRIM_SHADOW,
    ],
    Headwear.SNAPBACK: [
        '<path d="M32 62Q32 8 100 6Q168 8 168 62Z" fill="{{headwear}}"/>',
        '<path d="M30 60Q100 52 170 60L172 72Q100 64 28 72Z" fill="{{headwearShadow}}"/>',
        '<rect x="80" y="26" width="40" height="18" rx="3" fill="{{topAccent}}"/>',
        _BRIM_SHADOW,
    ],
    Headwear.VISOR: [
        '<path d="M34 56Q100 44 166 56L166 64Q100 54 34 64Z" fill="{{headwear}}"/>',
        '<path d="M60 60Q100 54 140 60Q120 82 100 82Q80 82 60 60Z" fill="{{headwearShadow}}"/>',
    ],
    Headwear.BANDANA: [
        '<path d="M32 62Q30 14 100 12Q170 14 168 62Q100 50 32 62Z" fill="{{headwear}}"/>',
        '<path d="M164 56L186 70L176 80L166 64Z" fill="{{headwearShadow}}"/>',
        *(f'<circle cx="{x}" cy="34" r="2.5" fill="{{{{topAccent}}}}"/>' for x in range(56, 150, 16)),
    ],
    Headwear.HEADBAND: [
        '<path d="M32 58Q100 30 168 58L168 68Q100 40 32 68Z" fill="{{headwear}}"/>',
        '<path d="M40 60Q100 36 160 60" stroke="{{topAccent}}" stroke-width="1.5" fill="none"/>',
    ],
    Headwear.BERET: [
        '<ellipse cx="92" cy="34" rx="72" ry="26" fill="{{headwear}}"/>',
        '<path d="M40 52Q100 66 150 50" stroke="{{headwearShadow}}" stroke-width="5" fill="none"/>',
        '<path d="M92 8L94 2" stroke="{{headwearShadow}}" stroke-width="3" stroke-linecap="round"/>',
    ],
}

HEADWEAR: dict[str, str] = {style.value: svg_template(*elements) for style, elements in _HEADWEAR.items()}
