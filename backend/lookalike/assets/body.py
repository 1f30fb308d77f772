"""Body, top and bottom templates for the full body view.

Clothing is cut for a fixed torso (shoulders at y=200, waist at y=296) so
any top and bottom fit any body shape.
"""

from __future__ import annotations

from lookalike.assets.base import BODY_CANVAS, mirrored, svg_template
from lookalike.models.attributes import BodyShape, BottomType, TopType

# (shoulder half-width, waist half-width, arm width)
_BODY_GEOMETRY: dict[BodyShape, tuple[float, float, float]] = {
    BodyShape.SLIM: (42, 28, 11),
    BodyShape.AVERAGE: (48, 34, 13),
    BodyShape.ATHLETIC: (54, 34, 15),
    BodyShape.PLUS: (54, 46, 16),
    BodyShape.MUSCULAR: (60, 38, 18),
}


def _body(shoulder: float, waist: float, arm: float) -> str:
    left, right = 100 - shoulder, 100 + shoulder
    return svg_template(
        mirrored(
            f'<path d="M{left:g} 206Q{left - arm:g} 210 {left - arm:g} 240L{left - arm + 2:g} 330'
            f'L{left + 2:g} 330L{left + 4:g} 240Z" fill="{{{{skin}}}}"/>'
            f'<ellipse cx="{left - arm / 2 + 2:g}" cy="336" rx="{arm / 2 + 1:g}" ry="9" fill="{{{{skin}}}}"/>'
        ),
        f'<path d="M{left:g} 206Q100 194 {right:g} 206L{100 + waist:g} 296L{100 - waist:g} 296Z" fill="{{{{skin}}}}"/>',
        f'<path d="M{left:g} 206Q{left + 6:g} 250 {100 - waist:g} 296" stroke="{{{{skinShadow2}}}}" stroke-width="4" fill="none" opacity=".3"/>',
        '<path d="M72 296L70 392L96 392L98 300Z" fill="{{skin}}"/>',
        '<path d="M128 296L130 392L104 392L102 300Z" fill="{{skinShadow1}}"/>',
        height=BODY_CANVAS,
    )


BODIES: dict[str, str] = {shape.value: _body(*geometry) for shape, geometry in _BODY_GEOMETRY.items()}

_NECKLINES: dict[str, str] = {
    "crew": '<path d="M84 202Q100 214 116 202" stroke="{{topShadow}}" stroke-width="3" fill="none"/>',
    "vneck": '<path d="M84 202L100 226L116 202" stroke="{{topShadow}}" stroke-width="3" fill="{{skin}}"/>',
    "collar": (
        '<path d="M82 200L100 216L92 226Z" fill="{{topAccent}}"/>'
        '<path d="M118 200L100 216L108 226Z" fill="{{topAccent}}"/>'
    ),
    "turtle": '<rect x="80" y="186" width="40" height="22" rx="6" fill="{{top}}" stroke="{{topShadow}}" stroke-width="1.5"/>',
    "scoop": '<path d="M80 202Q100 228 120 202" stroke="{{topShadow}}" stroke-width="2" fill="{{skin}}"/>',
    "hood": '<path d="M70 204Q100 178 130 204Q100 222 70 204Z" fill="{{topShadow}}"/>',
}


def _sleeves(length: float) -> str:
    if length <= 0:
        return ""
    return mirrored(
        f'<path d="M52 204Q34 208 34 236L36 {206 + length:g}L54 {206 + length:g}L56 236Z" fill="{{{{top}}}}"/>'
        f'<path d="M36 {204 + length:g}L54 {204 + length:g}" stroke="{{{{topShadow}}}}" stroke-width="3"/>'
    )


def _top(hem: float, sleeve: float, neckline: str, *extras: str, flare: float = 0) -> str:
    return svg_template(
        _sleeves(sleeve),
        f'<path d="M52 204Q100 192 148 204L{138 + flare:g} {hem:g}L{62 - flare:g} {hem:g}Z" fill="{{{{top}}}}"/>',
        f'<path d="M52 204Q62 250 {62 - flare:g} {hem:g}L74 {hem:g}Q70 250 60 206Z" fill="{{{{topShadow}}}}" opacity=".5"/>',
        f'<path d="M{62 - flare:g} {hem - 4:g}L{138 + flare:g} {hem - 4:g}" stroke="{{{{topDeep}}}}" stroke-width="2" opacity=".5"/>',
        _NECKLINES[neckline],
        *extras,
        height=BODY_CANVAS,
    )


_BUTTONS = "".join(f'<circle cx="100" cy="{y}" r="2" fill="{{{{topDeep}}}}"/>' for y in range(226, 296, 16))
_OPEN_FRONT = '<path d="M100 210L100 300" stroke="{{topDeep}}" stroke-width="2"/>'
_LAPELS = (
    '<path d="M84 202L100 250L78 226Z" fill="{{topShadow}}"/>'
    '<path d="M116 202L100 250L122 226Z" fill="{{topShadow}}"/>'
    '<path d="M90 204L100 240L110 204Z" fill="#FFFFFF"/>'
)

TOPS: dict[str, str] = {
    TopType.TSHIRT.value: _top(300, 26, "crew"),
    TopType.TSHIRT_VNECK.value: _top(300, 26, "vneck"),
    TopType.POLO.value: _top(300, 26, "collar", '<circle cx="100" cy="222" r="1.8" fill="{{topDeep}}"/>'),
    TopType.BUTTON_UP.value: _top(302, 116, "collar", _BUTTONS),
    TopType.BLOUSE.value: _top(298, 70, "scoop", '<path d="M80 230Q100 240 120 230" stroke="{{topAccent}}" fill="none"/>', flare=4),
    TopType.SWEATER.value: _top(304, 120, "crew", '<rect x="60" y="292" width="80" height="10" fill="{{topShadow}}" opacity=".6"/>'),
    TopType.HOODIE.value: _top(306, 120, "hood", '<path d="M70 262L130 262L124 290L76 290Z" fill="{{topShadow}}" opacity=".5"/>'),
    TopType.JACKET.value: _top(306, 122, "collar", _OPEN_FRONT, '<rect x="66" y="268" width="20" height="3" fill="{{topDeep}}"/>'),
    TopType.BLAZER.value: _top(310, 122, "crew", _LAPELS, '<circle cx="100" cy="272" r="2.5" fill="{{topDeep}}"/>'),
    TopType.TANK.value: _top(298, 0, "scoop"),
    TopType.CROP.value: _top(262, 20, "scoop"),
    TopType.TURTLENECK.value: _top(302, 120, "turtle"),
    TopType.CARDIGAN.value: _top(308, 118, "vneck", _OPEN_FRONT, _BUTTONS),
    TopType.DRESS.value: _top(368, 22, "scoop", '<path d="M70 296Q100 306 130 296" stroke="{{topShadow}}" stroke-width="2" fill="none"/>', flare=24),
    TopType.OVERALL.value: svg_template(
        '<path d="M70 232L130 232L134 300L66 300Z" fill="{{top}}"/>',
        mirrored('<path d="M66 206L74 206L78 234L70 234Z" fill="{{top}}"/><circle cx="74" cy="236" r="3" fill="{{topAccent}}"/>'),
        '<rect x="86" y="246" width="28" height="20" rx="2" fill="{{topShadow}}"/>',
        height=BODY_CANVAS,
    ),
}


def _legs(bottom: float, gap: float = 2, inset: float = 0, fill: str = "{{bottom}}") -> str:
    return mirrored(
        f'<path d="M{66 + inset:g} 294L{64 + inset:g} {bottom:g}L{98 - gap:g} {bottom:g}L{100 - gap / 2:g} 312L100 294Z" fill="{fill}"/>'
    )


_WAISTBAND = '<rect x="66" y="292" width="68" height="8" fill="{{bottomShadow}}"/>'


def _skirt(hem: float, flare: float) -> str:
    return (
        f'<path d="M66 294L134 294L{138 + flare:g} {hem:g}L{62 - flare:g} {hem:g}Z" fill="{{{{bottom}}}}"/>'
        f'<path d="M100 300L100 {hem:g}" stroke="{{{{bottomShadow}}}}" stroke-width="1.5" opacity=".5"/>'
    )


BOTTOMS: dict[str, str] = {
    BottomType.JEANS.value: svg_template(
        _legs(392), _WAISTBAND,
        mirrored('<path d="M70 304Q78 314 90 304" stroke="{{bottomDeep}}" fill="none"/>'),
        mirrored('<path d="M80 330L80 388" stroke="{{bottomShadow}}" stroke-width="1" opacity=".6"/>'),
        height=BODY_CANVAS,
    ),
    BottomType.PANTS.value: svg_template(_legs(392), _WAISTBAND, height=BODY_CANVAS),
    BottomType.SHORTS.value: svg_template(_legs(334), _WAISTBAND, height=BODY_CANVAS),
    BottomType.SKIRT.value: svg_template(_skirt(344, 8), _WAISTBAND, height=BODY_CANVAS),
    BottomType.SKIRT_LONG.value: svg_template(_skirt(388, 16), _WAISTBAND, height=BODY_CANVAS),
    BottomType.LEGGINGS.value: svg_template(_legs(390, gap=1, inset=3), height=BODY_CANVAS),
    BottomType.SWEATPANTS.value: svg_template(
        _legs(392), _WAISTBAND,
        mirrored('<rect x="64" y="380" width="32" height="10" rx="3" fill="{{bottomShadow}}"/>'),
        '<path d="M96 296L94 310M104 296L106 310" stroke="{{bottomDeep}}" stroke-width="1.5"/>',
        height=BODY_CANVAS,
    ),
    BottomType.SLACKS.value: svg_template(
        _legs(392), _WAISTBAND,
        mirrored('<path d="M82 304L81 390" stroke="{{bottomDeep}}" stroke-width="1" opacity=".5"/>'),
        height=BODY_CANVAS,
    ),
}
