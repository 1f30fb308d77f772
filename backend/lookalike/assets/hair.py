"""Hair and facial hair templates.

Every hair style draws in two passes: ``{style}_back`` sits behind the head,
``{style}_front`` covers the forehead and frames the face.
"""

from __future__ import annotations

from lookalike.assets.base import defs, linear_gradient, mirrored, svg_template
from lookalike.models.attributes import FacialHair, HairStyle

_SHEEN = linear_gradient(
    "hair-sheen",
    [(0, "{{hairHighlight2}}", 0.45), (40, "{{hairHighlight1}}", 0.15), (100, "{{hair}}", 0)],
)


# Back pieces


def _nape() -> str:
    return '<path d="M34 95Q30 40 100 24Q170 40 166 95L160 112Q100 96 40 112Z" fill="{{hairShadow1}}"/>'


def _fall(length: float, spread: float = 0, strands: int = 0) -> str:
    """Hair hanging behind the head down to ``length``."""
    left, right = 30 - spread, 170 + spread
    parts = [
        f'<path d="M{left:g} 95Q{left - 6:g} 28 100 16Q{right + 6:g} 28 {right:g} 95'
        f'L{right + 2:g} {length:g}Q100 {length + 14:g} {left - 2:g} {length:g}Z" fill="{{{{hairShadow1}}}}"/>',
    ]
    for i in range(strands):
        x = left + 8 + i * (right - left - 16) / max(strands - 1, 1)
        parts.append(
            f'<path d="M{x:g} 110Q{x + 6:g} {(110 + length) / 2:g} {x:g} {length - 4:g}"'
            f' stroke="{{{{hairShadow2}}}}" stroke-width="2" fill="none" opacity=".5"/>'
        )
    return "".join(parts)


def _volume(radius: float, cy: float = 88) -> str:
    bumps = "".join(
        f'<circle cx="{100 + dx:g}" cy="{cy + dy:g}" r="{radius * 0.28:g}" fill="{{{{hairShadow2}}}}" opacity=".35"/>'
        for dx, dy in ((-radius * 0.7, -radius * 0.3), (radius * 0.7, -radius * 0.3), (-radius * 0.8, radius * 0.3), (radius * 0.8, radius * 0.3))
    )
    return f'<circle cx="100" cy="{cy:g}" r="{radius:g}" fill="{{{{hairShadow1}}}}"/>{bumps}'


def _ponytail() -> str:
    return _nape() + (
        '<path d="M150 62Q196 96 172 186Q166 150 146 104Z" fill="{{hair}}"/>'
        '<path d="M156 80Q180 116 170 170" stroke="{{hairShadow2}}" stroke-width="2" fill="none" opacity=".5"/>'
    )


def _bun() -> str:
    return _nape() + (
        '<circle cx="100" cy="20" r="22" fill="{{hair}}"/>'
        '<path d="M84 14Q100 4 116 14" stroke="{{hairHighlight1}}" stroke-width="2" fill="none" opacity=".6"/>'
        '<path d="M82 30Q100 38 118 30" stroke="{{hairShadow2}}" stroke-width="2" fill="none" opacity=".5"/>'
    )


def _braids() -> str:
    segments = "".join(
        f'<ellipse cx="{x:g}" cy="{y:g}" rx="7" ry="9" fill="{{{{hair}}}}" stroke="{{{{hairShadow2}}}}" stroke-width="1"/>'
        for x in (34, 166)
        for y in range(112, 200, 14)
    )
    return _nape() + segments


def _locs(count: int = 8, length: float = 190) -> str:
    strands = "".join(
        f'<rect x="{28 + i * 144 / (count - 1) - 5:g}" y="60" width="10" height="{length - 60:g}" rx="5"'
        f' fill="{{{{hair}}}}" stroke="{{{{hairShadow2}}}}" stroke-width="1"/>'
        for i in range(count)
    )
    return _nape() + strands


def _drape() -> str:
    return (
        '<path d="M22 100Q18 20 100 10Q182 20 178 100L190 200L10 200Z" fill="{{hairShadow1}}"/>'
        '<path d="M40 150Q100 178 160 150" stroke="{{hairShadow2}}" stroke-width="3" fill="none" opacity=".4"/>'
    )


# Front pieces


def _cap(top: float = 22, hairline: float = 50, opacity: float = 1.0, part: float | None = None) -> str:
    """Hair covering the crown down to ``hairline`` at the forehead."""
    parts = [
        f'<path d="M34 {hairline + 26:g}Q30 {top + 8:g} 100 {top:g}Q170 {top + 8:g} 166 {hairline + 26:g}'
        f'Q150 {hairline:g} 100 {hairline:g}Q50 {hairline:g} 34 {hairline + 26:g}Z" fill="{{{{hair}}}}" opacity="{opacity:g}"/>',
        f'<path d="M50 {hairline - 4:g}Q100 {top - 2:g} 150 {hairline - 4:g}" stroke="url(#hair-sheen)" stroke-width="10" fill="none"/>',
    ]
    if part is not None:
        parts.append(
            f'<path d="M{part:g} {top + 2:g}Q{part - 4:g} {(top + hairline) / 2:g} {part - 10:g} {hairline + 2:g}"'
            ' stroke="{{hairShadow2}}" stroke-width="2" fill="none"/>'
        )
    return "".join(parts)


def _strands(y1: float, y2: float, count: int = 6, bend: float = 6) -> str:
    return "".join(
        f'<path d="M{52 + i * 96 / max(count - 1, 1):g} {y1:g}Q{52 + i * 96 / max(count - 1, 1) + bend:g} {(y1 + y2) / 2:g}'
        f' {52 + i * 96 / max(count - 1, 1) + bend / 2:g} {y2:g}" stroke="{{{{hairShadow1}}}}" stroke-width="1.5" fill="none" opacity=".6"/>'
        for i in range(count)
    )


def _side_locks(bottom: float, width: float = 16) -> str:
    """Hair falling in front of the ears on both sides."""
    return mirrored(
        f'<path d="M34 70Q26 {(70 + bottom) / 2:g} {34 - width / 4:g} {bottom:g}L{34 + width:g} {bottom - 6:g}'
        f'Q{34 + width / 2:g} {(70 + bottom) / 2:g} {44 + width / 2:g} 64Z" fill="{{{{hair}}}}"/>'
    )


def _fringe(bottom: float, slant: float = 0) -> str:
    return (
        f'<path d="M40 60Q100 30 160 60L160 {bottom - slant:g}Q100 {bottom + 4:g} 40 {bottom + slant:g}Z" fill="{{{{hair}}}}"/>'
        f'<path d="M40 {bottom + slant:g}Q100 {bottom + 4:g} 160 {bottom - slant:g}" stroke="{{{{hairShadow2}}}}" stroke-width="1.5" fill="none"/>'
    )


def _curly_edge(y: float, r: float = 9) -> str:
    return "".join(
        f'<circle cx="{x:g}" cy="{y + (4 if i % 2 else 0):g}" r="{r:g}" fill="{{{{hair}}}}"/>'
        for i, x in enumerate(range(42, 162, 15))
    )


def _raised(height: float) -> str:
    """Volume lifted above the forehead (quiff, pompadour)."""
    return (
        f'<path d="M52 52Q60 {24 - height:g} 104 {20 - height:g}Q150 {22 - height:g} 152 50Q120 40 100 44Q70 40 52 52Z" fill="{{{{hair}}}}"/>'
        f'<path d="M66 44Q90 {22 - height:g} 134 {26 - height:g}" stroke="{{{{hairHighlight1}}}}" stroke-width="3" fill="none" opacity=".5"/>'
    )


def _spikes() -> str:
    return (
        '<path d="M36 70L44 34L56 50L66 18L78 42L92 10L104 40L118 12L128 42L142 20L146 50L158 36L164 70Q100 44 36 70Z" fill="{{hair}}"/>'
    )


def _rows(count: int = 6) -> str:
    return "".join(
        f'<path d="M{60 + i * 80 / (count - 1):g} 48Q{60 + i * 80 / (count - 1):g} 30 100 22"'
        ' stroke="{{hairShadow2}}" stroke-width="2" fill="none"/>'
        for i in range(count)
    )


def _wrap(top: float, knot: bool = False, tail: bool = False) -> str:
    """Fabric wrapped over the crown (turban, head wrap, durag)."""
    parts = [
        f'<path d="M30 82Q26 {top:g} 100 {top - 6:g}Q174 {top:g} 170 82Q150 56 100 56Q50 56 30 82Z" fill="{{{{hair}}}}"/>',
        '<path d="M40 70Q100 40 160 70" stroke="{{hairShadow2}}" stroke-width="2" fill="none" opacity=".6"/>',
        '<path d="M48 52Q100 26 152 52" stroke="{{hairHighlight1}}" stroke-width="2" fill="none" opacity=".5"/>',
    ]
    if knot:
        parts.append('<ellipse cx="100" cy="16" rx="16" ry="11" fill="{{hair}}" stroke="{{hairShadow2}}" stroke-width="1.5"/>')
    if tail:
        parts.append('<path d="M160 76Q176 110 168 150L160 148Q164 112 152 80Z" fill="{{hairShadow1}}"/>')
    return "".join(parts)


def _hijab_front() -> str:
    return (
        '<path d="M24 110Q20 18 100 14Q180 18 176 110L176 200L140 200Q166 150 160 100Q156 54 100 50Q44 54 40 100'
        'Q34 150 60 200L24 200Z" fill="{{hair}}"/>'
        '<path d="M44 96Q50 56 100 54Q150 56 156 96" stroke="{{hairShadow2}}" stroke-width="2" fill="none" opacity=".5"/>'
    )


def _hair(back: str, front: str) -> tuple[str, str]:
    return (svg_template(back), svg_template(defs(_SHEEN), front))


_STYLES: dict[HairStyle, tuple[str, str]] = {
    HairStyle.SHAVED: _hair(_nape(), _cap(26, 52, opacity=0.35)),
    HairStyle.BUZZ_CUT: _hair(_nape(), _cap(24, 50, opacity=0.7)),
    HairStyle.CREW: _hair(_nape(), _cap(20, 48) + _strands(30, 46, count=5, bend=2)),
    HairStyle.FADE: _hair(_nape(), _cap(22, 48, opacity=0.55) + _cap(18, 44)),
    HairStyle.UNDERCUT: _hair(_nape(), _cap(24, 52, opacity=0.4) + _raised(-2)),
    HairStyle.SPIKY: _hair(_nape(), _cap(24, 50) + _spikes()),
    HairStyle.TEXTURED: _hair(_nape(), _cap(20, 50) + _strands(28, 50, count=9, bend=5)),
    HairStyle.CAESAR: _hair(_nape(), _cap(22, 54) + _fringe(56)),
    HairStyle.SLICK_BACK: _hair(_nape(), _cap(18, 44) + _strands(46, 24, count=7, bend=-3)),
    HairStyle.SIDE_PART: _hair(_nape(), _cap(18, 48, part=72) + _raised(0)),
    HairStyle.QUIFF: _hair(_nape(), _cap(22, 48) + _raised(6)),
    HairStyle.POMPADOUR: _hair(_nape(), _cap(20, 46) + _raised(14)),
    HairStyle.MESSY_MEDIUM: _hair(_fall(130, strands=4), _cap(16, 56) + _fringe(66, slant=6) + _strands(40, 70, count=7, bend=8)),
    HairStyle.CURTAINS: _hair(_fall(125), _cap(16, 52, part=100) + _side_locks(96, width=22)),
    HairStyle.LONG_STRAIGHT: _hair(_fall(200, spread=4, strands=5), _cap(16, 50, part=100) + _side_locks(170)),
    HairStyle.LONG_WAVY: _hair(_fall(200, spread=10, strands=7), _cap(16, 50, part=96) + _side_locks(165, width=20)),
    HairStyle.LONG_CURLY: _hair(_volume(92, cy=110), _cap(14, 50) + _curly_edge(56) + _side_locks(160, width=22)),
    HairStyle.PONYTAIL: _hair(_ponytail(), _cap(18, 46) + _strands(46, 26, count=6, bend=-2)),
    HairStyle.BUN: _hair(_bun(), _cap(18, 46) + _strands(46, 26, count=6, bend=-2)),
    HairStyle.BRAIDS: _hair(_braids(), _cap(18, 48, part=100)),
    HairStyle.HALF_UP: _hair(_fall(170, strands=4), _cap(18, 48) + _side_locks(140)),
    HairStyle.AFRO: _hair(_volume(88, cy=78), _volume(70, cy=46).replace("hairShadow1", "hair")),
    HairStyle.AFRO_SMALL: _hair(_volume(70, cy=84), _cap(12, 50) + _curly_edge(48, r=8)),
    HairStyle.COILS: _hair(_volume(76, cy=84), _cap(14, 50) + _curly_edge(50, r=7) + _curly_edge(36, r=6)),
    HairStyle.LOCS: _hair(_locs(), _cap(18, 50) + _strands(50, 110, count=4, bend=2)),
    HairStyle.TWISTS: _hair(_locs(count=10, length=150), _cap(16, 50) + _strands(40, 80, count=8, bend=3)),
    HairStyle.CORNROWS: _hair(_nape(), _cap(22, 48, opacity=0.85) + _rows()),
    HairStyle.BOB_SHORT: _hair(_fall(140, spread=4), _cap(18, 52, part=80) + _side_locks(130, width=20)),
    HairStyle.BOB_LONG: _hair(_fall(165, spread=6), _cap(18, 52, part=80) + _side_locks(155, width=20)),
    HairStyle.BOB_LAYERED: _hair(_fall(150, spread=8, strands=4), _cap(18, 52, part=80) + _side_locks(140, width=24)),
    HairStyle.PIXIE: _hair(_nape(), _cap(18, 50) + _fringe(62, slant=10)),
    HairStyle.HIJAB: _hair(_drape(), _hijab_front()),
    HairStyle.TURBAN: _hair(_nape(), _wrap(4)),
    HairStyle.HEADWRAP: _hair(_nape(), _wrap(10, knot=True)),
    HairStyle.DURAG: _hair(_nape(), _wrap(22, tail=True)),
    HairStyle.STRAIGHT_BANGS: _hair(_fall(180, strands=4), _cap(16, 50) + _fringe(70) + _side_locks(150)),
    HairStyle.SIDE_BANGS: _hair(_fall(175, strands=4), _cap(16, 50) + _fringe(66, slant=12) + _side_locks(150)),
    HairStyle.CURLY_BANGS: _hair(_volume(88, cy=108), _cap(14, 52) + _curly_edge(64, r=10) + _side_locks(150, width=22)),
}

HAIR_BACK: dict[str, str] = {f"{style.value}_back": back for style, (back, _) in _STYLES.items()}
HAIR_FRONT: dict[str, str] = {f"{style.value}_front": front for style, (_, front) in _STYLES.items()}


_STUBBLE_AREA = "M48 130Q52 168 100 182Q148 168 152 130Q140 150 100 156Q60 150 48 130Z"
_MUSTACHE = "M78 136Q88 128 100 133Q112 128 122 136Q112 139 100 136Q88 139 78 136Z"
_GOATEE = "M86 154Q100 150 114 154Q112 172 100 176Q88 172 86 154Z"


def _beard(bottom: float, spread: float = 0) -> str:
    left, right = 46 - spread, 154 + spread
    return (
        f'<path d="M{left:g} 110Q{left:g} {bottom - 20:g} 100 {bottom:g}Q{right:g} {bottom - 20:g} {right:g} 110'
        f'Q146 150 120 150Q100 146 80 150Q54 150 {left:g} 110Z" fill="{{{{facialHair}}}}"/>'
        f'<path d="M70 {bottom - 24:g}Q100 {bottom - 6:g} 130 {bottom - 24:g}" stroke="{{{{facialHairShadow2}}}}"'
        ' stroke-width="2" fill="none" opacity=".5"/>'
        f'<path d="{_MUSTACHE}" fill="{{{{facialHair}}}}"/>'
    )


_FACIAL_HAIR: dict[FacialHair, list[str]] = {
    FacialHair.STUBBLE: [f'<path d="{_STUBBLE_AREA}" fill="{{{{facialHair}}}}" opacity=".25"/>'],
    FacialHair.GOATEE: [
        f'<path d="{_GOATEE}" fill="{{{{facialHair}}}}"/>',
        '<path d="M92 160Q100 164 108 160" stroke="{{facialHairShadow2}}" fill="none" opacity=".5"/>',
    ],
    FacialHair.VANDYKE: [
        f'<path d="{_MUSTACHE}" fill="{{{{facialHair}}}}"/>',
        '<path d="M90 156Q100 152 110 156Q108 178 100 184Q92 178 90 156Z" fill="{{facialHair}}"/>',
    ],
    FacialHair.SHORT_BEARD: [_beard(172)],
    FacialHair.MEDIUM_BEARD: [_beard(186, spread=2)],
    FacialHair.LONG_BEARD: [_beard(214, spread=4)],
    FacialHair.FULL_BEARD: [_beard(196, spread=6), f'<path d="{_STUBBLE_AREA}" fill="{{{{facialHairShadow1}}}}" opacity=".3"/>'],
    FacialHair.MUSTACHE: [
        f'<path d="{_MUSTACHE}" fill="{{{{facialHair}}}}"/>',
        '<path d="M84 134Q100 130 116 134" stroke="{{facialHairHighlight1}}" fill="none" opacity=".4"/>',
    ],
    FacialHair.HANDLEBAR: [
        f'<path d="{_MUSTACHE}" fill="{{{{facialHair}}}}"/>',
        mirrored('<path d="M80 136Q70 138 68 128Q72 134 78 133Z" fill="{{facialHair}}"/>'),
    ],
    FacialHair.SOUL_PATCH: ['<path d="M95 154L105 154L102 164L98 164Z" fill="{{facialHair}}"/>'],
    FacialHair.CHIN_STRAP: [
        '<path d="M40 100Q44 170 100 182Q156 170 160 100L154 100Q150 160 100 174Q50 160 46 100Z" fill="{{facialHair}}"/>',
    ],
}

FACIAL_HAIR: dict[str, str] = {style.value: svg_template(*elements) for style, elements in _FACIAL_HAIR.items()}
