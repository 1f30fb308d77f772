"""Head, ear, neck and facial feature templates.

Light falls from the upper left, so left-side shading is slightly heavier.
"""

from __future__ import annotations

from lookalike.assets.base import BODY_CANVAS, defs, linear_gradient, mirrored, radial_gradient, svg_template
from lookalike.models.attributes import EyebrowStyle, EyeShape, FaceShape, MouthExpression, NoseShape

# Face outlines, all spanning roughly y=20..180
_HEAD_OUTLINES: dict[FaceShape, str] = {
    FaceShape.OVAL: "M100 25C145 25 165 55 165 95C165 145 145 180 100 180C55 180 35 145 35 95C35 55 55 25 100 25Z",
    FaceShape.ROUND: "M100 25C142 25 175 58 175 100C175 145 142 175 100 175C58 175 25 145 25 100C25 58 58 25 100 25Z",
    FaceShape.SQUARE: "M40 35C40 25 50 20 100 20C150 20 160 25 160 35L165 130C165 155 145 175 100 175C55 175 35 155 35 130L40 35Z",
    FaceShape.HEART: "M100 22C150 22 168 50 165 88C162 125 135 160 100 182C65 160 38 125 35 88C32 50 50 22 100 22Z",
    FaceShape.OBLONG: "M100 15C140 15 158 40 158 80L158 130C158 160 135 185 100 185C65 185 42 160 42 130L42 80C42 40 60 15 100 15Z",
    FaceShape.DIAMOND: "M100 20C125 20 140 40 165 92C150 140 130 170 100 182C70 170 50 140 35 92C60 40 75 20 100 20Z",
}


def _head(shape: FaceShape, outline: str) -> str:
    gid = f"head-{shape.value}"
    return svg_template(
        defs(
            radial_gradient(
                f"{gid}-base",
                [(0, "{{skinHighlight1}}", 1), (50, "{{skin}}", 1), (85, "{{skinShadow1}}", 1), (100, "{{skinShadow2}}", 1)],
                cx="35%", cy="30%", r="70%",
            ),
            radial_gradient(
                f"{gid}-blush",
                [(0, "{{skinBlush}}", 0.35), (100, "{{skinBlush}}", 0)],
                cx="70%",
            ),
            linear_gradient(
                f"{gid}-jaw",
                [(0, "{{skinShadow1}}", 0), (50, "{{skinShadow2}}", 0.2), (100, "{{skinShadow3}}", 0.35)],
            ),
        ),
        f'<path d="{outline}" fill="url(#{gid}-base)"/>',
        '<ellipse cx="45" cy="80" rx="13" ry="28" fill="{{skinShadow2}}" opacity=".2"/>',
        '<ellipse cx="155" cy="80" rx="13" ry="28" fill="{{skinShadow1}}" opacity=".12"/>',
        '<ellipse cx="100" cy="52" rx="45" ry="26" fill="{{skinHighlight2}}" opacity=".18"/>',
        f'<ellipse cx="62" cy="112" rx="22" ry="16" fill="url(#{gid}-blush)"/>',
        f'<ellipse cx="138" cy="112" rx="22" ry="16" fill="url(#{gid}-blush)"/>',
        f'<path d="M52 132Q100 172 148 132L146 158Q100 190 54 158Z" fill="url(#{gid}-jaw)"/>',
        '<ellipse cx="100" cy="176" rx="28" ry="7" fill="{{skinAO}}" opacity=".2"/>',
        '<ellipse cx="100" cy="160" rx="15" ry="8" fill="{{skinHighlight2}}" opacity=".22"/>',
    )


HEADS: dict[str, str] = {shape.value: _head(shape, outline) for shape, outline in _HEAD_OUTLINES.items()}

EARS: dict[str, str] = {
    "default": svg_template(
        mirrored(
            '<path d="M36 88C24 84 20 100 26 112C30 120 36 122 40 118Z" fill="{{skin}}"/>'
            '<path d="M34 94C28 94 27 104 31 110" stroke="{{skinShadow2}}" stroke-width="2" fill="none" opacity=".5"/>'
            '<path d="M38 90L38 116" stroke="{{skinAO}}" stroke-width="2" opacity=".15"/>'
        ),
    ),
}

NECKS: dict[str, str] = {
    "default": svg_template(
        defs(linear_gradient("neck-shade", [(0, "{{skinShadow2}}", 1), (35, "{{skin}}", 1), (100, "{{skinShadow1}}", 1)], vertical=False)),
        '<path d="M78 160L78 205Q100 215 122 205L122 160Z" fill="url(#neck-shade)"/>',
        '<path d="M78 168Q100 186 122 168L122 176Q100 194 78 176Z" fill="{{skinAO}}" opacity=".3"/>',
        height=BODY_CANVAS,
    ),
}

# (sclera rx, sclera ry, iris r, outer-corner lift, lid cover)
_EYE_GEOMETRY: dict[EyeShape, tuple[float, float, float, float, float]] = {
    EyeShape.ALMOND: (18, 11, 8, 0, 0),
    EyeShape.ROUND: (14, 14, 9, 0, 0),
    EyeShape.MONOLID: (20, 8, 7, 0, 0.4),
    EyeShape.HOODED: (17, 9, 7, 0, 0.7),
    EyeShape.DOWNTURNED: (18, 10, 7, -5, 0),
    EyeShape.UPTURNED: (18, 10, 7, 5, 0),
    EyeShape.WIDE: (19, 12, 8, 0, 0),
    EyeShape.CLOSE: (16, 11, 8, 0, 0),
}

# Eye centre x for the left eye; the right eye mirrors it
_EYE_X: dict[EyeShape, float] = {EyeShape.WIDE: 50, EyeShape.CLOSE: 62}


def _eye(shape: EyeShape) -> str:
    rx, ry, iris, lift, lid = _EYE_GEOMETRY[shape]
    x = _EYE_X.get(shape, 55)
    gid = f"iris-{shape.value}"
    sclera = (
        f'<path d="M{-rx:g} 0Q0 {-ry * 2:g} {rx:g} {-lift:g}Q0 {ry * 2:g} {-rx:g} 0Z" fill="{{{{eyeWhite}}}}"/>'
        if lift else f'<ellipse rx="{rx:g}" ry="{ry:g}" fill="{{{{eyeWhite}}}}"/>'
    )
    cover = (
        f'<path d="M{-rx - 1:g} {-ry:g}Q0 {-ry * 2:g} {rx + 1:g} {-ry:g}L{rx + 1:g} {-ry + ry * lift * 2:g}'
        f'Q0 {-ry:g} {-rx - 1:g} {-ry + ry * lift * 2:g}Z" fill="{{{{skin}}}}" opacity=".75"/>'
        if lid else ""
    )
    markup = (
        f'<g transform="translate({x:g},90)">'
        f"{sclera}"
        f'<circle cx="2" r="{iris:g}" fill="url(#{gid})"/>'
        f'<circle cx="2" r="{iris:g}" fill="none" stroke="{{{{eyeDark}}}}" stroke-width=".8" opacity=".5"/>'
        f'<circle cx="2" r="{iris / 2:g}" fill="{{{{eyePupil}}}}"/>'
        '<ellipse cx="5" cy="-2" rx="2" ry="1.5" fill="#FFFFFF" opacity=".9"/>'
        f"{cover}"
        f'<path d="M{-rx - 1:g} -4Q0 {-ry - 4:g} {rx + 1:g} {-4 - lift:g}" fill="none" stroke="{{{{eyePupil}}}}" stroke-width="1.5" opacity=".18"/>'
        f'<path d="M{-rx + 3:g} {ry - 4:g}Q0 {ry:g} {rx - 3:g} {ry - 4:g}" fill="none" stroke="#E8B4B4" stroke-width="1.2" opacity=".4"/>'
        "</g>"
    )
    return svg_template(
        defs(radial_gradient(gid, [(0, "{{eye}}", 0.7), (60, "{{eye}}", 1), (100, "{{eyeDark}}", 1)], cx="40%", cy="40%")),
        mirrored(markup),
    )


EYES: dict[str, str] = {shape.value: _eye(shape) for shape in EyeShape}

# Left brow path and stroke width; the right brow mirrors it
_BROWS: dict[EyebrowStyle, tuple[str, float]] = {
    EyebrowStyle.NATURAL: ("M38 72Q55 64 76 70", 4),
    EyebrowStyle.THICK: ("M37 73Q55 62 77 70", 7),
    EyebrowStyle.THIN: ("M39 71Q56 65 75 69", 2),
    EyebrowStyle.ARCHED: ("M38 74Q52 58 76 70", 4),
    EyebrowStyle.STRAIGHT: ("M38 70L76 70", 4),
    EyebrowStyle.ROUNDED: ("M38 74Q57 60 76 74", 4),
    EyebrowStyle.ANGLED_UP: ("M38 74L76 64", 4),
    EyebrowStyle.ANGLED_DOWN: ("M38 66L76 73", 4),
}


def _brow(path: str, width: float) -> str:
    return (
        f'<path d="{path}" stroke="{{{{eyebrow}}}}" stroke-width="{width:g}" stroke-linecap="round" fill="none"/>'
        f'<path d="{path}" stroke="{{{{hairHighlight}}}}" stroke-width="{max(width / 4, 0.5):g}" fill="none" opacity=".3"/>'
    )


EYEBROWS: dict[str, str] = {style.value: svg_template(mirrored(_brow(*geometry))) for style, geometry in _BROWS.items()}
EYEBROWS[EyebrowStyle.UNIBROW.value] = svg_template(
    '<path d="M38 71Q70 62 100 70Q130 62 162 71" stroke="{{eyebrow}}" stroke-width="5" stroke-linecap="round" fill="none"/>',
)

# Bridge/tip outline and nostril half-width
_NOSES: dict[NoseShape, tuple[str, float]] = {
    NoseShape.STRAIGHT: ("M98 92L95 122Q100 127 106 122", 8),
    NoseShape.ROMAN: ("M98 90Q92 106 94 122Q100 128 106 122", 9),
    NoseShape.BUTTON: ("M99 100L97 118Q100 122 104 118", 6),
    NoseShape.SNUB: ("M99 96L96 116Q101 118 106 114", 7),
    NoseShape.WIDE: ("M98 94L94 122Q100 128 107 122", 12),
    NoseShape.NARROW: ("M99 92L97 124Q100 127 104 124", 5),
    NoseShape.HOOKED: ("M98 90Q90 108 96 126Q100 126 105 121", 8),
    NoseShape.FLAT: ("M99 104L96 122Q100 124 105 122", 13),
}


def _nose(path: str, spread: float) -> str:
    return svg_template(
        f'<path d="{path}" stroke="{{{{skinShadow2}}}}" stroke-width="2" fill="none" stroke-linecap="round" opacity=".6"/>',
        '<ellipse cx="101" cy="112" rx="3" ry="8" fill="{{skinHighlight2}}" opacity=".25"/>',
        f'<ellipse cx="{100 - spread:g}" cy="122" rx="3.5" ry="2.5" fill="{{{{skinShadow3}}}}" opacity=".5"/>',
        f'<ellipse cx="{100 + spread:g}" cy="122" rx="3.5" ry="2.5" fill="{{{{skinShadow3}}}}" opacity=".5"/>',
        '<ellipse cx="100" cy="128" rx="10" ry="2.5" fill="{{skinAO}}" opacity=".12"/>',
    )


NOSES: dict[str, str] = {shape.value: _nose(*geometry) for shape, geometry in _NOSES.items()}

_LIPS_CLOSED = "M80 142Q90 138 100 140Q110 138 120 142Q110 150 100 150Q90 150 80 142Z"

_MOUTHS: dict[MouthExpression, list[str]] = {
    MouthExpression.NEUTRAL: [
        f'<path d="{_LIPS_CLOSED}" fill="{{{{lip}}}}"/>',
        '<path d="M80 142Q100 145 120 142" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
    ],
    MouthExpression.SMILE: [
        '<path d="M76 138Q100 160 124 138Q112 146 100 146Q88 146 76 138Z" fill="{{lip}}"/>',
        '<path d="M76 138Q100 152 124 138" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
        '<path d="M74 136Q72 140 76 141" stroke="{{skinShadow2}}" fill="none" opacity=".5"/>',
        '<path d="M126 136Q128 140 124 141" stroke="{{skinShadow2}}" fill="none" opacity=".5"/>',
    ],
    MouthExpression.SMILE_OPEN: [
        '<path d="M76 136Q100 168 124 136Z" fill="{{lipShadow}}"/>',
        '<path d="M80 138Q100 146 120 138L118 142Q100 148 82 142Z" fill="{{teeth}}"/>',
        '<ellipse cx="100" cy="156" rx="10" ry="4" fill="{{tongue}}"/>',
        '<path d="M76 136Q100 168 124 136" stroke="{{lip}}" stroke-width="3" fill="none"/>',
    ],
    MouthExpression.SMIRK: [
        '<path d="M80 144Q96 146 112 142Q118 138 124 136Q118 148 100 149Q88 149 80 144Z" fill="{{lip}}"/>',
        '<path d="M80 144Q104 145 124 136" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
    ],
    MouthExpression.SERIOUS: [
        '<path d="M82 143L118 143Q110 148 100 148Q90 148 82 143Z" fill="{{lip}}"/>',
        '<path d="M82 143L118 143" stroke="{{lipShadow}}" stroke-width="2" fill="none"/>',
    ],
    MouthExpression.SLIGHT: [
        f'<path d="{_LIPS_CLOSED}" fill="{{{{lip}}}}"/>',
        '<path d="M80 141Q100 148 120 141" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
    ],
    MouthExpression.PURSED: [
        '<ellipse cx="100" cy="144" rx="10" ry="7" fill="{{lip}}"/>',
        '<path d="M94 144Q100 142 106 144" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
    ],
    MouthExpression.OPEN_MOUTH: [
        '<ellipse cx="100" cy="146" rx="14" ry="10" fill="{{lipShadow}}"/>',
        '<ellipse cx="100" cy="151" rx="8" ry="4" fill="{{tongue}}"/>',
        '<ellipse cx="100" cy="146" rx="14" ry="10" fill="none" stroke="{{lip}}" stroke-width="3"/>',
    ],
    MouthExpression.FROWN: [
        '<path d="M80 148Q100 136 120 148Q110 150 100 150Q90 150 80 148Z" fill="{{lip}}"/>',
        '<path d="M80 148Q100 140 120 148" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
    ],
    MouthExpression.THINKING: [
        '<path d="M84 145Q100 140 116 143Q108 149 98 149Q90 149 84 145Z" fill="{{lip}}"/>',
        '<path d="M84 145Q100 143 116 143" stroke="{{lipShadow}}" stroke-width="1.5" fill="none"/>',
    ],
}

MOUTHS: dict[str, str] = {
    expression.value: svg_template(
        *elements,
        '<path d="M88 139Q100 136 112 139" stroke="{{lipHighlight}}" stroke-width="1" fill="none" opacity=".4"/>',
    )
    for expression, elements in _MOUTHS.items()
}
