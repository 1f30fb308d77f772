"""Color derivation: shading variants from one base color.

All adjustments happen in HSL with hue in degrees and saturation/lightness
in percent. Lightness and saturation clamp to [0, 100]; hue wraps.
"""

from __future__ import annotations

import colorsys
import enum
import re
from dataclasses import dataclass, fields

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Hsl:
    h: float  # 0-360
    s: float  # 0-100
    l: float  # 0-100


class ShadeLevel(str, enum.Enum):
    SHADOW1 = "shadow1"
    SHADOW2 = "shadow2"
    SHADOW3 = "shadow3"
    HIGHLIGHT1 = "highlight1"
    HIGHLIGHT2 = "highlight2"
    BLUSH = "blush"
    AMBIENT_OCCLUSION = "ambient_occlusion"


@dataclass(frozen=True)
class _Delta:
    lightness: float = 0.0
    saturation: float = 0.0
    warm_hue: float = 0.0  # degrees moved toward red


# Magnitudes grow with level; shadows and highlights touch lightness only.
_LEVEL_DELTAS: dict[ShadeLevel, _Delta] = {
    ShadeLevel.SHADOW1: _Delta(lightness=-8),
    ShadeLevel.SHADOW2: _Delta(lightness=-18),
    ShadeLevel.SHADOW3: _Delta(lightness=-30),
    ShadeLevel.HIGHLIGHT1: _Delta(lightness=12),
    ShadeLevel.HIGHLIGHT2: _Delta(lightness=25),
    ShadeLevel.BLUSH: _Delta(lightness=4, saturation=15, warm_hue=6),
    ShadeLevel.AMBIENT_OCCLUSION: _Delta(lightness=-40, saturation=-20),
}


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse '#RRGGBB' or '#RGB' into 0-255 channels."""
    m = _HEX_RE.match(color.strip())
    if not m:
        raise ValueError(f"Not a hex color: {color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = [max(0, min(255, round(v))) for v in (r, g, b)]
    return "#" + "".join(f"{c:02X}" for c in channels)


def rgb_to_hsl(rgb: tuple[int, int, int]) -> Hsl:
    h, l, s = colorsys.rgb_to_hls(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
    return Hsl(h=h * 360.0, s=s * 100.0, l=l * 100.0)


def hsl_to_rgb(hsl: Hsl) -> tuple[float, float, float]:
    r, g, b = colorsys.hls_to_rgb((hsl.h % 360.0) / 360.0, hsl.l / 100.0, hsl.s / 100.0)
    return (r * 255.0, g * 255.0, b * 255.0)


def hex_to_hsl(color: str) -> Hsl:
    return rgb_to_hsl(hex_to_rgb(color))


def hsl_to_hex(hsl: Hsl) -> str:
    return rgb_to_hex(*hsl_to_rgb(hsl))


def relative_lightness(color: str) -> float:
    """HSL lightness of a hex color, 0-100."""
    return hex_to_hsl(color).l


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def adjust(color: str, *, lightness: float = 0.0, saturation: float = 0.0, hue: float = 0.0) -> str:
    """Shift a color in HSL space. A zero adjustment returns ``color`` untouched."""
    if lightness == 0 and saturation == 0 and hue == 0:
        return color
    hsl = hex_to_hsl(color)
    return hsl_to_hex(Hsl(
        h=(hsl.h + hue) % 360.0,
        s=_clamp(hsl.s + saturation),
        l=_clamp(hsl.l + lightness),
    ))


def darken(color: str, amount: float) -> str:
    return adjust(color, lightness=-amount)


def lighten(color: str, amount: float) -> str:
    return adjust(color, lightness=amount)


def saturate(color: str, amount: float) -> str:
    """Positive amounts add saturation, negative amounts remove it."""
    return adjust(color, saturation=amount)


def shift_hue(color: str, degrees: float) -> str:
    return adjust(color, hue=degrees)


def blend(color_a: str, color_b: str, ratio: float) -> str:
    """Linear RGB mix; ratio 0 is ``color_a``, 1 is ``color_b``."""
    ratio = _clamp(ratio, 0.0, 1.0)
    a = hex_to_rgb(color_a)
    b = hex_to_rgb(color_b)
    return rgb_to_hex(*(ca * (1 - ratio) + cb * ratio for ca, cb in zip(a, b)))


def _warm_nudge(hue: float, degrees: float) -> float:
    """Hue offset that moves ``hue`` up to ``degrees`` toward red (0/360)."""
    if degrees == 0 or hue == 0:
        return 0.0
    if hue <= 180.0:
        return -min(degrees, hue)
    return min(degrees, 360.0 - hue)


def derive(base: str, level: ShadeLevel) -> str:
    """One shading variant of ``base``."""
    delta = _LEVEL_DELTAS[level]
    hue = _warm_nudge(hex_to_hsl(base).h, delta.warm_hue) if delta.warm_hue else 0.0
    return adjust(base, lightness=delta.lightness, saturation=delta.saturation, hue=hue)


@dataclass(frozen=True)
class ShadingTokenSet:
    """The eight shades of one base color."""

    base: str
    shadow1: str
    shadow2: str
    shadow3: str
    highlight1: str
    highlight2: str
    blush: str
    ambient_occlusion: str

    def as_tokens(self, prefix: str) -> dict[str, str]:
        """Flatten into palette tokens: 'skin', 'skinShadow1', ..., 'skinAO'."""
        tokens: dict[str, str] = {}
        for f in fields(self):
            if f.name == "base":
                name = prefix
            elif f.name == "ambient_occlusion":
                name = f"{prefix}AO"
            else:
                name = prefix + f.name[0].upper() + f.name[1:]
            tokens[name] = getattr(self, f.name)
        return tokens


def shading_token_set(base: str) -> ShadingTokenSet:
    return ShadingTokenSet(
        base=base,
        **{level.value: derive(base, level) for level in ShadeLevel},
    )
