"""Color registry: canonical base color for every color-bearing enum key.

Tables are read-only mappings built at import time and never mutated.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping

from lookalike.models.attributes import (
    FIELD_ENUMS,
    ClothingColor,
    EyeColor,
    HairColor,
    SkinTone,
    attribute_label,
    is_color_field,
)

# Fitzpatrick scale, extended to twelve steps
SKIN_TONES: Mapping[SkinTone, str] = MappingProxyType({
    SkinTone.FAIR1: "#FFDFC4",
    SkinTone.FAIR2: "#F0D5BE",
    SkinTone.LIGHT1: "#EECEB3",
    SkinTone.LIGHT2: "#E1B899",
    SkinTone.MEDIUM1: "#D19F7E",
    SkinTone.MEDIUM2: "#BB8A68",
    SkinTone.OLIVE1: "#A67C5B",
    SkinTone.OLIVE2: "#8D6748",
    SkinTone.BROWN1: "#755139",
    SkinTone.BROWN2: "#5C3D2E",
    SkinTone.DARK1: "#3B261C",
    SkinTone.DARK2: "#2D1F15",
})

HAIR_COLORS: Mapping[HairColor, str] = MappingProxyType({
    HairColor.BLACK: "#090806",
    HairColor.DARK_BROWN: "#3B2219",
    HairColor.BROWN: "#6A4E42",
    HairColor.LIGHT_BROWN: "#A67B5B",
    HairColor.AUBURN: "#922724",
    HairColor.RED: "#B55239",
    HairColor.STRAWBERRY: "#D6927B",
    HairColor.BLONDE: "#E6BE8A",
    HairColor.PLATINUM: "#E8E4E1",
    HairColor.GRAY: "#9B9B9B",
    HairColor.WHITE: "#F0F0F0",
    HairColor.BLUE: "#4A90D9",
    HairColor.PURPLE: "#8B5CF6",
    HairColor.PINK: "#EC4899",
    HairColor.GREEN: "#10B981",
})

# Heterochromia renders as a single mid hazel-green iris
EYE_COLORS: Mapping[EyeColor, str] = MappingProxyType({
    EyeColor.BROWN: "#634E34",
    EyeColor.HAZEL: "#8B7355",
    EyeColor.AMBER: "#B5651D",
    EyeColor.GREEN: "#3D5B3D",
    EyeColor.BLUE: "#6699CC",
    EyeColor.GRAY: "#A5A5A5",
    EyeColor.LIGHT_BLUE: "#ADD8E6",
    EyeColor.DARK_BROWN: "#3D2314",
    EyeColor.VIOLET: "#8B008B",
    EyeColor.HETEROCHROMIA: "#6E7B52",
})

CLOTHING_COLORS: Mapping[ClothingColor, str] = MappingProxyType({
    ClothingColor.BLACK: "#1A1A1A",
    ClothingColor.WHITE: "#FFFFFF",
    ClothingColor.GRAY: "#6B7280",
    ClothingColor.NAVY: "#1E3A5F",
    ClothingColor.BLUE: "#3B82F6",
    ClothingColor.LIGHT_BLUE: "#93C5FD",
    ClothingColor.RED: "#DC2626",
    ClothingColor.BURGUNDY: "#7F1D1D",
    ClothingColor.PINK: "#EC4899",
    ClothingColor.PURPLE: "#8B5CF6",
    ClothingColor.GREEN: "#10B981",
    ClothingColor.OLIVE: "#6B8E23",
    ClothingColor.BROWN: "#92400E",
    ClothingColor.TAN: "#D4A574",
    ClothingColor.BEIGE: "#F5F5DC",
    ClothingColor.ORANGE: "#F97316",
    ClothingColor.YELLOW: "#EAB308",
    ClothingColor.TEAL: "#14B8A6",
    ClothingColor.CORAL: "#FF7F7F",
    ClothingColor.CREAM: "#FFFDD0",
})

_TABLE_BY_ENUM: dict[type[enum.Enum], Mapping] = {
    SkinTone: SKIN_TONES,
    HairColor: HAIR_COLORS,
    EyeColor: EYE_COLORS,
    ClothingColor: CLOTHING_COLORS,
}

# Every enum member must have a color; a gap here is a programming error.
for _enum_cls, _table in _TABLE_BY_ENUM.items():
    _missing = set(_enum_cls) - set(_table)
    if _missing:
        raise RuntimeError(f"{_enum_cls.__name__} members without a color: {sorted(m.value for m in _missing)}")


def color_of(key: enum.Enum) -> str:
    """Base hex color for a color-bearing enum member. Total over each enum."""
    return _TABLE_BY_ENUM[type(key)][key]


def attribute_options(field: str) -> list[dict[str, str]]:
    """Value/label (and color, for color fields) for every option of a field."""
    enum_cls = FIELD_ENUMS[field]
    options: list[dict[str, str]] = []
    for member in enum_cls:
        option = {"value": member.value, "label": attribute_label(field, member.value)}
        if is_color_field(field):
            option["color"] = color_of(member)
        options.append(option)
    return options
