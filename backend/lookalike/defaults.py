"""Default and randomly generated attribute records."""

from __future__ import annotations

import enum
from typing import Any, Mapping, TypeVar

import numpy as np

from lookalike.models.attributes import (
    AttributeRecord,
    BodyShape,
    BottomType,
    ClothingColor,
    EyebrowStyle,
    EyeColor,
    EyeShape,
    FaceShape,
    FacialHair,
    Glasses,
    HairColor,
    HairStyle,
    Headwear,
    HeightCategory,
    MouthExpression,
    NoseShape,
    SkinTone,
    TopType,
)

E = TypeVar("E", bound=enum.Enum)

DEFAULT_RECORD = AttributeRecord(
    skin_tone=SkinTone.MEDIUM1,
    hair_color=HairColor.BROWN,
    hair_style=HairStyle.SIDE_PART,
    facial_hair=FacialHair.NONE,
    facial_hair_color=HairColor.BROWN,
    face_shape=FaceShape.OVAL,
    eye_shape=EyeShape.ALMOND,
    eye_color=EyeColor.BROWN,
    eyebrow_style=EyebrowStyle.NATURAL,
    nose_shape=NoseShape.STRAIGHT,
    mouth_expression=MouthExpression.NEUTRAL,
    body_shape=BodyShape.AVERAGE,
    height_category=HeightCategory.AVERAGE,
    top_type=TopType.TSHIRT,
    top_color=ClothingColor.BLUE,
    bottom_type=BottomType.JEANS,
    bottom_color=ClothingColor.NAVY,
    glasses=Glasses.NONE,
    headwear=Headwear.NONE,
)

# Chance that a random record wears each optional feature
FACIAL_HAIR_CHANCE = 0.5
GLASSES_CHANCE = 0.2
HEADWEAR_CHANCE = 0.15

# Accept both snake_case names and camelCase aliases
_FIELD_BY_KEY: dict[str, str] = {}
for _name, _info in AttributeRecord.model_fields.items():
    _FIELD_BY_KEY[_name] = _name
    if _info.alias:
        _FIELD_BY_KEY[_info.alias] = _name


def normalize_record(partial: Mapping[str, Any] | AttributeRecord | None) -> AttributeRecord:
    """Complete a partial description with default values.

    Raises pydantic ``ValidationError`` for values outside their enumeration.
    """
    if partial is None:
        return DEFAULT_RECORD
    if isinstance(partial, AttributeRecord):
        return partial
    merged: dict[str, Any] = DEFAULT_RECORD.model_dump()
    for key, value in partial.items():
        if key in _FIELD_BY_KEY and value is not None:
            merged[_FIELD_BY_KEY[key]] = value
    return AttributeRecord.model_validate(merged)


def _pick(rng: np.random.Generator, enum_cls: type[E], exclude: E | None = None) -> E:
    members = [m for m in enum_cls if m is not exclude]
    return members[int(rng.integers(len(members)))]


def random_record(rng: np.random.Generator | None = None) -> AttributeRecord:
    """A plausible random record. Pass a seeded generator for repeatable output."""
    rng = rng if rng is not None else np.random.default_rng()

    hair_color = _pick(rng, HairColor)
    has_facial_hair = rng.random() < FACIAL_HAIR_CHANCE
    facial_hair = _pick(rng, FacialHair, exclude=FacialHair.NONE) if has_facial_hair else FacialHair.NONE
    glasses = _pick(rng, Glasses, exclude=Glasses.NONE) if rng.random() < GLASSES_CHANCE else Glasses.NONE
    headwear = _pick(rng, Headwear, exclude=Headwear.NONE) if rng.random() < HEADWEAR_CHANCE else Headwear.NONE

    return AttributeRecord(
        skin_tone=_pick(rng, SkinTone),
        hair_color=hair_color,
        hair_style=_pick(rng, HairStyle),
        facial_hair=facial_hair,
        # Facial hair follows the head hair when there is any
        facial_hair_color=hair_color if has_facial_hair else DEFAULT_RECORD.facial_hair_color,
        face_shape=_pick(rng, FaceShape),
        eye_shape=_pick(rng, EyeShape),
        eye_color=_pick(rng, EyeColor),
        eyebrow_style=_pick(rng, EyebrowStyle),
        nose_shape=_pick(rng, NoseShape),
        mouth_expression=_pick(rng, MouthExpression),
        body_shape=_pick(rng, BodyShape),
        height_category=_pick(rng, HeightCategory),
        top_type=_pick(rng, TopType),
        top_color=_pick(rng, ClothingColor),
        bottom_type=_pick(rng, BottomType),
        bottom_color=_pick(rng, ClothingColor),
        glasses=glasses,
        headwear=headwear,
    )


def random_record_with(constraints: Mapping[str, Any], rng: np.random.Generator | None = None) -> AttributeRecord:
    """A random record with some fields pinned."""
    base = random_record(rng).model_dump()
    for key, value in constraints.items():
        if key not in _FIELD_BY_KEY:
            raise KeyError(f"Unknown attribute: {key}")
        base[_FIELD_BY_KEY[key]] = value
    return AttributeRecord.model_validate(base)
