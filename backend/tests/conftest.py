"""Shared test fixtures."""

from __future__ import annotations

import pytest

from lookalike.defaults import DEFAULT_RECORD
from lookalike.engine.registry import Layer, PartRegistry
from lookalike.models.attributes import (
    AttributeRecord,
    BottomType,
    ClothingColor,
    HairStyle,
    HeightCategory,
    TopType,
)


# Sample records

SAMPLE_RECORD = AttributeRecord(
    skin_tone="olive1",
    hair_color="black",
    hair_style="long_wavy",
    facial_hair="none",
    facial_hair_color="black",
    face_shape="heart",
    eye_shape="almond",
    eye_color="green",
    eyebrow_style="arched",
    nose_shape="button",
    mouth_expression="smile",
    body_shape="slim",
    height_category="short",
    top_type="blouse",
    top_color="coral",
    bottom_type="skirt",
    bottom_color="black",
    glasses="round",
    headwear="none",
)

BALD_RECORD = SAMPLE_RECORD.model_copy(update={"hair_style": HairStyle.BALD})

# Same person, different outfit and height: cosmetic fields only
RESTYLED_RECORD = SAMPLE_RECORD.model_copy(update={
    "top_type": TopType.HOODIE,
    "top_color": ClothingColor.GRAY,
    "bottom_type": BottomType.JEANS,
    "bottom_color": ClothingColor.NAVY,
    "height_category": HeightCategory.TALL,
})

# Stored records use camelCase keys
SAMPLE_RECORD_JSON = {
    "skinTone": "olive1",
    "hairColor": "black",
    "hairStyle": "long_wavy",
    "facialHair": "none",
    "facialHairColor": "black",
    "faceShape": "heart",
    "eyeShape": "almond",
    "eyeColor": "green",
    "eyebrowStyle": "arched",
    "noseShape": "button",
    "mouthExpression": "smile",
    "bodyShape": "slim",
    "heightCategory": "short",
    "topType": "blouse",
    "topColor": "coral",
    "bottomType": "skirt",
    "bottomColor": "black",
    "glasses": "round",
    "headwear": "none",
}


# Minimal part templates

HEAD_SVG = '<svg viewBox="0 0 200 200"><circle cx="100" cy="100" r="70" fill="{{skin}}"/></svg>'
EYES_SVG = '<svg viewBox="0 0 200 200"><circle cx="70" cy="90" r="6" fill="{{eye}}"/></svg>'
HAIR_BACK_SVG = '<svg viewBox="0 0 200 200"><rect x="30" y="20" width="140" height="160" fill="{{hairShadow1}}"/></svg>'
HAIR_FRONT_SVG = '<svg viewBox="0 0 200 200"><path d="M30 60Q100 0 170 60Z" fill="{{hair}}"/></svg>'
UNKNOWN_TOKEN_SVG = '<svg viewBox="0 0 200 200"><rect width="10" height="10" fill="{{sparkle}}"/></svg>'
EMPTY_SVG = '<svg viewBox="0 0 200 200">   </svg>'


def make_registry(**extra: dict[str, str]) -> PartRegistry:
    """A small unfrozen registry covering SAMPLE_RECORD's head, eyes and hair."""
    registry = PartRegistry()
    registry.register(Layer.HEAD, "heart", HEAD_SVG)
    registry.register(Layer.EYES, "almond", EYES_SVG)
    registry.register(Layer.HAIR_BACK, "long_wavy_back", HAIR_BACK_SVG)
    registry.register(Layer.HAIR_FRONT, "long_wavy_front", HAIR_FRONT_SVG)
    for layer, templates in extra.items():
        registry.register_many(layer, templates)
    return registry


@pytest.fixture
def sample_record() -> AttributeRecord:
    return SAMPLE_RECORD


@pytest.fixture
def bald_record() -> AttributeRecord:
    return BALD_RECORD


@pytest.fixture
def default_record() -> AttributeRecord:
    return DEFAULT_RECORD


@pytest.fixture
def small_registry() -> PartRegistry:
    return make_registry()
