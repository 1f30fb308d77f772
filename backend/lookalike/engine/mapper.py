"""Attribute-to-part mapping: which part id each layer draws for a record.

A layer mapped to None is suppressed (e.g. hair for a bald record). Layers
that do not exist in a view are absent from the mapping altogether.
"""

from __future__ import annotations

import enum

from lookalike.engine.registry import Layer
from lookalike.models.attributes import AttributeRecord, FacialHair, Glasses, HairStyle, Headwear


class View(str, enum.Enum):
    PORTRAIT = "portrait"
    FULL_BODY = "full_body"


# Back to front; later layers paint over earlier ones
LAYER_ORDER: dict[View, tuple[Layer, ...]] = {
    View.PORTRAIT: (
        Layer.HAIR_BACK,
        Layer.HEAD,
        Layer.EARS,
        Layer.EYES,
        Layer.NOSE,
        Layer.MOUTH,
        Layer.EYEBROWS,
        Layer.FACIAL_HAIR,
        Layer.HAIR_FRONT,
        Layer.GLASSES,
        Layer.HEADWEAR,
    ),
    View.FULL_BODY: (
        Layer.HAIR_BACK,
        Layer.BODY,
        Layer.BOTTOM,
        Layer.TOP,
        Layer.NECK,
        Layer.HEAD,
        Layer.EARS,
        Layer.EYES,
        Layer.NOSE,
        Layer.MOUTH,
        Layer.EYEBROWS,
        Layer.FACIAL_HAIR,
        Layer.HAIR_FRONT,
        Layer.GLASSES,
        Layer.HEADWEAR,
    ),
}

# Layers that only exist when the body is drawn
BODY_LAYERS: frozenset[Layer] = frozenset({Layer.BODY, Layer.TOP, Layer.BOTTOM, Layer.NECK})

# The enum member meaning "draw nothing" for each optional feature
SUPPRESSION_SENTINELS: dict[type[enum.Enum], enum.Enum] = {
    HairStyle: HairStyle.BALD,
    FacialHair: FacialHair.NONE,
    Glasses: Glasses.NONE,
    Headwear: Headwear.NONE,
}

DEFAULT_PART_ID = "default"

if set(LAYER_ORDER[View.FULL_BODY]) != set(Layer) or len(LAYER_ORDER[View.FULL_BODY]) != len(Layer):
    raise RuntimeError("Full body layer order must list every layer exactly once")
if set(LAYER_ORDER[View.PORTRAIT]) != set(Layer) - BODY_LAYERS:
    raise RuntimeError("Portrait layer order must list every non-body layer")
if set(View) != set(LAYER_ORDER):
    raise RuntimeError("Every view needs a layer order")


def _optional(value: enum.Enum) -> str | None:
    """The value's key, or None when it is its enum's suppression sentinel."""
    if SUPPRESSION_SENTINELS[type(value)] is value:
        return None
    return value.value


def map_parts(record: AttributeRecord, view: View) -> dict[Layer, str | None]:
    """Part id per layer for one record in one view."""
    view = View(view)
    hair = _optional(record.hair_style)
    mapping: dict[Layer, str | None] = {
        Layer.HAIR_BACK: f"{hair}_back" if hair else None,
        Layer.HEAD: record.face_shape.value,
        Layer.EARS: DEFAULT_PART_ID,
        Layer.EYES: record.eye_shape.value,
        Layer.NOSE: record.nose_shape.value,
        Layer.MOUTH: record.mouth_expression.value,
        Layer.EYEBROWS: record.eyebrow_style.value,
        Layer.FACIAL_HAIR: _optional(record.facial_hair),
        Layer.HAIR_FRONT: f"{hair}_front" if hair else None,
        Layer.GLASSES: _optional(record.glasses),
        Layer.HEADWEAR: _optional(record.headwear),
    }
    if view is View.FULL_BODY:
        mapping[Layer.BODY] = record.body_shape.value
        mapping[Layer.TOP] = record.top_type.value
        mapping[Layer.BOTTOM] = record.bottom_type.value
        mapping[Layer.NECK] = DEFAULT_PART_ID
    return mapping
