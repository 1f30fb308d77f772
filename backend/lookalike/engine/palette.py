"""Palette assembly: every color token one record's templates may reference.

A palette is built fresh for each render and never shared between records.
"""

from __future__ import annotations

from typing import Mapping

from lookalike.engine.colors import color_of
from lookalike.engine.shading import darken, lighten, saturate, shading_token_set
from lookalike.models.attributes import AttributeRecord
from lookalike.svg.markup import substitute_tokens

# Palette category -> record field supplying its base color
CATEGORY_FIELDS: dict[str, str] = {
    "skin": "skin_tone",
    "hair": "hair_color",
    "facialHair": "facial_hair_color",
    "eye": "eye_color",
    "top": "top_color",
    "bottom": "bottom_color",
}

LIP_BASE = "#B5655E"

FIXED_TOKENS: dict[str, str] = {
    "eyeWhite": "#FFFFFF",
    "eyePupil": "#000000",
    "teeth": "#FFFFFF",
    "tongue": "#E8A0A0",
    "lip": LIP_BASE,
    "lipShadow": darken(LIP_BASE, 18),
    "lipHighlight": lighten(LIP_BASE, 12),
    "glassesFrame": "#1A1A1A",
    "glassesLens": "rgba(0, 0, 0, 0.1)",
}


def _aliases(tokens: Mapping[str, str]) -> dict[str, str]:
    """Short names used throughout the asset library."""
    return {
        "skinShadow": tokens["skinShadow2"],
        "skinHighlight": tokens["skinHighlight1"],
        "hairShadow": tokens["hairShadow1"],
        "hairHighlight": tokens["hairHighlight1"],
        "eyeDark": saturate(darken(tokens["eye"], 35), 15),
        "eyebrow": darken(tokens["hair"], 10),
        "topShadow": tokens["topShadow2"],
        "topAccent": tokens["topHighlight1"],
        "topDeep": tokens["topShadow3"],
        "bottomShadow": tokens["bottomShadow2"],
        "bottomDeep": tokens["bottomShadow3"],
        # Headwear follows the top color
        "headwear": tokens["top"],
        "headwearShadow": tokens["topShadow2"],
    }


def build_palette(record: AttributeRecord) -> dict[str, str]:
    """Flat token -> color table for one record."""
    tokens: dict[str, str] = {}
    for category, field in CATEGORY_FIELDS.items():
        base = color_of(getattr(record, field))
        tokens.update(shading_token_set(base).as_tokens(category))
    tokens.update(FIXED_TOKENS)
    tokens.update(_aliases(tokens))
    return tokens


def colorize(template: str, palette: Mapping[str, str]) -> str:
    """Substitute palette colors into a template. Unknown tokens are kept verbatim."""
    return substitute_tokens(template, palette)
