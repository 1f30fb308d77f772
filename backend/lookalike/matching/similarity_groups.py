"""Groups of attribute values that read as "close enough" to an observer.

Used only when fuzzy matching is enabled: two different values that share a
group earn partial credit.
"""

from __future__ import annotations

from lookalike.models.attributes import (
    BodyShape,
    FacialHair,
    Glasses,
    HairColor,
    HairStyle,
    SkinTone,
)

PARTIAL_CREDIT = 0.7

_SKIN = [
    [SkinTone.FAIR1, SkinTone.FAIR2],
    [SkinTone.LIGHT1, SkinTone.LIGHT2],
    [SkinTone.MEDIUM1, SkinTone.MEDIUM2],
    [SkinTone.OLIVE1, SkinTone.OLIVE2],
    [SkinTone.BROWN1, SkinTone.BROWN2],
    [SkinTone.DARK1, SkinTone.DARK2],
]

_HAIR_COLOR = [
    [HairColor.BLACK, HairColor.DARK_BROWN],
    [HairColor.BROWN, HairColor.LIGHT_BROWN],
    [HairColor.AUBURN, HairColor.RED],
    [HairColor.BLONDE, HairColor.STRAWBERRY],
    [HairColor.PLATINUM, HairColor.WHITE],
    [HairColor.GRAY, HairColor.WHITE],
]

_HAIR_STYLE = [
    [HairStyle.BALD, HairStyle.SHAVED, HairStyle.BUZZ_CUT],
    [HairStyle.CREW, HairStyle.FADE, HairStyle.UNDERCUT],
    [HairStyle.SLICK_BACK, HairStyle.SIDE_PART, HairStyle.POMPADOUR],
    [HairStyle.LONG_STRAIGHT, HairStyle.LONG_WAVY],
    [HairStyle.AFRO, HairStyle.AFRO_SMALL, HairStyle.COILS],
    [HairStyle.PONYTAIL, HairStyle.BUN],
    [HairStyle.BOB_SHORT, HairStyle.BOB_LONG, HairStyle.BOB_LAYERED, HairStyle.PIXIE],
    [HairStyle.HIJAB, HairStyle.TURBAN, HairStyle.HEADWRAP],
]

_FACIAL_HAIR = [
    [FacialHair.NONE],
    [FacialHair.STUBBLE, FacialHair.SOUL_PATCH],
    [FacialHair.GOATEE, FacialHair.VANDYKE],
    [FacialHair.SHORT_BEARD, FacialHair.MEDIUM_BEARD, FacialHair.LONG_BEARD, FacialHair.FULL_BEARD],
    [FacialHair.MUSTACHE, FacialHair.HANDLEBAR],
]

_BODY_SHAPE = [
    [BodyShape.SLIM, BodyShape.AVERAGE],
    [BodyShape.AVERAGE, BodyShape.ATHLETIC],
    [BodyShape.ATHLETIC, BodyShape.MUSCULAR],
    [BodyShape.AVERAGE, BodyShape.PLUS],
]

_GLASSES = [
    [Glasses.NONE],
    [Glasses.READING, Glasses.ROUND, Glasses.SQUARE, Glasses.CAT],
    [Glasses.AVIATOR, Glasses.AVIATOR_SUN],
    [Glasses.SUNGLASSES, Glasses.AVIATOR_SUN, Glasses.SPORT],
]

# Field -> groups; a value may belong to several overlapping groups
SIMILARITY_GROUPS: dict[str, list[frozenset]] = {
    "skin_tone": [frozenset(g) for g in _SKIN],
    "hair_color": [frozenset(g) for g in _HAIR_COLOR],
    "facial_hair_color": [frozenset(g) for g in _HAIR_COLOR],
    "hair_style": [frozenset(g) for g in _HAIR_STYLE],
    "facial_hair": [frozenset(g) for g in _FACIAL_HAIR],
    "body_shape": [frozenset(g) for g in _BODY_SHAPE],
    "glasses": [frozenset(g) for g in _GLASSES],
}


def are_similar(field: str, a: object, b: object) -> bool:
    """True when two different values share a similarity group for ``field``."""
    if a == b:
        return False
    return any(a in group and b in group for group in SIMILARITY_GROUPS.get(field, ()))
