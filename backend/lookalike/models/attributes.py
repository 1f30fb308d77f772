"""The attribute record, an enumerated description of one person's appearance.

Every field holds a member of a closed ``str`` enum, so an unknown key is
rejected by pydantic at the model boundary rather than defaulted downstream.
"""

from __future__ import annotations

import enum
import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SkinTone(str, enum.Enum):
    FAIR1 = "fair1"
    FAIR2 = "fair2"
    LIGHT1 = "light1"
    LIGHT2 = "light2"
    MEDIUM1 = "medium1"
    MEDIUM2 = "medium2"
    OLIVE1 = "olive1"
    OLIVE2 = "olive2"
    BROWN1 = "brown1"
    BROWN2 = "brown2"
    DARK1 = "dark1"
    DARK2 = "dark2"


class HairColor(str, enum.Enum):
    BLACK = "black"
    DARK_BROWN = "dark_brown"
    BROWN = "brown"
    LIGHT_BROWN = "light_brown"
    AUBURN = "auburn"
    RED = "red"
    STRAWBERRY = "strawberry"
    BLONDE = "blonde"
    PLATINUM = "platinum"
    GRAY = "gray"
    WHITE = "white"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    GREEN = "green"


class HairStyle(str, enum.Enum):
    BALD = "bald"
    SHAVED = "shaved"
    BUZZ_CUT = "buzz_cut"
    CREW = "crew"
    FADE = "fade"
    UNDERCUT = "undercut"
    SPIKY = "spiky"
    TEXTURED = "textured"
    CAESAR = "caesar"
    SLICK_BACK = "slick_back"
    SIDE_PART = "side_part"
    QUIFF = "quiff"
    POMPADOUR = "pompadour"
    MESSY_MEDIUM = "messy_medium"
    CURTAINS = "curtains"
    LONG_STRAIGHT = "long_straight"
    LONG_WAVY = "long_wavy"
    LONG_CURLY = "long_curly"
    PONYTAIL = "ponytail"
    BUN = "bun"
    BRAIDS = "braids"
    HALF_UP = "half_up"
    AFRO = "afro"
    AFRO_SMALL = "afro_small"
    COILS = "coils"
    LOCS = "locs"
    TWISTS = "twists"
    CORNROWS = "cornrows"
    BOB_SHORT = "bob_short"
    BOB_LONG = "bob_long"
    BOB_LAYERED = "bob_layered"
    PIXIE = "pixie"
    HIJAB = "hijab"
    TURBAN = "turban"
    HEADWRAP = "headwrap"
    DURAG = "durag"
    STRAIGHT_BANGS = "straight_bangs"
    SIDE_BANGS = "side_bangs"
    CURLY_BANGS = "curly_bangs"


class FacialHair(str, enum.Enum):
    NONE = "none"
    STUBBLE = "stubble"
    GOATEE = "goatee"
    VANDYKE = "vandyke"
    SHORT_BEARD = "short_beard"
    MEDIUM_BEARD = "medium_beard"
    LONG_BEARD = "long_beard"
    FULL_BEARD = "full_beard"
    MUSTACHE = "mustache"
    HANDLEBAR = "handlebar"
    SOUL_PATCH = "soul_patch"
    CHIN_STRAP = "chin_strap"


class FaceShape(str, enum.Enum):
    OVAL = "oval"
    ROUND = "round"
    SQUARE = "square"
    HEART = "heart"
    OBLONG = "oblong"
    DIAMOND = "diamond"


class EyeShape(str, enum.Enum):
    ALMOND = "almond"
    ROUND = "round"
    MONOLID = "monolid"
    HOODED = "hooded"
    DOWNTURNED = "downturned"
    UPTURNED = "upturned"
    WIDE = "wide"
    CLOSE = "close"


class EyeColor(str, enum.Enum):
    BROWN = "brown"
    HAZEL = "hazel"
    AMBER = "amber"
    GREEN = "green"
    BLUE = "blue"
    GRAY = "gray"
    LIGHT_BLUE = "light_blue"
    DARK_BROWN = "dark_brown"
    VIOLET = "violet"
    HETEROCHROMIA = "heterochromia"


class EyebrowStyle(str, enum.Enum):
    NATURAL = "natural"
    THICK = "thick"
    THIN = "thin"
    ARCHED = "arched"
    STRAIGHT = "straight"
    ROUNDED = "rounded"
    ANGLED_UP = "angled_up"
    ANGLED_DOWN = "angled_down"
    UNIBROW = "unibrow"


class NoseShape(str, enum.Enum):
    STRAIGHT = "straight"
    ROMAN = "roman"
    BUTTON = "button"
    SNUB = "snub"
    WIDE = "wide"
    NARROW = "narrow"
    HOOKED = "hooked"
    FLAT = "flat"


class MouthExpression(str, enum.Enum):
    NEUTRAL = "neutral"
    SMILE = "smile"
    SMILE_OPEN = "smile_open"
    SMIRK = "smirk"
    SERIOUS = "serious"
    SLIGHT = "slight"
    PURSED = "pursed"
    OPEN_MOUTH = "open_mouth"
    FROWN = "frown"
    THINKING = "thinking"


class BodyShape(str, enum.Enum):
    SLIM = "slim"
    AVERAGE = "average"
    ATHLETIC = "athletic"
    PLUS = "plus"
    MUSCULAR = "muscular"


class HeightCategory(str, enum.Enum):
    SHORT = "short"
    AVERAGE = "average"
    TALL = "tall"


class TopType(str, enum.Enum):
    TSHIRT = "tshirt"
    TSHIRT_VNECK = "tshirt_vneck"
    POLO = "polo"
    BUTTON_UP = "button_up"
    BLOUSE = "blouse"
    SWEATER = "sweater"
    HOODIE = "hoodie"
    JACKET = "jacket"
    BLAZER = "blazer"
    TANK = "tank"
    CROP = "crop"
    TURTLENECK = "turtleneck"
    CARDIGAN = "cardigan"
    DRESS = "dress"
    OVERALL = "overall"


class BottomType(str, enum.Enum):
    JEANS = "jeans"
    PANTS = "pants"
    SHORTS = "shorts"
    SKIRT = "skirt"
    SKIRT_LONG = "skirt_long"
    LEGGINGS = "leggings"
    SWEATPANTS = "sweatpants"
    SLACKS = "slacks"


class ClothingColor(str, enum.Enum):
    BLACK = "black"
    WHITE = "white"
    GRAY = "gray"
    NAVY = "navy"
    BLUE = "blue"
    LIGHT_BLUE = "light_blue"
    RED = "red"
    BURGUNDY = "burgundy"
    PINK = "pink"
    PURPLE = "purple"
    GREEN = "green"
    OLIVE = "olive"
    BROWN = "brown"
    TAN = "tan"
    BEIGE = "beige"
    ORANGE = "orange"
    YELLOW = "yellow"
    TEAL = "teal"
    CORAL = "coral"
    CREAM = "cream"


class Glasses(str, enum.Enum):
    NONE = "none"
    READING = "reading"
    ROUND = "round"
    SQUARE = "square"
    AVIATOR = "aviator"
    CAT = "cat"
    SUNGLASSES = "sunglasses"
    AVIATOR_SUN = "aviator_sun"
    SPORT = "sport"


class Headwear(str, enum.Enum):
    NONE = "none"
    CAP = "cap"
    BEANIE = "beanie"
    FEDORA = "fedora"
    BUCKET = "bucket"
    SNAPBACK = "snapback"
    VISOR = "visor"
    BANDANA = "bandana"
    HEADBAND = "headband"
    BERET = "beret"


class AttributeRecord(BaseModel):
    """Complete, immutable avatar description.

    Frozen so that records hash and can key render caches. Accepts both the
    snake_case field names and the camelCase names of stored records.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Primary identity (60% of the similarity score)
    skin_tone: SkinTone
    hair_color: HairColor
    hair_style: HairStyle
    facial_hair: FacialHair
    facial_hair_color: HairColor
    face_shape: FaceShape

    # Secondary identity (40%)
    eye_shape: EyeShape
    eye_color: EyeColor
    eyebrow_style: EyebrowStyle
    nose_shape: NoseShape
    mouth_expression: MouthExpression
    body_shape: BodyShape
    glasses: Glasses
    headwear: Headwear

    # Cosmetic only, never scored
    top_type: TopType
    top_color: ClothingColor
    bottom_type: BottomType
    bottom_color: ClothingColor
    height_category: HeightCategory


PRIMARY_FIELDS: tuple[str, ...] = (
    "skin_tone",
    "hair_color",
    "hair_style",
    "facial_hair",
    "facial_hair_color",
    "face_shape",
)

SECONDARY_FIELDS: tuple[str, ...] = (
    "eye_shape",
    "eye_color",
    "eyebrow_style",
    "nose_shape",
    "mouth_expression",
    "body_shape",
    "glasses",
    "headwear",
)

COSMETIC_FIELDS: tuple[str, ...] = (
    "top_type",
    "top_color",
    "bottom_type",
    "bottom_color",
    "height_category",
)

FIELD_ENUMS: dict[str, type[enum.Enum]] = {
    name: info.annotation for name, info in AttributeRecord.model_fields.items()
}

COLOR_FIELDS: tuple[str, ...] = (
    "skin_tone",
    "hair_color",
    "facial_hair_color",
    "eye_color",
    "top_color",
    "bottom_color",
)

FIELD_LABELS: dict[str, str] = {
    "skin_tone": "skin tone",
    "hair_color": "hair color",
    "hair_style": "hairstyle",
    "facial_hair": "facial hair",
    "facial_hair_color": "facial hair color",
    "face_shape": "face shape",
    "eye_shape": "eye shape",
    "eye_color": "eye color",
    "eyebrow_style": "eyebrow style",
    "nose_shape": "nose shape",
    "mouth_expression": "expression",
    "body_shape": "body type",
    "height_category": "height",
    "top_type": "top style",
    "top_color": "top color",
    "bottom_type": "bottom style",
    "bottom_color": "bottom color",
    "glasses": "glasses",
    "headwear": "headwear",
}

# Display labels that title-casing the key would get wrong
_VALUE_LABELS: dict[tuple[str, str], str] = {
    ("hair_style", "buzz_cut"): "Buzz Cut",
    ("hair_style", "crew"): "Crew Cut",
    ("hair_style", "textured"): "Textured Short",
    ("hair_style", "afro_small"): "Small Afro",
    ("hair_style", "bob_short"): "Short Bob",
    ("hair_style", "bob_long"): "Long Bob",
    ("hair_style", "bob_layered"): "Layered Bob",
    ("hair_style", "pixie"): "Pixie Cut",
    ("hair_style", "headwrap"): "Head Wrap",
    ("hair_style", "straight_bangs"): "Straight with Bangs",
    ("hair_style", "side_bangs"): "Side Swept Bangs",
    ("hair_style", "curly_bangs"): "Curly with Bangs",
    ("facial_hair", "vandyke"): "Van Dyke",
    ("facial_hair", "handlebar"): "Handlebar Mustache",
    ("eye_shape", "wide"): "Wide Set",
    ("eye_shape", "close"): "Close Set",
    ("mouth_expression", "smile_open"): "Open Smile",
    ("mouth_expression", "slight"): "Slight Smile",
    ("mouth_expression", "open_mouth"): "Open",
    ("top_type", "tshirt"): "T-Shirt",
    ("top_type", "tshirt_vneck"): "V-Neck T-Shirt",
    ("top_type", "polo"): "Polo Shirt",
    ("top_type", "button_up"): "Button Up Shirt",
    ("top_type", "tank"): "Tank Top",
    ("top_type", "crop"): "Crop Top",
    ("top_type", "overall"): "Overalls",
    ("bottom_type", "skirt_long"): "Long Skirt",
    ("glasses", "reading"): "Reading Glasses",
    ("glasses", "round"): "Round Glasses",
    ("glasses", "square"): "Square Glasses",
    ("glasses", "cat"): "Cat Eye",
    ("glasses", "aviator_sun"): "Aviator Sunglasses",
    ("glasses", "sport"): "Sport Glasses",
    ("headwear", "cap"): "Baseball Cap",
    ("headwear", "bucket"): "Bucket Hat",
}

HAIR_STYLE_CATEGORIES: dict[str, tuple[HairStyle, ...]] = {
    "bald": (HairStyle.BALD, HairStyle.SHAVED, HairStyle.BUZZ_CUT),
    "short": (
        HairStyle.CREW, HairStyle.FADE, HairStyle.UNDERCUT,
        HairStyle.SPIKY, HairStyle.TEXTURED, HairStyle.CAESAR,
    ),
    "medium": (
        HairStyle.SLICK_BACK, HairStyle.SIDE_PART, HairStyle.QUIFF,
        HairStyle.POMPADOUR, HairStyle.MESSY_MEDIUM, HairStyle.CURTAINS,
    ),
    "long": (
        HairStyle.LONG_STRAIGHT, HairStyle.LONG_WAVY, HairStyle.LONG_CURLY,
        HairStyle.PONYTAIL, HairStyle.BUN, HairStyle.BRAIDS, HairStyle.HALF_UP,
    ),
    "curly": (
        HairStyle.AFRO, HairStyle.AFRO_SMALL, HairStyle.COILS,
        HairStyle.LOCS, HairStyle.TWISTS, HairStyle.CORNROWS,
    ),
    "bob": (HairStyle.BOB_SHORT, HairStyle.BOB_LONG, HairStyle.BOB_LAYERED, HairStyle.PIXIE),
    "covered": (HairStyle.HIJAB, HairStyle.TURBAN, HairStyle.HEADWRAP, HairStyle.DURAG),
    "bangs": (HairStyle.STRAIGHT_BANGS, HairStyle.SIDE_BANGS, HairStyle.CURLY_BANGS),
}

_DIGITS_RE = re.compile(r"(\d+)")


def format_label(value: str) -> str:
    """'dark_brown' -> 'Dark Brown', 'fair1' -> 'Fair 1'."""
    spaced = _DIGITS_RE.sub(r" \1", value).replace("_", " ")
    return " ".join(word.capitalize() for word in spaced.split())


def attribute_label(field: str, value: str) -> str:
    return _VALUE_LABELS.get((field, value), format_label(value))


def is_color_field(field: str) -> bool:
    return field in COLOR_FIELDS


def hair_style_category(style: HairStyle) -> str | None:
    for category, styles in HAIR_STYLE_CATEGORIES.items():
        if style in styles:
            return category
    return None
