"""Tests for palette assembly and colorization."""

from tests.conftest import SAMPLE_RECORD

from lookalike.engine.colors import HAIR_COLORS, SKIN_TONES, color_of
from lookalike.engine.palette import FIXED_TOKENS, build_palette, colorize
from lookalike.models.attributes import HairColor, SkinTone


def test_palette_has_every_category_level():
    palette = build_palette(SAMPLE_RECORD)
    for category in ("skin", "hair", "facialHair", "eye", "top", "bottom"):
        for suffix in ("", "Shadow1", "Shadow2", "Shadow3", "Highlight1", "Highlight2", "Blush", "AO"):
            assert f"{category}{suffix}" in palette


def test_palette_base_colors_come_from_registry():
    palette = build_palette(SAMPLE_RECORD)
    assert palette["skin"] == SKIN_TONES[SkinTone.OLIVE1]
    assert palette["hair"] == HAIR_COLORS[HairColor.BLACK]
    assert palette["eye"] == color_of(SAMPLE_RECORD.eye_color)
    assert palette["top"] == color_of(SAMPLE_RECORD.top_color)


def test_categories_are_namespaced():
    palette = build_palette(SAMPLE_RECORD)
    assert palette["skinShadow2"] != palette["hairShadow2"]


def test_fixed_tokens_present():
    palette = build_palette(SAMPLE_RECORD)
    for name, value in FIXED_TOKENS.items():
        assert palette[name] == value


def test_aliases_point_at_levels():
    palette = build_palette(SAMPLE_RECORD)
    assert palette["skinShadow"] == palette["skinShadow2"]
    assert palette["hairShadow"] == palette["hairShadow1"]
    assert palette["topDeep"] == palette["topShadow3"]
    assert palette["headwear"] == palette["top"]


def test_colorize_substitutes_known_tokens():
    palette = {"skin": "#D19F7E", "hair": "#090806"}
    out = colorize('<rect fill="{{skin}}" stroke="{{hair}}"/>', palette)
    assert out == '<rect fill="#D19F7E" stroke="#090806"/>'


def test_colorize_leaves_unknown_tokens():
    out = colorize('<rect fill="{{sparkle}}" stroke="{{skin}}"/>', {"skin": "#D19F7E"})
    assert out == '<rect fill="{{sparkle}}" stroke="#D19F7E"/>'


def test_palette_is_fresh_per_call():
    a = build_palette(SAMPLE_RECORD)
    a["skin"] = "#000000"
    assert build_palette(SAMPLE_RECORD)["skin"] == SKIN_TONES[SkinTone.OLIVE1]
