"""Tests for color derivation."""

import pytest

from lookalike.engine.colors import CLOTHING_COLORS, EYE_COLORS, HAIR_COLORS, SKIN_TONES
from lookalike.engine.shading import (
    ShadeLevel,
    blend,
    darken,
    derive,
    hex_to_hsl,
    hex_to_rgb,
    lighten,
    relative_lightness,
    rgb_to_hex,
    saturate,
    shading_token_set,
    shift_hue,
)

ALL_BASE_COLORS = sorted(
    set(SKIN_TONES.values()) | set(HAIR_COLORS.values()) | set(EYE_COLORS.values()) | set(CLOTHING_COLORS.values())
)

EXTREMES = ["#000000", "#FFFFFF", "#010101", "#FEFEFE", "#FF0000", "#0000FF", "#808080"]


def _lightness_chain(base: str) -> list[float]:
    s = shading_token_set(base)
    return [relative_lightness(c) for c in (s.shadow3, s.shadow2, s.shadow1, s.base, s.highlight1, s.highlight2)]


def test_hex_parsing():
    assert hex_to_rgb("#FF8000") == (255, 128, 0)
    assert hex_to_rgb("ff8000") == (255, 128, 0)
    assert hex_to_rgb("#F80") == (255, 136, 0)


@pytest.mark.parametrize("bad", ["", "#GGGGGG", "#12345", "red", "#1234567"])
def test_malformed_hex_raises(bad):
    with pytest.raises(ValueError):
        hex_to_rgb(bad)


def test_rgb_to_hex_clamps_and_uppercases():
    assert rgb_to_hex(300, -5, 171.4) == "#FF00AB"


def test_zero_adjustment_is_identity():
    assert lighten("#A67C5B", 0) == "#A67C5B"
    assert darken("#a67c5b", 0) == "#a67c5b"
    assert saturate("#A67C5B", 0) == "#A67C5B"
    assert shift_hue("#A67C5B", 0) == "#A67C5B"


@pytest.mark.parametrize("base", ALL_BASE_COLORS + EXTREMES)
def test_shading_order_never_inverts(base):
    chain = _lightness_chain(base)
    assert chain == sorted(chain)


@pytest.mark.parametrize("base", ALL_BASE_COLORS)
def test_shading_order_strict_with_headroom(base):
    base_l = relative_lightness(base)
    if not 18 < base_l < 88:
        pytest.skip("no headroom for strict ordering")
    chain = _lightness_chain(base)
    assert all(a < b for a, b in zip(chain, chain[1:]))


def test_lightness_clamps_instead_of_wrapping():
    assert darken("#101010", 50) == "#000000"
    assert lighten("#F0F0F0", 50) == "#FFFFFF"


def test_saturation_clamps():
    gray = "#808080"
    assert saturate(gray, -30) == gray
    assert hex_to_hsl(saturate("#CC3333", 200)).s == pytest.approx(100, abs=0.5)


def test_hue_wraps():
    red = hex_to_hsl("#FF0000")
    shifted = hex_to_hsl(shift_hue("#FF0000", 360 + 120))
    assert red.h == pytest.approx(0, abs=0.5)
    assert shifted.h == pytest.approx(120, abs=0.5)


def test_blush_is_warmer_and_more_saturated():
    base = "#D19F7E"
    blush = derive(base, ShadeLevel.BLUSH)
    b, r = hex_to_hsl(base), hex_to_hsl(blush)
    assert r.s >= b.s
    assert r.h < b.h


def test_ambient_occlusion_darker_than_deepest_shadow():
    base = "#BB8A68"
    s = shading_token_set(base)
    assert relative_lightness(s.ambient_occlusion) <= relative_lightness(s.shadow3)


def test_token_names():
    tokens = shading_token_set("#6A4E42").as_tokens("hair")
    assert set(tokens) == {
        "hair",
        "hairShadow1",
        "hairShadow2",
        "hairShadow3",
        "hairHighlight1",
        "hairHighlight2",
        "hairBlush",
        "hairAO",
    }
    assert tokens["hair"] == "#6A4E42"


def test_derivation_is_pure():
    assert shading_token_set("#3B82F6") == shading_token_set("#3B82F6")


def test_blend_endpoints():
    assert blend("#000000", "#FFFFFF", 0) == "#000000"
    assert blend("#000000", "#FFFFFF", 1) == "#FFFFFF"
    assert blend("#000000", "#FFFFFF", 0.5) == "#808080"
