"""Tests for the layer compositor."""

import re

from tests.conftest import (
    BALD_RECORD,
    EMPTY_SVG,
    SAMPLE_RECORD,
    UNKNOWN_TOKEN_SVG,
    make_registry,
)

from lookalike.engine.compositor import Compositor, compose_full_body, compose_portrait
from lookalike.engine.config import CompositionConfig
from lookalike.engine.mapper import View
from lookalike.engine.palette import build_palette
from lookalike.engine.registry import PartRegistry

_GROUP_RE = re.compile(r'<g class="layer-(\w+)">')


def _layers(svg: str) -> list[str]:
    return _GROUP_RE.findall(svg)


def test_compose_stacks_layers_in_z_order():
    svg = Compositor(make_registry()).compose(SAMPLE_RECORD, View.PORTRAIT)
    assert _layers(svg) == ["hair_back", "head", "eyes", "hair_front"]
    assert "<!-- head: heart -->" in svg


def test_compose_colorizes_parts():
    svg = Compositor(make_registry()).compose(SAMPLE_RECORD)
    palette = build_palette(SAMPLE_RECORD)
    assert palette["skin"] in svg
    assert palette["hair"] in svg
    assert "{{skin}}" not in svg


def test_bald_has_no_hair_groups():
    svg = Compositor(make_registry()).compose(BALD_RECORD)
    assert "layer-hair_back" not in svg
    assert "layer-hair_front" not in svg
    assert "layer-head" in svg


def test_inner_markup_only():
    svg = Compositor(make_registry()).compose(SAMPLE_RECORD)
    # One outer document, part wrappers stripped
    assert svg.count("<svg") == 1
    assert svg.count("</svg>") == 1


def test_document_geometry_portrait():
    svg = Compositor(make_registry()).compose(SAMPLE_RECORD, View.PORTRAIT)
    assert 'viewBox="0 0 200 200"' in svg
    assert 'width="200" height="200"' in svg
    assert 'rx="8"' in svg
    assert 'clip-path="url(#avatar-clip)"' in svg


def test_document_geometry_full_body():
    svg = Compositor(make_registry()).compose(SAMPLE_RECORD, View.FULL_BODY)
    assert 'viewBox="0 0 200 400"' in svg
    assert 'width="200" height="400"' in svg


def test_custom_size():
    svg = Compositor(make_registry()).compose(SAMPLE_RECORD, View.FULL_BODY, size=300)
    assert 'width="150" height="300"' in svg


def test_declaration_flag():
    comp = Compositor(make_registry())
    assert not comp.compose(SAMPLE_RECORD).startswith("<?xml")
    assert comp.compose(SAMPLE_RECORD, include_declaration=True).startswith('<?xml version="1.0" encoding="UTF-8"?>')


def test_deterministic():
    comp = Compositor(make_registry())
    assert comp.compose(SAMPLE_RECORD) == comp.compose(SAMPLE_RECORD)


def test_empty_registry_returns_placeholder():
    comp = Compositor(PartRegistry())
    svg = comp.compose(SAMPLE_RECORD)
    assert 'aria-label="Avatar placeholder"' in svg
    assert "#E5E7EB" in svg
    assert 'width="200" height="200"' in svg
    assert svg == comp.placeholder(View.PORTRAIT)


def test_placeholder_sized_like_render():
    svg = Compositor(PartRegistry()).compose(SAMPLE_RECORD, View.FULL_BODY)
    assert 'viewBox="0 0 200 400"' in svg
    assert 'width="200" height="400"' in svg


def test_placeholder_honors_declaration():
    svg = Compositor(PartRegistry()).compose(SAMPLE_RECORD, include_declaration=True)
    assert svg.startswith("<?xml")


def test_empty_template_is_skipped():
    reg = make_registry(glasses={"round": EMPTY_SVG})
    svg = Compositor(reg).compose(SAMPLE_RECORD)
    assert "layer-glasses" not in svg


def test_unknown_tokens_survive_composition():
    reg = make_registry(glasses={"round": UNKNOWN_TOKEN_SVG})
    svg = Compositor(reg).compose(SAMPLE_RECORD)
    assert "{{sparkle}}" in svg
    assert _layers(svg)[-1] == "glasses"


def test_validate_reports_missing_glasses():
    reg = make_registry(
        ears={"default": EMPTY_SVG},
        nose={"button": EMPTY_SVG},
        mouth={"smile": EMPTY_SVG},
        eyebrows={"arched": EMPTY_SVG},
    )
    result = Compositor(reg).validate_parts(SAMPLE_RECORD, View.PORTRAIT)
    assert not result.valid
    assert result.missing == ["glasses:round"]


def test_validate_missing_in_z_order():
    result = Compositor(PartRegistry()).validate_parts(BALD_RECORD, View.PORTRAIT)
    assert result.missing == [
        "head:heart",
        "ears:default",
        "eyes:almond",
        "nose:button",
        "mouth:smile",
        "eyebrows:arched",
        "glasses:round",
    ]


def test_default_catalog_covers_sample():
    comp = Compositor()
    for view in View:
        assert comp.validate_parts(SAMPLE_RECORD, view).valid


def test_module_level_wrappers():
    portrait = compose_portrait(SAMPLE_RECORD)
    full = compose_full_body(SAMPLE_RECORD)
    assert 'width="200" height="200"' in portrait
    assert "layer-top" in full
    assert "layer-top" not in portrait


def test_config_default_declaration():
    comp = Compositor(make_registry(), CompositionConfig(include_declaration=True))
    assert comp.compose(SAMPLE_RECORD).startswith("<?xml")


def test_placeholder_declaration_argument():
    plain = Compositor(PartRegistry())
    declared = Compositor(PartRegistry(), CompositionConfig(include_declaration=True))
    assert plain.placeholder(View.PORTRAIT, include_declaration=True).startswith("<?xml")
    assert not plain.placeholder(View.PORTRAIT).startswith("<?xml")
    assert declared.placeholder(View.PORTRAIT).startswith("<?xml")
    assert not declared.placeholder(View.PORTRAIT, include_declaration=False).startswith("<?xml")
