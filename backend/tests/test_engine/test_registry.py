"""Tests for the part registry."""

import pytest

from tests.conftest import HEAD_SVG, make_registry

from lookalike.engine.registry import Layer, PartRegistry, RegistryFrozenError, default_registry


def test_register_and_get():
    reg = PartRegistry()
    reg.register(Layer.HEAD, "oval", HEAD_SVG)
    assert reg.get(Layer.HEAD, "oval") == HEAD_SVG
    assert reg.get("head", "oval") == HEAD_SVG
    assert reg.has(Layer.HEAD, "oval")
    assert reg.count == 1


def test_unknown_keys_never_raise():
    reg = make_registry()
    assert reg.get(Layer.GLASSES, "round") is None
    assert reg.get("no_such_layer", "x") is None
    assert not reg.has(Layer.HEAD, "triangle")


def test_duplicate_registration_rejected():
    reg = PartRegistry()
    reg.register(Layer.HEAD, "oval", HEAD_SVG)
    with pytest.raises(ValueError):
        reg.register(Layer.HEAD, "oval", "<svg></svg>")


def test_replace_overwrites():
    reg = PartRegistry()
    reg.register(Layer.HEAD, "oval", HEAD_SVG)
    reg.register(Layer.HEAD, "oval", "<svg></svg>", replace=True)
    assert reg.get(Layer.HEAD, "oval") == "<svg></svg>"
    assert reg.count == 1


def test_frozen_registry_rejects_writes():
    reg = make_registry()
    reg.freeze()
    assert reg.frozen
    with pytest.raises(RegistryFrozenError):
        reg.register(Layer.GLASSES, "round", "<svg></svg>")
    assert reg.get(Layer.HEAD, "heart") == HEAD_SVG


def test_introspection():
    reg = make_registry()
    assert reg.layers() == ["eyes", "hair_back", "hair_front", "head"]
    assert reg.layer_part_ids(Layer.HAIR_BACK) == ["long_wavy_back"]
    assert reg.stats() == {"eyes": 1, "hair_back": 1, "hair_front": 1, "head": 1}
    assert reg.count == 4


def test_default_registry_is_frozen_singleton():
    reg = default_registry()
    assert reg is default_registry()
    assert reg.frozen
    assert reg.count > 100
