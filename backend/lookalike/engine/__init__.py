"""Lookalike avatar composition engine."""

from lookalike.engine.compositor import Compositor, PartValidation, compose, compose_full_body, compose_portrait
from lookalike.engine.mapper import LAYER_ORDER, View, map_parts
from lookalike.engine.palette import build_palette, colorize
from lookalike.engine.registry import Layer, PartRegistry, RegistryFrozenError, default_registry

__all__ = [
    "Compositor",
    "PartValidation",
    "compose",
    "compose_portrait",
    "compose_full_body",
    "LAYER_ORDER",
    "View",
    "map_parts",
    "build_palette",
    "colorize",
    "Layer",
    "PartRegistry",
    "RegistryFrozenError",
    "default_registry",
]
