"""The bundled part catalog: every template, keyed by layer."""

from __future__ import annotations

import logging

from lookalike.assets.accessories import GLASSES, HEADWEAR
from lookalike.assets.body import BODIES, BOTTOMS, TOPS
from lookalike.assets.face import EARS, EYEBROWS, EYES, HEADS, MOUTHS, NECKS, NOSES
from lookalike.assets.hair import FACIAL_HAIR, HAIR_BACK, HAIR_FRONT
from lookalike.engine.registry import Layer, PartRegistry

logger = logging.getLogger(__name__)

CATALOG: dict[Layer, dict[str, str]] = {
    Layer.HAIR_BACK: HAIR_BACK,
    Layer.BODY: BODIES,
    Layer.BOTTOM: BOTTOMS,
    Layer.TOP: TOPS,
    Layer.NECK: NECKS,
    Layer.HEAD: HEADS,
    Layer.EARS: EARS,
    Layer.EYES: EYES,
    Layer.NOSE: NOSES,
    Layer.MOUTH: MOUTHS,
    Layer.EYEBROWS: EYEBROWS,
    Layer.FACIAL_HAIR: FACIAL_HAIR,
    Layer.HAIR_FRONT: HAIR_FRONT,
    Layer.GLASSES: GLASSES,
    Layer.HEADWEAR: HEADWEAR,
}


def register_catalog(registry: PartRegistry) -> None:
    """Register every bundled template into ``registry``."""
    for layer, templates in CATALOG.items():
        registry.register_many(layer, templates)
        logger.debug("Registered %d %s parts", len(templates), layer.value)
