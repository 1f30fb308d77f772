"""Part registry mapping (layer, part id) to an SVG template.

Usage:
    registry = PartRegistry()
    registry.register(Layer.HEAD, "oval", OVAL_HEAD_SVG)
    registry.freeze()
    registry.get(Layer.HEAD, "oval")

Filled once at startup, frozen, then only read. Lookups never raise on
unknown keys so a missing asset degrades to a skipped layer.
"""

from __future__ import annotations

import enum
import functools
import logging
from typing import Mapping

logger = logging.getLogger(__name__)


class Layer(str, enum.Enum):
    HAIR_BACK = "hair_back"
    BODY = "body"
    BOTTOM = "bottom"
    TOP = "top"
    NECK = "neck"
    HEAD = "head"
    EARS = "ears"
    EYES = "eyes"
    NOSE = "nose"
    MOUTH = "mouth"
    EYEBROWS = "eyebrows"
    FACIAL_HAIR = "facial_hair"
    HAIR_FRONT = "hair_front"
    GLASSES = "glasses"
    HEADWEAR = "headwear"


class RegistryFrozenError(RuntimeError):
    """Raised when a frozen registry is written to."""


def _layer_key(layer: Layer | str) -> str:
    return layer.value if isinstance(layer, Layer) else layer


class PartRegistry:
    """Templates for every drawable part, grouped by layer."""

    def __init__(self) -> None:
        self._parts: dict[str, dict[str, str]] = {}
        self._frozen = False

    def register(self, layer: Layer | str, part_id: str, template: str, *, replace: bool = False) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {_layer_key(layer)}:{part_id}, registry is frozen")
        key = _layer_key(layer)
        parts = self._parts.setdefault(key, {})
        if part_id in parts and not replace:
            raise ValueError(f"Duplicate part: {key}:{part_id}")
        parts[part_id] = template
        logger.debug("Registered part %s:%s", key, part_id)

    def register_many(self, layer: Layer | str, templates: Mapping[str, str], *, replace: bool = False) -> None:
        for part_id, template in templates.items():
            self.register(layer, part_id, template, replace=replace)

    def get(self, layer: Layer | str, part_id: str) -> str | None:
        return self._parts.get(_layer_key(layer), {}).get(part_id)

    def has(self, layer: Layer | str, part_id: str) -> bool:
        return part_id in self._parts.get(_layer_key(layer), {})

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def layer_part_ids(self, layer: Layer | str) -> list[str]:
        return sorted(self._parts.get(_layer_key(layer), {}))

    def layers(self) -> list[str]:
        return sorted(key for key, parts in self._parts.items() if parts)

    def stats(self) -> dict[str, int]:
        """Part count per layer."""
        return {key: len(parts) for key, parts in sorted(self._parts.items()) if parts}

    @property
    def count(self) -> int:
        return sum(len(parts) for parts in self._parts.values())


@functools.lru_cache(maxsize=1)
def default_registry() -> PartRegistry:
    """The bundled asset catalog, loaded once and frozen."""
    from lookalike.assets.catalog import register_catalog

    registry = PartRegistry()
    register_catalog(registry)
    registry.freeze()
    logger.info("Loaded %d avatar parts across %d layers", registry.count, len(registry.layers()))
    return registry
