"""Layer compositor. Renders an attribute record to one SVG document.

Walks the view's fixed z-order, colorizes each resolved part template with
the record's palette, and stacks the parts' inner markup as named groups.
Output depends only on the inputs and the registry contents.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field

from lookalike.engine.config import CompositionConfig
from lookalike.engine.mapper import LAYER_ORDER, View, map_parts
from lookalike.engine.palette import build_palette, colorize
from lookalike.engine.registry import PartRegistry, default_registry
from lookalike.models.attributes import AttributeRecord
from lookalike.svg.markup import inner_markup
from lookalike.svg.serializer import layer_group, serialize_avatar, serialize_placeholder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartValidation:
    valid: bool
    # "layer:id" for every mapped part the registry lacks, in z-order
    missing: list[str] = field(default_factory=list)


class Compositor:
    """Composes avatars from the parts held by one registry."""

    def __init__(self, registry: PartRegistry | None = None, config: CompositionConfig | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.config = config or CompositionConfig()

    def compose(
        self,
        record: AttributeRecord,
        view: View = View.PORTRAIT,
        size: float | None = None,
        include_declaration: bool | None = None,
    ) -> str:
        view = View(view)
        size = self.config.size_for(view, size)
        if include_declaration is None:
            include_declaration = self.config.include_declaration
        viewport = self.config.viewport(view)

        mapping = map_parts(record, view)
        palette = build_palette(record)

        groups: list[str] = []
        for layer in LAYER_ORDER[view]:
            part_id = mapping.get(layer)
            if part_id is None:
                continue
            template = self.registry.get(layer, part_id)
            if template is None:
                logger.debug("No part for %s:%s, skipping layer", layer.value, part_id)
                continue
            content = inner_markup(colorize(template, palette))
            if not content:
                logger.debug("Part %s:%s has no inner markup, skipping layer", layer.value, part_id)
                continue
            groups.append(layer_group(layer.value, part_id, content))

        if not groups:
            logger.info("No layers resolved for %s view, returning placeholder", view.value)
            return serialize_placeholder(viewport, size, include_declaration)

        return serialize_avatar(groups, viewport, size, include_declaration)

    def compose_portrait(self, record: AttributeRecord, size: float | None = None) -> str:
        return self.compose(record, View.PORTRAIT, size)

    def compose_full_body(self, record: AttributeRecord, size: float | None = None) -> str:
        return self.compose(record, View.FULL_BODY, size)

    def placeholder(
        self,
        view: View = View.PORTRAIT,
        size: float | None = None,
        include_declaration: bool | None = None,
    ) -> str:
        view = View(view)
        if include_declaration is None:
            include_declaration = self.config.include_declaration
        return serialize_placeholder(
            self.config.viewport(view),
            self.config.size_for(view, size),
            include_declaration,
        )

    def validate_parts(self, record: AttributeRecord, view: View = View.PORTRAIT) -> PartValidation:
        """Report every mapped part the registry cannot supply."""
        view = View(view)
        mapping = map_parts(record, view)
        missing = [
            f"{layer.value}:{mapping[layer]}"
            for layer in LAYER_ORDER[view]
            if mapping.get(layer) is not None and not self.registry.has(layer, mapping[layer])
        ]
        return PartValidation(valid=not missing, missing=missing)


@functools.lru_cache(maxsize=1)
def _default_compositor() -> Compositor:
    return Compositor()


def compose(
    record: AttributeRecord,
    view: View = View.PORTRAIT,
    size: float | None = None,
    include_declaration: bool = False,
) -> str:
    return _default_compositor().compose(record, view, size, include_declaration)


def compose_portrait(record: AttributeRecord, size: float | None = None) -> str:
    return _default_compositor().compose_portrait(record, size)


def compose_full_body(record: AttributeRecord, size: float | None = None) -> str:
    return _default_compositor().compose_full_body(record, size)


def validate_parts(record: AttributeRecord, view: View = View.PORTRAIT) -> PartValidation:
    return _default_compositor().validate_parts(record, view)
