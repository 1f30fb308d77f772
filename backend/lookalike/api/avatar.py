"""Avatar endpoints: attribute options, composition and part validation."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from lookalike.api.deps import CompositorDep, RenderCacheDep
from lookalike.engine.cache import RenderCache
from lookalike.engine.colors import attribute_options
from lookalike.engine.compositor import Compositor
from lookalike.engine.mapper import View
from lookalike.models.attributes import FIELD_ENUMS, FIELD_LABELS
from lookalike.models.requests import ComposeRequest, ValidateRequest
from lookalike.models.responses import AttributeOption, OptionsResponse, ValidateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/avatar")

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/options", response_model=OptionsResponse)
async def options() -> OptionsResponse:
    return OptionsResponse(
        fields={
            field: [AttributeOption(**option) for option in attribute_options(field)]
            for field in FIELD_ENUMS
        },
        labels=FIELD_LABELS,
        views=[view.value for view in View],
    )


@router.post("/compose")
async def compose(
    request: ComposeRequest,
    compositor: Compositor = CompositorDep,
    cache: RenderCache = RenderCacheDep,
) -> Response:
    key = (request.record, request.view, request.size, request.include_declaration)
    svg = cache.get_or_render(
        key,
        lambda: compositor.compose(request.record, request.view, request.size, request.include_declaration),
    )
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)


@router.post("/validate", response_model=ValidateResponse)
async def validate(request: ValidateRequest, compositor: Compositor = CompositorDep) -> ValidateResponse:
    result = compositor.validate_parts(request.record, request.view)
    if not result.valid:
        logger.info("Missing parts for %s view: %s", request.view.value, ", ".join(result.missing))
    return ValidateResponse(valid=result.valid, missing=result.missing)
