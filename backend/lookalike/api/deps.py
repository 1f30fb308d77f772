"""Shared engine objects for the API layer."""

from __future__ import annotations

import functools

from fastapi import Depends

from lookalike.config import settings
from lookalike.engine.cache import RenderCache
from lookalike.engine.compositor import Compositor
from lookalike.matching.scorer import MatchingConfig


@functools.lru_cache(maxsize=1)
def get_compositor() -> Compositor:
    return Compositor()


@functools.lru_cache(maxsize=1)
def get_render_cache() -> RenderCache:
    return RenderCache(max_entries=settings.render_cache_size)


def get_matching_config() -> MatchingConfig:
    return MatchingConfig.from_settings(settings)


CompositorDep = Depends(get_compositor)
RenderCacheDep = Depends(get_render_cache)
MatchingConfigDep = Depends(get_matching_config)
