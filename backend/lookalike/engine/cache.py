"""Bounded LRU cache of rendered documents, keyed by the render inputs."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable, Hashable

logger = logging.getLogger(__name__)


class RenderCache:
    """Thread-safe LRU map from render key to SVG string.

    Owned by the caller; the compositor itself never caches.
    """

    def __init__(self, max_entries: int = 256) -> None:
        if max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[Hashable, str] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> str | None:
        with self._lock:
            svg = self._entries.get(key)
            if svg is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return svg

    def put(self, key: Hashable, svg: str) -> None:
        if self.max_entries == 0:
            return
        with self._lock:
            self._entries[key] = svg
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted render %r", evicted)

    def get_or_render(self, key: Hashable, render: Callable[[], str]) -> str:
        """Cached document for ``key``, rendering and storing it on a miss."""
        svg = self.get(key)
        if svg is None:
            svg = render()
            self.put(key, svg)
        return svg

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries
