"""Select candidate descriptions that resemble a record."""

from __future__ import annotations

import logging
from typing import Iterable

from lookalike.matching.scorer import MatchingConfig, score
from lookalike.models.attributes import AttributeRecord
from lookalike.models.match import MatchEntry, RankedEntry

logger = logging.getLogger(__name__)


def quick_match(
    a: AttributeRecord,
    b: AttributeRecord,
    threshold: int | None = None,
    config: MatchingConfig | None = None,
) -> bool:
    """Whether ``score(a, b)`` reaches ``threshold``."""
    config = config or MatchingConfig()
    if threshold is None:
        threshold = config.threshold
    return score(a, b, config).score >= threshold


def filter_matches(
    candidate: AttributeRecord,
    entries: Iterable[MatchEntry],
    threshold: int | None = None,
    config: MatchingConfig | None = None,
) -> list[MatchEntry]:
    """Entries whose target scores at least ``threshold`` against ``candidate``.

    Input order is preserved. Entries without a target are dropped.
    """
    config = config or MatchingConfig()
    if threshold is None:
        threshold = config.threshold
    kept: list[MatchEntry] = []
    for entry in entries:
        if entry.target is None:
            continue
        if score(candidate, entry.target, config).score >= threshold:
            kept.append(entry)
    logger.debug("Kept %d entries at threshold %d", len(kept), threshold)
    return kept


def rank_matches(
    candidate: AttributeRecord,
    entries: Iterable[MatchEntry],
    config: MatchingConfig | None = None,
) -> list[RankedEntry]:
    """Every entry with a target, scored and sorted best first.

    Ties keep their input order.
    """
    config = config or MatchingConfig()
    ranked = [
        RankedEntry(entry=entry, result=score(candidate, entry.target, config))
        for entry in entries
        if entry.target is not None
    ]
    ranked.sort(key=lambda r: r.result.score, reverse=True)
    return ranked
