"""Similarity scoring between two attribute records.

Primary identity fields carry 60% of the score and secondary fields 40%,
split evenly inside each group. Cosmetic fields (clothing, height) are never
read. With the default strict comparison one primary difference costs 10
points and one secondary difference costs 5.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from lookalike.matching.similarity_groups import PARTIAL_CREDIT, are_similar
from lookalike.models.attributes import PRIMARY_FIELDS, SECONDARY_FIELDS, AttributeRecord
from lookalike.models.match import MatchQuality, ScoreBreakdown, SimilarityResult

if TYPE_CHECKING:
    from lookalike.config import Settings


@dataclass
class MatchingConfig:
    """Weights, quality band cut points and the default match threshold."""

    primary_weight: float = 0.6
    secondary_weight: float = 0.4

    # Minimum score counted as a match
    threshold: int = 60

    # Lower bounds of the quality bands
    quality_excellent: int = 85
    quality_good: int = 70
    quality_fair: int = 50

    # Same-group values earn partial credit instead of zero
    use_fuzzy: bool = False

    def __post_init__(self) -> None:
        if abs(self.primary_weight + self.secondary_weight - 1.0) > 0.01:
            raise ValueError(
                f"Group weights must sum to 1, got {self.primary_weight} + {self.secondary_weight}"
            )
        if not 100 >= self.quality_excellent > self.quality_good > self.quality_fair >= 0:
            raise ValueError(
                "Quality bands must satisfy 100 >= excellent > good > fair >= 0, got "
                f"{self.quality_excellent}/{self.quality_good}/{self.quality_fair}"
            )
        if not 0 <= self.threshold <= 100:
            raise ValueError(f"Match threshold must be within 0..100, got {self.threshold}")

    @classmethod
    def from_settings(cls, settings: Settings) -> MatchingConfig:
        return cls(
            threshold=settings.match_threshold,
            quality_excellent=settings.quality_excellent,
            quality_good=settings.quality_good,
            quality_fair=settings.quality_fair,
            use_fuzzy=settings.fuzzy_matching,
        )

    def quality_for(self, score: int) -> MatchQuality:
        if score >= self.quality_excellent:
            return MatchQuality.EXCELLENT
        if score >= self.quality_good:
            return MatchQuality.GOOD
        if score >= self.quality_fair:
            return MatchQuality.FAIR
        return MatchQuality.POOR


DEFAULT_CONFIG = MatchingConfig()


def _round_half_up(value: float) -> int:
    # Snap float noise (e.g. 84.99999999) before rounding
    return int(math.floor(round(value, 6) + 0.5))


def _credit(field: str, a: object, b: object, use_fuzzy: bool) -> float:
    if a == b:
        return 1.0
    if use_fuzzy and are_similar(field, a, b):
        return PARTIAL_CREDIT
    return 0.0


def _group_credits(a: AttributeRecord, b: AttributeRecord, fields: tuple[str, ...], use_fuzzy: bool) -> np.ndarray:
    return np.array([_credit(f, getattr(a, f), getattr(b, f), use_fuzzy) for f in fields], dtype=np.float64)


def score(a: AttributeRecord, b: AttributeRecord, config: MatchingConfig | None = None) -> SimilarityResult:
    """Score in [0, 100] with its quality band and a per-field breakdown.

    Symmetric in ``a`` and ``b``; identical records score 100.
    """
    config = config or DEFAULT_CONFIG

    primary = _group_credits(a, b, PRIMARY_FIELDS, config.use_fuzzy)
    secondary = _group_credits(a, b, SECONDARY_FIELDS, config.use_fuzzy)

    credits = np.concatenate([primary, secondary])
    weights = np.concatenate([
        np.full(len(PRIMARY_FIELDS), 100.0 * config.primary_weight / len(PRIMARY_FIELDS)),
        np.full(len(SECONDARY_FIELDS), 100.0 * config.secondary_weight / len(SECONDARY_FIELDS)),
    ])
    total = min(100, max(0, _round_half_up(float(np.dot(credits, weights)))))

    fields = PRIMARY_FIELDS + SECONDARY_FIELDS
    breakdown = ScoreBreakdown(
        primary_score=_round_half_up(float(primary.mean()) * 100.0),
        secondary_score=_round_half_up(float(secondary.mean()) * 100.0),
        matching=[f for f, c in zip(fields, credits) if c >= 1.0],
        partial=[f for f, c in zip(fields, credits) if 0.0 < c < 1.0],
        non_matching=[f for f, c in zip(fields, credits) if c == 0.0],
    )
    return SimilarityResult(score=total, quality=config.quality_for(total), breakdown=breakdown)
