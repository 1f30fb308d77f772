"""Human-readable summaries of similarity results."""

from __future__ import annotations

from lookalike.matching.scorer import DEFAULT_CONFIG, MatchingConfig
from lookalike.models.attributes import FIELD_LABELS
from lookalike.models.match import MatchQuality, SimilarityResult

QUALITY_LABELS: dict[MatchQuality, str] = {
    MatchQuality.EXCELLENT: "Excellent",
    MatchQuality.GOOD: "Good",
    MatchQuality.FAIR: "Fair",
    MatchQuality.POOR: "Poor",
}

QUALITY_COLORS: dict[MatchQuality, str] = {
    MatchQuality.EXCELLENT: "#34C759",
    MatchQuality.GOOD: "#FF6B47",
    MatchQuality.FAIR: "#FF9500",
    MatchQuality.POOR: "#8E8E93",
}

_MAX_FEATURES = 3
_MAX_PARTIAL = 2


def describe_match(result: SimilarityResult) -> str:
    """'85% match - Excellent'."""
    return f"{result.score}% match - {QUALITY_LABELS[result.quality]}"


def explain_match(result: SimilarityResult) -> str:
    """Up to three shared features in prose, exact matches first."""
    features = [FIELD_LABELS[f] for f in result.breakdown.matching]
    features += [f"similar {FIELD_LABELS[f]}" for f in result.breakdown.partial[:_MAX_PARTIAL]]
    features = features[:_MAX_FEATURES]

    if not features:
        return "No matching features"
    if len(features) == 1:
        return f"{features[0]} matches"
    if len(features) == 2:
        return f"{features[0]} and {features[1]} match"
    return f"{', '.join(features[:-1])}, and {features[-1]} match"


def quality_color(quality: MatchQuality) -> str:
    return QUALITY_COLORS[MatchQuality(quality)]


def score_color(score: int, config: MatchingConfig | None = None) -> str:
    return quality_color((config or DEFAULT_CONFIG).quality_for(score))
