"""Lookalike avatar matching engine."""

from lookalike.matching.describe import describe_match, explain_match, quality_color
from lookalike.matching.filter import filter_matches, quick_match, rank_matches
from lookalike.matching.scorer import MatchingConfig, score

__all__ = [
    "describe_match",
    "explain_match",
    "quality_color",
    "filter_matches",
    "quick_match",
    "rank_matches",
    "MatchingConfig",
    "score",
]
