"""Match result models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from lookalike.models.attributes import AttributeRecord


class MatchQuality(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_score: int = 0
    secondary_score: int = 0
    matching: list[str] = Field(default_factory=list)
    partial: list[str] = Field(default_factory=list)
    non_matching: list[str] = Field(default_factory=list)


class SimilarityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    quality: MatchQuality
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)


class MatchEntry(BaseModel):
    """A candidate description, e.g. a post, carrying an optional target record.

    Any extra keys ride along untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    target: AttributeRecord | None = None


class RankedEntry(BaseModel):
    entry: MatchEntry
    result: SimilarityResult
