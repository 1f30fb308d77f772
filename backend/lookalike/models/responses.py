"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lookalike.models.match import MatchEntry, RankedEntry, SimilarityResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    parts_registered: int = 0


class AttributeOption(BaseModel):
    value: str
    label: str
    color: str | None = None


class OptionsResponse(BaseModel):
    fields: dict[str, list[AttributeOption]] = Field(default_factory=dict)
    labels: dict[str, str] = Field(default_factory=dict)
    views: list[str] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    valid: bool
    missing: list[str] = Field(default_factory=list)


class ScoreResponse(BaseModel):
    result: SimilarityResult
    description: str = ""
    explanation: str = ""
    color: str = ""


class FilterResponse(BaseModel):
    threshold: int
    entries: list[MatchEntry] = Field(default_factory=list)


class RankResponse(BaseModel):
    ranked: list[RankedEntry] = Field(default_factory=list)
