"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lookalike.engine.mapper import View
from lookalike.models.attributes import AttributeRecord
from lookalike.models.match import MatchEntry


class ComposeRequest(BaseModel):
    record: AttributeRecord = Field(..., description="Avatar attributes to render")
    view: View = Field(default=View.PORTRAIT, description="portrait or full_body")
    size: int | None = Field(default=None, gt=0, le=4096, description="Rendered height in pixels")
    include_declaration: bool = Field(default=False, description="Prefix the XML declaration")


class ValidateRequest(BaseModel):
    record: AttributeRecord
    view: View = View.PORTRAIT


class ScoreRequest(BaseModel):
    a: AttributeRecord
    b: AttributeRecord
    use_fuzzy: bool | None = Field(default=None, description="Override the configured fuzzy matching flag")


class FilterRequest(BaseModel):
    candidate: AttributeRecord = Field(..., description="The viewer's own avatar")
    entries: list[MatchEntry] = Field(default_factory=list)
    threshold: int | None = Field(default=None, ge=0, le=100)


class RankRequest(BaseModel):
    candidate: AttributeRecord
    entries: list[MatchEntry] = Field(default_factory=list)
