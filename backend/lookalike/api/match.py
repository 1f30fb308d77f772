"""Matching endpoints: pairwise score, threshold filter and ranking."""

from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter

from lookalike.api.deps import MatchingConfigDep
from lookalike.matching.describe import describe_match, explain_match, quality_color
from lookalike.matching.filter import filter_matches, rank_matches
from lookalike.matching.scorer import MatchingConfig, score
from lookalike.models.requests import FilterRequest, RankRequest, ScoreRequest
from lookalike.models.responses import FilterResponse, RankResponse, ScoreResponse

router = APIRouter(prefix="/match")


@router.post("/score", response_model=ScoreResponse)
async def score_pair(request: ScoreRequest, config: MatchingConfig = MatchingConfigDep) -> ScoreResponse:
    if request.use_fuzzy is not None:
        config = replace(config, use_fuzzy=request.use_fuzzy)
    result = score(request.a, request.b, config)
    return ScoreResponse(
        result=result,
        description=describe_match(result),
        explanation=explain_match(result),
        color=quality_color(result.quality),
    )


@router.post("/filter", response_model=FilterResponse)
async def filter_entries(request: FilterRequest, config: MatchingConfig = MatchingConfigDep) -> FilterResponse:
    threshold = config.threshold if request.threshold is None else request.threshold
    kept = filter_matches(request.candidate, request.entries, threshold, config)
    return FilterResponse(threshold=threshold, entries=kept)


@router.post("/rank", response_model=RankResponse)
async def rank_entries(request: RankRequest, config: MatchingConfig = MatchingConfigDep) -> RankResponse:
    return RankResponse(ranked=rank_matches(request.candidate, request.entries, config))
