"""Tests for the similarity scorer."""

import numpy as np
import pytest

from tests.conftest import RESTYLED_RECORD, SAMPLE_RECORD

from lookalike.config import Settings
from lookalike.defaults import random_record
from lookalike.matching.scorer import MatchingConfig, score
from lookalike.models.attributes import (
    COSMETIC_FIELDS,
    FIELD_ENUMS,
    PRIMARY_FIELDS,
    SECONDARY_FIELDS,
    EyeColor,
    FaceShape,
    Glasses,
    HairColor,
    HairStyle,
    SkinTone,
)
from lookalike.models.match import MatchQuality

FUZZY = MatchingConfig(use_fuzzy=True)


def _with(**update):
    return SAMPLE_RECORD.model_copy(update=update)


def test_identical_records_score_100():
    result = score(SAMPLE_RECORD, SAMPLE_RECORD)
    assert result.score == 100
    assert result.quality == MatchQuality.EXCELLENT
    assert result.breakdown.non_matching == []
    assert result.breakdown.primary_score == 100
    assert result.breakdown.secondary_score == 100


def test_symmetric():
    rng = np.random.default_rng(11)
    for _ in range(20):
        a, b = random_record(rng), random_record(rng)
        assert score(a, b).score == score(b, a).score
        assert score(a, b, FUZZY).score == score(b, a, FUZZY).score


def test_primary_difference_costs_ten():
    result = score(SAMPLE_RECORD, _with(skin_tone=SkinTone.FAIR1))
    assert result.score == 90
    assert result.breakdown.non_matching == ["skin_tone"]


def test_secondary_difference_costs_five():
    result = score(SAMPLE_RECORD, _with(eye_color=EyeColor.BLUE))
    assert result.score == 95
    assert result.breakdown.secondary_score == 88


def test_mixed_differences():
    other = _with(
        skin_tone=SkinTone.DARK2,
        face_shape=FaceShape.SQUARE,
        glasses=Glasses.NONE,
    )
    result = score(SAMPLE_RECORD, other)
    assert result.score == 75
    assert result.quality == MatchQuality.GOOD


def test_cosmetic_fields_ignored():
    assert score(SAMPLE_RECORD, RESTYLED_RECORD).score == 100
    fields = set(score(SAMPLE_RECORD, RESTYLED_RECORD).breakdown.matching)
    assert fields == set(PRIMARY_FIELDS) | set(SECONDARY_FIELDS)
    assert not fields & set(COSMETIC_FIELDS)


def test_score_bounds():
    rng = np.random.default_rng(3)
    for _ in range(20):
        s = score(random_record(rng), random_record(rng)).score
        assert 0 <= s <= 100


@pytest.mark.parametrize(
    "value,quality",
    [
        (100, MatchQuality.EXCELLENT),
        (85, MatchQuality.EXCELLENT),
        (84, MatchQuality.GOOD),
        (70, MatchQuality.GOOD),
        (69, MatchQuality.FAIR),
        (50, MatchQuality.FAIR),
        (49, MatchQuality.POOR),
        (0, MatchQuality.POOR),
    ],
)
def test_quality_bands(value, quality):
    assert MatchingConfig().quality_for(value) == quality


def test_custom_bands():
    config = MatchingConfig(quality_excellent=95)
    assert score(SAMPLE_RECORD, _with(skin_tone=SkinTone.FAIR1), config).quality == MatchQuality.GOOD


def test_strict_by_default_ignores_similarity():
    assert score(SAMPLE_RECORD, _with(skin_tone=SkinTone.OLIVE2)).score == 90


def test_fuzzy_gives_partial_credit():
    result = score(SAMPLE_RECORD, _with(skin_tone=SkinTone.OLIVE2), FUZZY)
    assert result.score == 97
    assert result.breakdown.partial == ["skin_tone"]


def test_fuzzy_unrelated_values_get_nothing():
    assert score(SAMPLE_RECORD, _with(hair_color=HairColor.BLONDE), FUZZY).score == 90


def test_fuzzy_hair_style_group():
    result = score(SAMPLE_RECORD, _with(hair_style=HairStyle.LONG_STRAIGHT), FUZZY)
    assert result.score == 97


def _other_value(field):
    current = getattr(SAMPLE_RECORD, field)
    return next(m for m in FIELD_ENUMS[field] if m != current)


@pytest.mark.parametrize("field", PRIMARY_FIELDS)
def test_each_primary_field_costs_ten(field):
    result = score(SAMPLE_RECORD, _with(**{field: _other_value(field)}))
    assert result.score == 90
    assert result.breakdown.non_matching == [field]


@pytest.mark.parametrize("field", SECONDARY_FIELDS)
def test_each_secondary_field_costs_five(field):
    result = score(SAMPLE_RECORD, _with(**{field: _other_value(field)}))
    assert result.score == 95
    assert result.breakdown.non_matching == [field]


@pytest.mark.parametrize("field", COSMETIC_FIELDS)
def test_each_cosmetic_field_costs_nothing(field):
    assert score(SAMPLE_RECORD, _with(**{field: _other_value(field)})).score == 100


@pytest.mark.parametrize(
    "overrides",
    [
        {"primary_weight": 0.9, "secondary_weight": 0.4},
        {"primary_weight": 0.5, "secondary_weight": 0.4},
        {"quality_excellent": 50, "quality_good": 70, "quality_fair": 85},
        {"quality_excellent": 70, "quality_good": 70},
        {"quality_excellent": 101},
        {"quality_fair": -1},
        {"threshold": 101},
        {"threshold": -5},
    ],
)
def test_invalid_config_rejected(overrides):
    with pytest.raises(ValueError):
        MatchingConfig(**overrides)


def test_weights_within_tolerance_accepted():
    config = MatchingConfig(primary_weight=0.605, secondary_weight=0.4)
    assert score(SAMPLE_RECORD, SAMPLE_RECORD, config).score == 100


def test_invalid_settings_rejected():
    settings = Settings(quality_excellent=50, quality_good=70, quality_fair=85)
    with pytest.raises(ValueError):
        MatchingConfig.from_settings(settings)
    with pytest.raises(ValueError):
        MatchingConfig.from_settings(Settings(match_threshold=150))


def test_default_settings_accepted():
    config = MatchingConfig.from_settings(Settings())
    assert config.threshold == 60
    assert config.quality_for(70) == MatchQuality.GOOD
