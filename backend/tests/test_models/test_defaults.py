"""Tests for default and random records."""

import numpy as np
import pytest
from pydantic import ValidationError

from tests.conftest import SAMPLE_RECORD

from lookalike.defaults import DEFAULT_RECORD, normalize_record, random_record, random_record_with
from lookalike.models.attributes import FacialHair, Glasses, HairStyle, SkinTone


def test_normalize_none_is_default():
    assert normalize_record(None) == DEFAULT_RECORD


def test_normalize_keeps_complete_record():
    assert normalize_record(SAMPLE_RECORD) is SAMPLE_RECORD


def test_normalize_fills_gaps():
    record = normalize_record({"skinTone": "dark2", "hair_style": "afro", "glasses": None})
    assert record.skin_tone == SkinTone.DARK2
    assert record.hair_style == HairStyle.AFRO
    assert record.glasses == DEFAULT_RECORD.glasses
    assert record.face_shape == DEFAULT_RECORD.face_shape


def test_normalize_ignores_unknown_keys():
    assert normalize_record({"favouriteColor": "teal"}) == DEFAULT_RECORD


def test_normalize_rejects_bad_values():
    with pytest.raises(ValidationError):
        normalize_record({"skinTone": "green"})


def test_random_record_is_repeatable():
    a = random_record(np.random.default_rng(42))
    b = random_record(np.random.default_rng(42))
    assert a == b


def test_random_facial_hair_color_follows_hair():
    rng = np.random.default_rng(5)
    for _ in range(40):
        record = random_record(rng)
        if record.facial_hair != FacialHair.NONE:
            assert record.facial_hair_color == record.hair_color
        else:
            assert record.facial_hair_color == DEFAULT_RECORD.facial_hair_color


def test_random_record_with_pins_fields():
    rng = np.random.default_rng(9)
    record = random_record_with({"glasses": "aviator", "skinTone": SkinTone.FAIR1}, rng)
    assert record.glasses == Glasses.AVIATOR
    assert record.skin_tone == SkinTone.FAIR1


def test_random_record_with_unknown_key():
    with pytest.raises(KeyError):
        random_record_with({"wings": "yes"})
