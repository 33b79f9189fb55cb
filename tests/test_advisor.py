"""
Validated entry points used by the UI: errors come back as values, not exceptions.
"""

import pytest

from agropredict import estimate_yield, recommend
from agropredict.config import CROP_TYPES
from agropredict.recommender import CropRecommendation
from agropredict.validation import ValidationError
from agropredict.yield_estimator import PredictionResult


def test_estimate_yield_valid(example_field):
    result = estimate_yield(example_field)
    assert isinstance(result, PredictionResult)
    assert result.predicted_yield == 23880
    assert result.accuracy_score == 0.79


def test_estimate_yield_missing_field(example_field):
    data = dict(example_field)
    data["rainfall"] = None
    assert estimate_yield(data) == ValidationError("rainfall")


def test_estimate_yield_accepts_form_strings(example_field):
    """Text inputs arrive as strings; numeric fields are coerced."""
    data = {k: str(v) for k, v in example_field.items()}
    assert estimate_yield(data).predicted_yield == 23880


def test_estimate_yield_non_numeric_raises(example_field):
    with pytest.raises(ValueError):
        estimate_yield(dict(example_field, area="ten"))


def test_recommend_valid(example_conditions):
    result = recommend(example_conditions)
    assert len(result) == len(CROP_TYPES)
    assert all(isinstance(r, CropRecommendation) for r in result)
    assert result[0].crop_type == "wheat"


def test_recommend_ignores_crop_type(example_field, example_conditions):
    assert recommend(example_field) == recommend(example_conditions)


def test_recommend_missing_field(example_conditions):
    data = dict(example_conditions, season="")
    assert recommend(data) == ValidationError("season")
