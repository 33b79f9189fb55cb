"""
Crop recommender: suitability rules, clamping, reasons and stable ranking.
"""

from dataclasses import replace

import pytest

from agropredict.config import CROP_TYPES
from agropredict.crop_params import CROP_PROFILES, get_profile
from agropredict.recommender import (
    GENERIC_REASON,
    FieldConditions,
    evaluate_crop,
    recommend_crops,
    score_suitability,
)
from agropredict.yield_estimator import calculate_yield


@pytest.fixture
def conditions(example_conditions) -> FieldConditions:
    return FieldConditions.from_mapping(example_conditions)


@pytest.fixture
def hostile(conditions) -> FieldConditions:
    """Nothing in range for any crop."""
    return replace(conditions, soil_pH=3.0, temperature=50, rainfall=2000,
                   humidity=5, nitrogen=0, phosphorus=0, potassium=0)


def test_profiles_cover_catalog():
    assert set(CROP_PROFILES) == set(CROP_TYPES)


def test_unknown_profile_raises():
    with pytest.raises(ValueError):
        get_profile("millet")


def test_returns_every_crop(conditions):
    recs = recommend_crops(conditions)
    assert sorted(r.crop_type for r in recs) == sorted(CROP_TYPES)


def test_example_ranking(conditions):
    """Rice loses on pH, rainfall and humidity; everyone else caps at 1.0 in catalog order."""
    recs = recommend_crops(conditions)
    assert [r.crop_type for r in recs] == [
        "wheat", "corn", "soybeans", "cotton", "barley", "sunflower", "rice",
    ]
    assert [r.suitability_score for r in recs[:6]] == [1.0] * 6
    assert recs[-1].suitability_score == 0.95


def test_rice_gets_ph_penalty(conditions):
    """pH 6.8 sits outside rice's 5.5-6.5 window: penalty, no pH reason."""
    score, reasons = score_suitability("rice", conditions)
    assert score == 0.95
    assert reasons == [
        "Temperature 22°C is excellent for growth",
        "Good phosphorus and potassium levels for root and plant health",
    ]
    in_window, _ = score_suitability("rice", replace(conditions, soil_pH=6.0))
    assert in_window == 1.0


def test_reasons_are_not_truncated(conditions):
    rec = evaluate_crop("wheat", conditions)
    assert rec.reasons == (
        "Soil pH 6.8 is ideal (optimal: 6-7.5)",
        "Temperature 22°C is excellent for growth",
        "Rainfall 320mm matches water requirements",
        "Humidity level supports healthy crop development",
        "Nitrogen levels adequate for medium requirement crop",
        "Good phosphorus and potassium levels for root and plant health",
    )


def test_generic_reason_when_nothing_matches(hostile):
    for rec in recommend_crops(hostile):
        assert rec.reasons == (GENERIC_REASON,)


def test_ties_keep_catalog_order(hostile):
    recs = recommend_crops(hostile)
    assert {r.suitability_score for r in recs} == {0.5}
    assert [r.crop_type for r in recs] == list(CROP_TYPES)


def test_sorted_descending(conditions):
    for changes in ({}, {"soil_pH": 5.6}, {"temperature": 13}, {"rainfall": 650, "humidity": 85}):
        scores = [r.suitability_score for r in recommend_crops(replace(conditions, **changes))]
        assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize("ph", [2.0, 5.6, 6.8, 8.5])
@pytest.mark.parametrize("temperature", [0, 14, 26, 40])
@pytest.mark.parametrize("rainfall", [50, 350, 650, 1200])
def test_scores_within_bounds(conditions, ph, temperature, rainfall):
    for rec in recommend_crops(replace(conditions, soil_pH=ph, temperature=temperature, rainfall=rainfall)):
        assert 0.10 <= rec.suitability_score <= 1.00


def test_rainfall_deficit_costs_more_than_excess(hostile):
    """Wheat wants 250-500 mm: 200 mm loses 0.10, 600 mm only 0.05."""
    dry, _ = score_suitability("wheat", replace(hostile, rainfall=200))
    wet, _ = score_suitability("wheat", replace(hostile, rainfall=600))
    assert dry == 0.45
    assert wet == 0.5


@pytest.mark.parametrize("crop,threshold", [
    ("soybeans", 32), ("sunflower", 32), ("wheat", 48), ("barley", 48), ("corn", 64), ("rice", 64),
])
def test_nitrogen_need_tiers(hostile, crop, threshold):
    reason = f"Nitrogen levels adequate for {get_profile(crop).nitrogen_need} requirement crop"
    _, met = score_suitability(crop, replace(hostile, nitrogen=threshold))
    _, short = score_suitability(crop, replace(hostile, nitrogen=threshold - 0.5))
    assert reason in met
    assert reason not in short


def test_nitrogen_shortfall_has_no_penalty(hostile):
    low, _ = score_suitability("corn", replace(hostile, nitrogen=0))
    high, _ = score_suitability("corn", replace(hostile, nitrogen=80))
    assert high == pytest.approx(low + 0.10)


@pytest.mark.parametrize("phosphorus,potassium,bonus", [(30, 30, True), (30, 29, False), (29, 30, False), (60, 60, True)])
def test_phosphorus_and_potassium_jointly(hostile, phosphorus, potassium, bonus):
    score, reasons = score_suitability("wheat", replace(hostile, phosphorus=phosphorus, potassium=potassium))
    assert score == (0.6 if bonus else 0.5)
    assert ("Good phosphorus and potassium levels for root and plant health" in reasons) == bonus


def test_predicted_yield_delegates_to_estimator(conditions):
    for rec in recommend_crops(conditions):
        assert rec.predicted_yield == calculate_yield(conditions.for_crop(rec.crop_type)).predicted_yield


def test_recommendation_to_dict(conditions):
    out = recommend_crops(conditions)[0].to_dict()
    assert out["crop_type"] == "wheat"
    assert isinstance(out["reasons"], list)


def test_reasons_keep_full_input_precision(conditions):
    _, reasons = score_suitability("wheat", replace(conditions, temperature=22.1234567, rainfall=320.5))
    assert "Temperature 22.1234567°C is excellent for growth" in reasons
    assert "Rainfall 320.5mm matches water requirements" in reasons
