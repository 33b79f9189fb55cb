"""
Crop recommender: score every crop in the catalog against shared field
conditions and rank them by suitability.

Suitability starts at SUITABILITY_START and moves up or down per profile
match (pH, temperature, rainfall, humidity, nitrogen need, P+K), then is
clamped to [SUITABILITY_MIN, SUITABILITY_MAX] and rounded to 2 decimals.
Predicted yield per crop comes from the yield estimator with the crop bound in.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from agropredict.config import (
    CROP_TYPES,
    MIN_PHOSPHORUS,
    MIN_POTASSIUM,
    NITROGEN_NEED_FRACTION,
    NUMERIC_FIELDS,
    SUITABILITY_MAX,
    SUITABILITY_MIN,
    SUITABILITY_START,
    W_HUMIDITY_MATCH,
    W_NITROGEN_MATCH,
    W_NUTRIENT_MATCH,
    W_PH_MATCH,
    W_RAINFALL_DEFICIT,
    W_RAINFALL_EXCESS,
    W_RAINFALL_MATCH,
    W_TEMPERATURE_MATCH,
)
from agropredict.crop_params import NITROGEN_NEED_THRESHOLDS, get_profile, in_range
from agropredict.yield_estimator import FieldData, calculate_yield, clamp, round_half_up

GENERIC_REASON = "General conditions are suitable for this crop"


@dataclass(frozen=True)
class FieldConditions:
    season: str
    area: float
    soil_pH: float
    nitrogen: float
    phosphorus: float
    potassium: float
    rainfall: float
    temperature: float
    humidity: float

    @classmethod
    def from_mapping(cls, data: Mapping) -> "FieldConditions":
        return cls(
            season=str(data["season"]),
            **{name: float(data[name]) for name in NUMERIC_FIELDS},
        )

    def for_crop(self, crop_type: str) -> FieldData:
        return FieldData(crop_type=crop_type, **asdict(self))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CropRecommendation:
    crop_type: str
    predicted_yield: int
    suitability_score: float
    reasons: tuple[str, ...]   # full list; display layers show the first few

    def to_dict(self) -> dict:
        out = asdict(self)
        out["reasons"] = list(self.reasons)
        return out


def _fmt(value: float) -> str:
    """Shortest exact form for messages: 6.0 -> '6', 22.1234567 -> '22.1234567'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def score_suitability(crop_type: str, conditions: FieldConditions) -> tuple[float, list[str]]:
    """
    Suitability of one crop for the given conditions.
    Returns (score clamped and rounded to 2 decimals, reasons in rule order).
    """
    profile = get_profile(crop_type)
    score = SUITABILITY_START
    reasons = []

    if in_range(conditions.soil_pH, profile.ph):
        score += W_PH_MATCH
        low, high = profile.ph
        reasons.append(
            f"Soil pH {_fmt(conditions.soil_pH)} is ideal (optimal: {_fmt(low)}-{_fmt(high)})"
        )
    else:
        score -= W_PH_MATCH

    if in_range(conditions.temperature, profile.temperature):
        score += W_TEMPERATURE_MATCH
        reasons.append(f"Temperature {_fmt(conditions.temperature)}°C is excellent for growth")
    else:
        score -= W_TEMPERATURE_MATCH

    if in_range(conditions.rainfall, profile.rainfall):
        score += W_RAINFALL_MATCH
        reasons.append(f"Rainfall {_fmt(conditions.rainfall)}mm matches water requirements")
    elif conditions.rainfall < profile.rainfall[0]:
        score -= W_RAINFALL_DEFICIT
    else:
        score -= W_RAINFALL_EXCESS

    if in_range(conditions.humidity, profile.humidity):
        score += W_HUMIDITY_MATCH
        reasons.append("Humidity level supports healthy crop development")
    else:
        score -= W_HUMIDITY_MATCH

    required_n = NITROGEN_NEED_THRESHOLDS[profile.nitrogen_need]
    if conditions.nitrogen >= required_n * NITROGEN_NEED_FRACTION:
        score += W_NITROGEN_MATCH
        reasons.append(f"Nitrogen levels adequate for {profile.nitrogen_need} requirement crop")

    if conditions.phosphorus >= MIN_PHOSPHORUS and conditions.potassium >= MIN_POTASSIUM:
        score += W_NUTRIENT_MATCH
        reasons.append("Good phosphorus and potassium levels for root and plant health")

    score = round_half_up(clamp(score, SUITABILITY_MIN, SUITABILITY_MAX), 2)
    return score, reasons


def evaluate_crop(crop_type: str, conditions: FieldConditions) -> CropRecommendation:
    score, reasons = score_suitability(crop_type, conditions)
    prediction = calculate_yield(conditions.for_crop(crop_type))
    return CropRecommendation(
        crop_type=crop_type,
        predicted_yield=prediction.predicted_yield,
        suitability_score=score,
        reasons=tuple(reasons) if reasons else (GENERIC_REASON,),
    )


def recommend_crops(conditions: FieldConditions) -> list[CropRecommendation]:
    """
    Evaluate every catalog crop and sort by suitability descending.
    sorted() is stable, so equal scores keep catalog order.
    """
    recommendations = [evaluate_crop(crop, conditions) for crop in CROP_TYPES]
    return sorted(recommendations, key=lambda r: r.suitability_score, reverse=True)
