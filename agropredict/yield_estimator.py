"""
Yield estimator: predicted yield, accuracy score and optimization suggestions
for one crop on one field.

    predicted_yield = base_yield(crop) × area × (1 + adjustment)

The adjustment is the sum of independent per-input factors (pH, N, P, K,
rainfall, temperature, humidity) clamped to [ADJUSTMENT_MIN, ADJUSTMENT_MAX],
so predicted yield always lies between 0.5× and 2× of base_yield × area.

Inputs are assumed validated (see validation.py). Out-of-domain values are not
rejected here; NaN propagates through to the outputs.
"""

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass

from agropredict.config import (
    ACCURACY_REFERENCE,
    ADJUSTMENT_MAX,
    ADJUSTMENT_MIN,
    ADJUSTMENT_RATES,
    BASE_YIELDS,
    DEFAULT_BASE_YIELD,
    MAX_ACCURACY_PENALTY,
    NUMERIC_FIELDS,
    OPTIMAL_PH_RANGE,
    PH_BONUS,
    PH_PENALTY,
    YIELD_UNIT,
)
from agropredict.soil_health import get_optimization_suggestions


@dataclass(frozen=True)
class FieldData:
    crop_type: str
    season: str
    area: float          # acres
    soil_pH: float
    nitrogen: float      # kg/ha
    phosphorus: float    # kg/ha
    potassium: float     # kg/ha
    rainfall: float      # mm
    temperature: float   # °C
    humidity: float      # %

    @classmethod
    def from_mapping(cls, data: Mapping) -> "FieldData":
        """Build from a validated dict (form or CSV row); numeric fields go through float()."""
        return cls(
            crop_type=str(data["crop_type"]).strip().lower(),
            season=str(data["season"]),
            **{name: float(data[name]) for name in NUMERIC_FIELDS},
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PredictionResult:
    predicted_yield: int
    unit: str
    accuracy_score: float
    optimization_suggestions: tuple[str, ...]

    def to_dict(self) -> dict:
        out = asdict(self)
        out["optimization_suggestions"] = list(self.optimization_suggestions)
        return out


# ---------------------------------------------------------------------------
# Numeric helpers
# ---------------------------------------------------------------------------

def round_half_up(value: float, ndigits: int = 0):
    """
    Round halves away from zero for positive values (2.5 -> 3, 0.785 -> 0.79).
    Returns an int when ndigits == 0. NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    scale = 10 ** ndigits
    rounded = math.floor(value * scale + 0.5)
    return rounded if ndigits == 0 else rounded / scale


def clamp(value: float, low: float, high: float) -> float:
    """Clamp to [low, high]; NaN passes through."""
    if math.isnan(value):
        return value
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def get_base_yield(crop_type: str) -> float:
    return BASE_YIELDS.get(crop_type, DEFAULT_BASE_YIELD)


def adjustment_factors(field: FieldData) -> dict[str, float]:
    """Per-input contribution to the yield adjustment, before clamping."""
    low, high = OPTIMAL_PH_RANGE
    factors = {"soil_pH": PH_BONUS if low <= field.soil_pH <= high else -PH_PENALTY}
    for name, (threshold, rate_above, rate_below) in ADJUSTMENT_RATES.items():
        value = getattr(field, name)
        if value > threshold:
            factors[name] = (value - threshold) * rate_above
        elif rate_below:
            factors[name] = -(threshold - value) * rate_below
        else:
            factors[name] = 0.0
    return factors


def compute_adjustment(field: FieldData) -> float:
    """Sum of adjustment_factors clamped to [ADJUSTMENT_MIN, ADJUSTMENT_MAX]."""
    total = 0.0
    for contribution in adjustment_factors(field).values():
        total += contribution
    return clamp(total, ADJUSTMENT_MIN, ADJUSTMENT_MAX)


def compute_accuracy(field: FieldData) -> float:
    """
    Confidence in [0.70, 1.00], highest when pH, temperature and humidity sit at
    the reference point (pH 7, 20 °C, 60 %).
    """
    deviation = 0.0
    for name, reference in ACCURACY_REFERENCE.items():
        deviation += abs(getattr(field, name) - reference) / reference
    return round_half_up(1 - clamp(deviation, 0.0, MAX_ACCURACY_PENALTY), 2)


def calculate_yield(field: FieldData) -> PredictionResult:
    """
    Predict yield for a single, already-validated field.

    Parameters
    ----------
    field : FieldData
        Crop, area and soil/weather inputs.

    Returns
    -------
    PredictionResult with predicted_yield (kg, rounded half-up), unit,
    accuracy_score (2 decimals) and up to 5 optimization suggestions.
    """
    base_yield = get_base_yield(field.crop_type)
    adjustment = compute_adjustment(field)
    predicted  = round_half_up(base_yield * field.area * (1 + adjustment))

    return PredictionResult(
        predicted_yield=predicted,
        unit=YIELD_UNIT,
        accuracy_score=compute_accuracy(field),
        optimization_suggestions=tuple(get_optimization_suggestions(field)),
    )
