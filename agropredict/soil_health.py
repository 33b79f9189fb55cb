"""
Soil and climate optimization suggestions for a single-crop prediction.
- SUGGESTION_RULES: ordered battery of (name, predicate, message) checked against
  the raw field inputs (not the adjusted yield factors).
- get_optimization_suggestions: fires every rule in order, pads with a generic
  message when fewer than MIN_SUGGESTIONS fire, and caps the list at MAX_SUGGESTIONS.
"""

from collections.abc import Callable
from typing import NamedTuple

from agropredict.config import MAX_SUGGESTIONS, MIN_SUGGESTIONS, OPTIMAL_PH_RANGE

MAINTAIN_PRACTICES = "Maintain current farming practices for optimal results."


class SuggestionRule(NamedTuple):
    name: str
    applies: Callable   # field -> bool
    message: str


def _crop_is(crop: str, field) -> bool:
    return field.crop_type == crop


# Evaluation order is the display order.
SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        "low_rainfall",
        lambda f: f.rainfall < 200,
        "Recommend drip irrigation to maintain soil moisture.",
    ),
    SuggestionRule(
        "low_nitrogen",
        lambda f: f.nitrogen < 40,
        "Apply 50 kg/ha of nitrogen fertilizer before planting.",
    ),
    SuggestionRule(
        "acidic_soil",
        lambda f: f.soil_pH < OPTIMAL_PH_RANGE[0],
        "Apply agricultural lime to raise soil pH to optimal range (6.5-7.5).",
    ),
    SuggestionRule(
        "alkaline_soil",
        lambda f: f.soil_pH > OPTIMAL_PH_RANGE[1],
        "Apply sulfur to lower soil pH to optimal range (6.5-7.5).",
    ),
    SuggestionRule(
        "heat_stress",
        lambda f: f.temperature > 30,
        "Use shade nets or adjust planting date to cooler period.",
    ),
    SuggestionRule(
        "wheat_drought",
        lambda f: _crop_is("wheat", f) and f.rainfall < 250,
        "Consider switching to millet or sorghum for better drought resilience.",
    ),
    SuggestionRule(
        "soybeans_acidic",
        lambda f: _crop_is("soybeans", f) and f.soil_pH < 6.0,
        "Soybeans prefer pH 6.0-7.0. Apply lime to raise soil pH for better nodulation.",
    ),
    SuggestionRule(
        "cotton_cold",
        lambda f: _crop_is("cotton", f) and f.temperature < 15,
        "Cotton requires warm temperatures (20-30°C). Consider delayed planting or row covers.",
    ),
    SuggestionRule(
        "barley_lodging",
        lambda f: _crop_is("barley", f) and f.nitrogen > 80,
        "Excessive nitrogen can cause lodging in barley. Reduce to 60-80 kg/ha.",
    ),
    SuggestionRule(
        "sunflower_humidity",
        lambda f: _crop_is("sunflower", f) and f.humidity > 80,
        "High humidity increases disease risk in sunflowers. Ensure good field drainage.",
    ),
    SuggestionRule(
        "low_phosphorus",
        lambda f: f.phosphorus < 25,
        "Increase phosphorus application to improve root development.",
    ),
    SuggestionRule(
        "low_potassium",
        lambda f: f.potassium < 30,
        "Add potassium fertilizer to enhance plant disease resistance.",
    ),
)


def fired_rules(field) -> list[SuggestionRule]:
    """Rules whose predicate holds for this field, in evaluation order."""
    return [rule for rule in SUGGESTION_RULES if rule.applies(field)]


def get_optimization_suggestions(field) -> list[str]:
    """
    field: a FieldData (anything exposing crop_type and the numeric inputs).
    Returns at most MAX_SUGGESTIONS human-readable suggestions.
    """
    suggestions = [rule.message for rule in fired_rules(field)]
    if len(suggestions) < MIN_SUGGESTIONS:
        suggestions.append(MAINTAIN_PRACTICES)
    return suggestions[:MAX_SUGGESTIONS]
