"""
Advisory API used by the Streamlit app and the batch script.

estimate_yield(): single-crop prediction from a raw input dict.
recommend():      ranked suitability for every catalog crop from a raw input dict.

Both validate first and hand back the ValidationError value (not an exception)
when a required field is missing. Values present but non-numeric raise
ValueError from the float() coercion.
"""

import logging
from collections.abc import Mapping

from agropredict.recommender import CropRecommendation, FieldConditions, recommend_crops
from agropredict.validation import (
    ValidationError,
    validate_field_conditions,
    validate_field_data,
)
from agropredict.yield_estimator import FieldData, PredictionResult, calculate_yield

log = logging.getLogger(__name__)


def estimate_yield(data: Mapping) -> PredictionResult | ValidationError:
    """
    Parameters
    ----------
    data : Mapping
        crop_type, season, area, soil_pH, nitrogen, phosphorus, potassium,
        rainfall, temperature, humidity.

    Returns
    -------
    PredictionResult, or ValidationError naming the first missing field.
    """
    error = validate_field_data(data)
    if error is not None:
        log.debug("Yield estimate rejected: %s", error.message)
        return error
    field = FieldData.from_mapping(data)
    result = calculate_yield(field)
    log.debug(
        "Estimated %s on %.2f acres: %s %s (accuracy %.2f)",
        field.crop_type, field.area, result.predicted_yield, result.unit, result.accuracy_score,
    )
    return result


def recommend(data: Mapping) -> list[CropRecommendation] | ValidationError:
    """
    Parameters
    ----------
    data : Mapping
        season, area, soil_pH, nitrogen, phosphorus, potassium, rainfall,
        temperature, humidity. Any crop_type key is ignored.

    Returns
    -------
    All catalog crops sorted by suitability descending, or ValidationError.
    """
    error = validate_field_conditions(data)
    if error is not None:
        log.debug("Recommendation rejected: %s", error.message)
        return error
    recommendations = recommend_crops(FieldConditions.from_mapping(data))
    top = recommendations[0]
    log.debug("Top crop: %s (suitability %.2f)", top.crop_type, top.suitability_score)
    return recommendations
