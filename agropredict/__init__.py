"""
AgroPredict — crop yield estimation and crop recommendation core package.
"""

from agropredict.advisor import estimate_yield, recommend
from agropredict.config import CROP_TYPES, SEASONS, YIELD_UNIT, ensure_dirs
from agropredict.recommender import CropRecommendation, FieldConditions, recommend_crops
from agropredict.validation import (
    ValidationError,
    validate_field_conditions,
    validate_field_data,
)
from agropredict.yield_estimator import FieldData, PredictionResult, calculate_yield

__all__ = [
    "estimate_yield",
    "recommend",
    "calculate_yield",
    "recommend_crops",
    "validate_field_data",
    "validate_field_conditions",
    "FieldData",
    "FieldConditions",
    "PredictionResult",
    "CropRecommendation",
    "ValidationError",
    "CROP_TYPES",
    "SEASONS",
    "YIELD_UNIT",
    "ensure_dirs",
]
