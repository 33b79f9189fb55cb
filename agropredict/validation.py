"""
Required-field checks run before the yield estimator and crop recommender.

Validators return a ValidationError value naming the first missing field
(in declaration order) or None; they never raise.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from agropredict.config import FIELD_CONDITION_FIELDS, FIELD_DATA_FIELDS


@dataclass(frozen=True)
class ValidationError:
    field: str

    @property
    def message(self) -> str:
        return f"Missing field: {self.field}"

    def __str__(self) -> str:
        return self.message


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _first_missing(data: Mapping, fields: tuple[str, ...]) -> ValidationError | None:
    for field in fields:
        if _is_missing(data.get(field)):
            return ValidationError(field)
    return None


def validate_field_data(data: Mapping) -> ValidationError | None:
    """Single-crop input: crop_type plus every field condition."""
    return _first_missing(data, FIELD_DATA_FIELDS)


def validate_field_conditions(data: Mapping) -> ValidationError | None:
    """Multi-crop input: every field condition, no crop_type."""
    return _first_missing(data, FIELD_CONDITION_FIELDS)
