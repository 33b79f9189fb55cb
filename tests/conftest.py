"""
Shared fixtures. Run from project root: python -m pytest tests -v
"""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def example_conditions() -> dict:
    """Field conditions used throughout the docs: loam in a mild spring."""
    return {
        "season": "spring",
        "area": 10,
        "soil_pH": 6.8,
        "nitrogen": 55,
        "phosphorus": 35,
        "potassium": 40,
        "rainfall": 320,
        "temperature": 22,
        "humidity": 65,
    }


@pytest.fixture
def example_field(example_conditions) -> dict:
    return {"crop_type": "wheat", **example_conditions}
