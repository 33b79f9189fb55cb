"""
Agronomic profile table used by the crop recommender.

Each crop has an optimal range for soil pH, temperature (°C), seasonal
rainfall (mm) and relative humidity (%), plus a nitrogen-need tier.
Ranges are inclusive at both ends.

The tables are read-only: behaviour is identical across crops, only the
numbers differ, so plain data is all that is needed here.
"""

from types import MappingProxyType
from typing import NamedTuple


class CropProfile(NamedTuple):
    ph: tuple[float, float]
    temperature: tuple[float, float]
    rainfall: tuple[float, float]
    humidity: tuple[float, float]
    nitrogen_need: str   # "low" | "medium" | "high"


# ──────────────────────────────────────────────────────────────────────────────
# Crop profiles: {crop_type: CropProfile}
# ──────────────────────────────────────────────────────────────────────────────
CROP_PROFILES: MappingProxyType = MappingProxyType({
    "wheat": CropProfile(
        ph=(6.0, 7.5), temperature=(15, 25), rainfall=(250, 500), humidity=(40, 70),
        nitrogen_need="medium",
    ),
    "corn": CropProfile(
        ph=(5.8, 7.0), temperature=(20, 30), rainfall=(400, 600), humidity=(50, 80),
        nitrogen_need="high",
    ),
    "rice": CropProfile(
        ph=(5.5, 6.5), temperature=(22, 32), rainfall=(500, 800), humidity=(70, 90),
        nitrogen_need="high",
    ),
    "soybeans": CropProfile(
        ph=(6.0, 7.0), temperature=(20, 30), rainfall=(300, 500), humidity=(50, 75),
        nitrogen_need="low",   # nitrogen-fixing
    ),
    "cotton": CropProfile(
        ph=(5.8, 8.0), temperature=(20, 35), rainfall=(400, 700), humidity=(40, 65),
        nitrogen_need="medium",
    ),
    "barley": CropProfile(
        ph=(6.0, 8.0), temperature=(12, 22), rainfall=(200, 400), humidity=(40, 65),
        nitrogen_need="medium",
    ),
    "sunflower": CropProfile(
        ph=(6.0, 7.5), temperature=(18, 28), rainfall=(300, 500), humidity=(40, 70),
        nitrogen_need="low",
    ),
})

# Nitrogen (kg/ha) each need tier calls for
NITROGEN_NEED_THRESHOLDS: MappingProxyType = MappingProxyType({
    "low":    40,
    "medium": 60,
    "high":   80,
})


def get_profile(crop: str) -> CropProfile:
    """Return the profile for a crop type; raises ValueError for crops outside the catalog."""
    key = (crop or "").strip().lower()
    if key not in CROP_PROFILES:
        raise ValueError(f"No profile defined for crop '{crop}'")
    return CROP_PROFILES[key]


def in_range(value: float, bounds: tuple[float, float]) -> bool:
    """Inclusive range check."""
    low, high = bounds
    return low <= value <= high
