"""
Configuration and constants for AgroPredict.
Centralizes paths, the crop catalog, base yields, scoring thresholds and display tiers.
"""

from pathlib import Path
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Base paths (project root = parent of 'agropredict')
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
REPORTS_DIR = PROJECT_ROOT / "reports"
FIGURES_DIR = REPORTS_DIR / "figures"

# ---------------------------------------------------------------------------
# Crop catalog (order matters: ties in suitability keep this order)
# ---------------------------------------------------------------------------
CROP_TYPES: tuple[str, ...] = (
    "wheat", "corn", "rice", "soybeans", "cotton", "barley", "sunflower",
)
SEASONS: tuple[str, ...] = ("spring", "summer", "autumn", "winter", "monsoon")

# Base yield per crop in kg/acre, before condition adjustments
BASE_YIELDS: MappingProxyType = MappingProxyType({
    "wheat":     2000,
    "corn":      2500,
    "rice":      1800,
    "soybeans":  1200,
    "cotton":     800,
    "barley":    1900,
    "sunflower": 1100,
})
DEFAULT_BASE_YIELD = 2000   # crops missing from BASE_YIELDS
YIELD_UNIT = "kg/acre"

# ---------------------------------------------------------------------------
# Required inputs, in the order validation checks them
# ---------------------------------------------------------------------------
FIELD_CONDITION_FIELDS: tuple[str, ...] = (
    "season", "area", "soil_pH", "nitrogen",
    "phosphorus", "potassium", "rainfall", "temperature", "humidity",
)
FIELD_DATA_FIELDS: tuple[str, ...] = ("crop_type",) + FIELD_CONDITION_FIELDS
NUMERIC_FIELDS: tuple[str, ...] = FIELD_CONDITION_FIELDS[1:]

# ---------------------------------------------------------------------------
# Yield adjustment: predicted = base × area × (1 + clamp(sum of factors))
# Each factor is (threshold, rate above, rate below); rates are per unit.
# ---------------------------------------------------------------------------
OPTIMAL_PH_RANGE = (6.5, 7.5)
PH_BONUS   = 0.10
PH_PENALTY = 0.05

ADJUSTMENT_RATES: MappingProxyType = MappingProxyType({
    "nitrogen":    (50,  0.002, 0.001),
    "phosphorus":  (30,  0.001, 0.0),     # no penalty below
    "potassium":   (30,  0.001, 0.0),     # no penalty below
    "rainfall":    (300, 0.003, 0.002),
    "temperature": (20,  0.002, 0.003),
    "humidity":    (60,  0.001, 0.002),
})
ADJUSTMENT_MIN = -0.5
ADJUSTMENT_MAX = 1.0

# ---------------------------------------------------------------------------
# Accuracy score: 1 - min(cap, sum of relative deviations from the reference)
# ---------------------------------------------------------------------------
ACCURACY_REFERENCE: MappingProxyType = MappingProxyType({
    "soil_pH":     7.0,
    "temperature": 20.0,
    "humidity":    60.0,
})
MAX_ACCURACY_PENALTY = 0.3   # accuracy never drops below 0.70

# ---------------------------------------------------------------------------
# Suggestions / reasons
# ---------------------------------------------------------------------------
MAX_SUGGESTIONS = 5
MIN_SUGGESTIONS = 3   # below this, a generic "maintain practices" line is added
DISPLAY_REASONS = 3   # UI shows only the first N recommendation reasons

# ---------------------------------------------------------------------------
# Suitability scoring (crop recommender)
# ---------------------------------------------------------------------------
SUITABILITY_START = 1.0
SUITABILITY_MIN   = 0.1
SUITABILITY_MAX   = 1.0

W_PH_MATCH            = 0.15
W_TEMPERATURE_MATCH   = 0.20
W_RAINFALL_MATCH      = 0.15
W_RAINFALL_DEFICIT    = 0.10   # below range
W_RAINFALL_EXCESS     = 0.05   # above range: excess hurts less than deficit
W_HUMIDITY_MATCH      = 0.10
W_NITROGEN_MATCH      = 0.10
W_NUTRIENT_MATCH      = 0.10

NITROGEN_NEED_FRACTION = 0.8   # actual N must reach 80% of the tier threshold
MIN_PHOSPHORUS = 30
MIN_POTASSIUM  = 30

# ---------------------------------------------------------------------------
# Display tiers: (lower bound, label), checked top-down
# ---------------------------------------------------------------------------
SUITABILITY_TIERS: list[tuple[float, str]] = [
    (0.8, "Excellent"),
    (0.6, "Good"),
    (0.4, "Moderate"),
]
SUITABILITY_FLOOR_LABEL = "Low"

ACCURACY_TIERS_PCT: list[tuple[int, str]] = [
    (90, "Excellent"),
    (75, "Good"),
]
ACCURACY_FLOOR_LABEL = "Fair"

# ---------------------------------------------------------------------------
# UI defaults
# ---------------------------------------------------------------------------
DEFAULT_FIELD_CONDITIONS: dict[str, float | str] = {
    "season":      "spring",
    "area":        10.0,
    "soil_pH":     6.8,
    "nitrogen":    55.0,
    "phosphorus":  35.0,
    "potassium":   40.0,
    "rainfall":    320.0,
    "temperature": 22.0,
    "humidity":    65.0,
}
ANALYSIS_DELAY_S = 0.8   # presentation-only pause before computing

# ---------------------------------------------------------------------------
# Batch output file names (written to reports/)
# ---------------------------------------------------------------------------
YIELD_REPORT_FNAME     = "yield_predictions.csv"
RECOMMEND_REPORT_FNAME = "crop_recommendations.csv"


# ---------------------------------------------------------------------------
# Ensure directories exist (called when the batch script / app starts)
# ---------------------------------------------------------------------------
def ensure_dirs():
    RAW_DATA_DIR.mkdir(parents=True, exist_ok=True)
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
    FIGURES_DIR.mkdir(parents=True, exist_ok=True)
