"""
Batch input loading for field records.
Loads a CSV of fields, normalizes column names, and checks required columns.
- Accepts common header variants (ph / pH / soil_ph, N / P / K, crop / Crop).
- Keeps rows with blank cells: those are reported per row by validation, not dropped here.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pandas as pd

from agropredict.config import FIELD_CONDITION_FIELDS, FIELD_DATA_FIELDS

log = logging.getLogger(__name__)

# Header variants -> canonical field names
COLUMN_ALIASES: dict[str, str] = {
    "crop": "crop_type", "crop type": "crop_type", "label": "crop_type",
    "ph": "soil_pH", "soil_ph": "soil_pH", "soil ph": "soil_pH",
    "n": "nitrogen", "p": "phosphorus", "k": "potassium",
    "area_acres": "area", "acres": "area",
    "temp": "temperature",
    "rain": "rainfall",
}

# Case-insensitive match on the canonical names themselves ("Season", "Rainfall")
CANONICAL_BY_LOWER: dict[str, str] = {name.lower(): name for name in FIELD_DATA_FIELDS}


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Strip header whitespace and map known variants to canonical field names."""
    cols = [str(c).strip() for c in df.columns]
    df = df.set_axis(cols, axis=1)
    renames = {}
    for col in df.columns:
        if col in FIELD_DATA_FIELDS:
            continue
        target = CANONICAL_BY_LOWER.get(col.lower()) or COLUMN_ALIASES.get(col.lower())
        if target and target not in df.columns and target not in renames.values():
            renames[col] = target
    if renames:
        df = df.rename(columns=renames)
    return df


def load_field_records(csv_path: Path, require_crop: bool = False) -> pd.DataFrame:
    """
    Load field records from CSV.
    Expects every field-condition column; crop_type is kept when present and
    required only when require_crop is True (single-crop batch).
    Extra columns (e.g. a field id) are preserved.
    """
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"Field records not found at {path}.")
    df = pd.read_csv(path)
    df = _normalize_columns(df)
    required = FIELD_DATA_FIELDS if require_crop else FIELD_CONDITION_FIELDS
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing field columns: {missing}. Available: {list(df.columns)}")
    log.info("Loaded %d field records from %s", len(df), path)
    return df


def iter_records(df: pd.DataFrame) -> Iterator[dict]:
    """Yield one plain dict per row; blank (NaN) cells become None so validation sees them."""
    clean = df.astype(object).where(df.notna(), None)
    for row in clean.to_dict("records"):
        yield row
