"""
Batch scoring: CSV of field records → yield predictions or crop recommendations.
Run from project root:
    python run_batch.py --input data/raw/fields.csv
    python run_batch.py --input data/raw/fields.csv --mode recommend --figure reports/figures/suitability.png

Input columns: season, area, soil_pH, nitrogen, phosphorus, potassium, rainfall,
temperature, humidity (+ crop_type for --mode yield). Common header variants
such as ph / N / P / K are accepted.
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from agropredict.advisor import estimate_yield, recommend
from agropredict.config import (
    RECOMMEND_REPORT_FNAME,
    REPORTS_DIR,
    YIELD_REPORT_FNAME,
    ensure_dirs,
)
from agropredict.data_loader import iter_records, load_field_records
from agropredict.report import mean_suitability, plot_suitability_bar, prediction_row
from agropredict.validation import ValidationError

log = logging.getLogger("run_batch")


def score_yields(df: pd.DataFrame) -> pd.DataFrame:
    """One output row per input row: prediction columns, or an Error message."""
    rows = []
    for i, record in enumerate(iter_records(df)):
        try:
            result = estimate_yield(record)
        except ValueError as exc:
            log.warning("Row %d skipped: %s", i, exc)
            rows.append({**record, "Error": str(exc)})
            continue
        if isinstance(result, ValidationError):
            log.warning("Row %d skipped: %s", i, result.message)
            rows.append({**record, "Error": result.message})
            continue
        rows.append({**record, **prediction_row(result), "Error": None})
    return pd.DataFrame(rows)


def score_recommendations(df: pd.DataFrame) -> pd.DataFrame:
    """Long format: one row per (input row, crop), ranked within each input row."""
    rows = []
    for i, record in enumerate(iter_records(df)):
        try:
            result = recommend(record)
        except ValueError as exc:
            log.warning("Row %d skipped: %s", i, exc)
            continue
        if isinstance(result, ValidationError):
            log.warning("Row %d skipped: %s", i, result.message)
            continue
        for rank, rec in enumerate(result, 1):
            rows.append({
                "field_row":         i,
                "rank":              rank,
                "crop_type":         rec.crop_type,
                "suitability_score": rec.suitability_score,
                "predicted_yield":   rec.predicted_yield,
                "reasons":           " | ".join(rec.reasons),
            })
    return pd.DataFrame(
        rows,
        columns=["field_row", "rank", "crop_type", "suitability_score", "predicted_yield", "reasons"],
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    parser = argparse.ArgumentParser(
        description="Score a CSV of field records with the AgroPredict yield estimator or crop recommender."
    )
    parser.add_argument("--input",  required=True, type=Path, help="CSV of field records")
    parser.add_argument("--mode",   choices=["yield", "recommend"], default="yield")
    parser.add_argument("--output", type=Path, default=None, help="Output CSV (defaults to reports/)")
    parser.add_argument("--figure", type=Path, default=None, help="Suitability chart PNG (recommend mode)")
    args = parser.parse_args(argv)

    ensure_dirs()
    try:
        df = load_field_records(args.input, require_crop=(args.mode == "yield"))
    except (FileNotFoundError, ValueError) as exc:
        log.error("%s", exc)
        return 1

    if args.mode == "yield":
        out = score_yields(df)
        out_path = args.output or (REPORTS_DIR / YIELD_REPORT_FNAME)
        failed = int(out["Error"].notna().sum()) if "Error" in out.columns else 0
        log.info("Scored %d of %d fields.", len(out) - failed, len(out))
    else:
        out = score_recommendations(df)
        out_path = args.output or (REPORTS_DIR / RECOMMEND_REPORT_FNAME)
        log.info("Ranked %d crops across %d fields.", len(out), out["field_row"].nunique())
        if args.figure is not None and not out.empty:
            fig = plot_suitability_bar(
                mean_suitability(out),
                title="Mean crop suitability across fields",
                save_path=args.figure,
            )
            plt.close(fig)

    out.to_csv(out_path, index=False)
    log.info("Saved %s", out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
