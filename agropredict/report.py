"""
Presentation helpers shared by the Streamlit app and the batch script:
display labels, pandas tables for download, and a suitability bar chart.
Reason lists are truncated here (for display) and nowhere in the core.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from agropredict.config import (
    ACCURACY_FLOOR_LABEL,
    ACCURACY_TIERS_PCT,
    DISPLAY_REASONS,
    SUITABILITY_FLOOR_LABEL,
    SUITABILITY_TIERS,
    YIELD_UNIT,
)
from agropredict.recommender import CropRecommendation
from agropredict.yield_estimator import PredictionResult, round_half_up

log = logging.getLogger(__name__)


def as_percent(score: float) -> int:
    return round_half_up(score * 100)


def suitability_label(score: float) -> str:
    for bound, label in SUITABILITY_TIERS:
        if score >= bound:
            return label
    return SUITABILITY_FLOOR_LABEL


def accuracy_label(score: float) -> str:
    pct = as_percent(score)
    for bound, label in ACCURACY_TIERS_PCT:
        if pct >= bound:
            return label
    return ACCURACY_FLOOR_LABEL


def prediction_row(result: PredictionResult) -> dict:
    return {
        "Predicted Yield":   result.predicted_yield,
        "Unit":              result.unit,
        "Accuracy (%)":      as_percent(result.accuracy_score),
        "Accuracy Level":    accuracy_label(result.accuracy_score),
        "Suggestions":       " | ".join(result.optimization_suggestions),
    }


def prediction_to_frame(result: PredictionResult) -> pd.DataFrame:
    """Single-row table for one yield prediction."""
    return pd.DataFrame([prediction_row(result)])


def recommendations_to_frame(
    recommendations: list[CropRecommendation],
    max_reasons: int | None = DISPLAY_REASONS,
) -> pd.DataFrame:
    """One row per crop in ranked order; reasons cut to max_reasons (None keeps all)."""
    rows = []
    for rank, rec in enumerate(recommendations, 1):
        reasons = rec.reasons if max_reasons is None else rec.reasons[:max_reasons]
        rows.append({
            "Rank":                         rank,
            "Crop":                         rec.crop_type.capitalize(),
            "Suitability (%)":              as_percent(rec.suitability_score),
            "Suitability Level":            suitability_label(rec.suitability_score),
            f"Predicted Yield ({YIELD_UNIT})": rec.predicted_yield,
            "Reasons":                      " | ".join(reasons),
        })
    return pd.DataFrame(rows)


def mean_suitability(frame: pd.DataFrame, crop_col: str = "crop_type", score_col: str = "suitability_score") -> dict[str, float]:
    """Average suitability per crop across many fields, highest first."""
    means = frame.groupby(crop_col, sort=False)[score_col].mean().sort_values(ascending=False, kind="stable")
    return {crop: round_half_up(float(v), 2) for crop, v in means.items()}


def plot_suitability_bar(
    scores: dict[str, float],
    title: str = "Crop suitability",
    save_path: Path | None = None,
):
    """
    Horizontal bar chart of suitability (0-1) per crop, best at the top.
    Returns the figure; also saves it when save_path is given. Caller closes it.
    """
    names = list(scores.keys())
    values = list(scores.values())
    y = np.arange(len(names))
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.barh(y, values, color="seagreen", alpha=0.8)
    ax.set_yticks(y)
    ax.set_yticklabels([n.capitalize() for n in names])
    ax.invert_yaxis()
    ax.set_xlim(0, 1)
    ax.set_xlabel("Suitability score")
    ax.set_title(title)
    fig.tight_layout()
    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight")
        log.info("Saved suitability chart to %s", save_path)
    return fig
