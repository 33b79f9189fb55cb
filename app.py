"""
Streamlit UI — AgroPredict.
Yield prediction: one crop + field data → predicted yield, accuracy and optimization suggestions.
Crop recommendations: field conditions only → all 7 crops ranked by suitability.
Run with: streamlit run app.py
"""

import sys
import time
from pathlib import Path

import matplotlib.pyplot as plt
import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from agropredict.advisor import estimate_yield, recommend
from agropredict.config import (
    ANALYSIS_DELAY_S,
    CROP_TYPES,
    DEFAULT_FIELD_CONDITIONS,
    DISPLAY_REASONS,
    SEASONS,
    YIELD_UNIT,
)
from agropredict.report import (
    accuracy_label,
    as_percent,
    plot_suitability_bar,
    prediction_to_frame,
    recommendations_to_frame,
    suitability_label,
)
from agropredict.validation import ValidationError


def _label_colour(label: str) -> str:
    return {
        "Excellent": "green", "Good": "orange", "Moderate": "orange",
        "Fair": "red", "Low": "red",
    }.get(label, "grey")


# ---------------------------------------------------------------------------
# Light agricultural theme
# ---------------------------------------------------------------------------

def apply_theme():
    st.markdown("""
    <style>
    .stApp { background: linear-gradient(180deg, #f6faf3 0%, #eef5e9 50%, #f6faf3 100%); }
    .main .block-container { padding-top: 1.5rem; }
    h1, h2, h3 { color: #2d5a2d !important; }
    div[data-testid="stExpander"] { background: #ffffff; border-radius: 8px; border: 1px solid #cfe0c8; }
    .stButton > button, .stFormSubmitButton > button { background: #2d5a2d !important; color: white !important; border-radius: 8px; }
    .stButton > button:hover, .stFormSubmitButton > button:hover { background: #3d7a3d !important; }
    </style>
    """, unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Input widgets (shared by both tabs)
# ---------------------------------------------------------------------------

def _condition_inputs(prefix: str, defaults: dict | None = None) -> dict:
    """Season, area, soil and weather inputs. Empty numeric boxes come back as None."""
    d = defaults or {}
    season_default = d.get("season")
    out = {}
    out["season"] = st.selectbox(
        "Season",
        options=list(SEASONS),
        index=SEASONS.index(season_default) if season_default in SEASONS else None,
        placeholder="Select season",
        format_func=str.capitalize,
        key=f"{prefix}_season",
    )

    c1, c2 = st.columns(2)
    out["area"] = c1.number_input(
        "Field area (acres)", min_value=0.0, step=0.1, value=d.get("area"),
        placeholder="e.g., 10", key=f"{prefix}_area",
    )
    out["soil_pH"] = c2.number_input(
        "Soil pH", min_value=0.0, max_value=14.0, step=0.1, value=d.get("soil_pH"),
        placeholder="e.g., 6.8", key=f"{prefix}_ph",
    )

    st.markdown("**Soil nutrients (kg/ha)**")
    n1, n2, n3 = st.columns(3)
    out["nitrogen"] = n1.number_input(
        "Nitrogen (N)", min_value=0.0, value=d.get("nitrogen"),
        placeholder="e.g., 55", key=f"{prefix}_n",
    )
    out["phosphorus"] = n2.number_input(
        "Phosphorus (P)", min_value=0.0, value=d.get("phosphorus"),
        placeholder="e.g., 35", key=f"{prefix}_p",
    )
    out["potassium"] = n3.number_input(
        "Potassium (K)", min_value=0.0, value=d.get("potassium"),
        placeholder="e.g., 40", key=f"{prefix}_k",
    )

    st.markdown("**Weather**")
    w1, w2, w3 = st.columns(3)
    out["rainfall"] = w1.number_input(
        "Rainfall (mm)", min_value=0.0, value=d.get("rainfall"),
        placeholder="e.g., 320", key=f"{prefix}_rain",
    )
    out["temperature"] = w2.number_input(
        "Temperature (°C)", step=0.1, value=d.get("temperature"),
        placeholder="e.g., 22", key=f"{prefix}_temp",
    )
    out["humidity"] = w3.number_input(
        "Humidity (%)", min_value=0.0, max_value=100.0, value=d.get("humidity"),
        placeholder="e.g., 65", key=f"{prefix}_hum",
    )
    return out


# ---------------------------------------------------------------------------
# Yield prediction tab
# ---------------------------------------------------------------------------

def render_yield_tab():
    st.header("Field data input")
    st.caption("Enter your field parameters for accurate yield prediction")

    with st.form("yield_form"):
        crop_type = st.selectbox(
            "Crop type",
            options=list(CROP_TYPES),
            index=None,
            placeholder="Select crop",
            format_func=str.capitalize,
        )
        data = {"crop_type": crop_type, **_condition_inputs("yield")}
        submitted = st.form_submit_button("Predict yield", use_container_width=True)

    if submitted:
        with st.spinner("Analyzing field data..."):
            time.sleep(ANALYSIS_DELAY_S)
            result = estimate_yield(data)
        if isinstance(result, ValidationError):
            st.error(f"Validation error: {result.message}")
            st.session_state.pop("yield_result", None)
        else:
            st.session_state["yield_result"] = result
            st.toast("Prediction complete")

    result = st.session_state.get("yield_result")
    if result is None:
        st.info("Fill in the form and click **Predict yield**.")
        return

    pct = as_percent(result.accuracy_score)
    label = accuracy_label(result.accuracy_score)

    st.subheader("Prediction results")
    c1, c2 = st.columns(2)
    c1.metric("Predicted yield", f"{result.predicted_yield:,} {result.unit}")
    c2.metric("Accuracy score", f"{pct}%")
    st.markdown(f"Model confidence: :{_label_colour(label)}[**{label}**]")
    st.progress(min(max(pct, 0), 100) / 100)
    st.caption("Based on optimal growing conditions alignment")

    st.subheader("Optimization recommendations")
    for suggestion in result.optimization_suggestions:
        st.markdown(f"- {suggestion}")

    report_df = prediction_to_frame(result)
    st.download_button(
        label="Download CSV",
        data=report_df.to_csv(index=False).encode("utf-8"),
        file_name="yield_prediction.csv",
        mime="text/csv",
        key="yield_download",
    )


# ---------------------------------------------------------------------------
# Crop recommendation tab
# ---------------------------------------------------------------------------

def render_recommend_tab():
    st.header("Field conditions")
    st.caption("Enter your field conditions to see which crops will thrive best")

    with st.form("recommend_form"):
        data = _condition_inputs("rec", DEFAULT_FIELD_CONDITIONS)
        submitted = st.form_submit_button("Get recommendations", use_container_width=True)

    if submitted:
        with st.spinner("Scoring crops..."):
            time.sleep(ANALYSIS_DELAY_S)
            result = recommend(data)
        if isinstance(result, ValidationError):
            st.error(f"Validation error: {result.message}")
            st.session_state.pop("recommendations", None)
        else:
            st.session_state["recommendations"] = result
            top = result[0]
            st.toast(
                f"Analysis complete. Top recommendation: {top.crop_type} with "
                f"{as_percent(top.suitability_score)}% suitability"
            )

    recommendations = st.session_state.get("recommendations")
    if recommendations is None:
        st.info("No recommendations yet. Fill in your field conditions to discover which crops suit your land.")
        return

    st.subheader("Crop recommendations")
    medals = {1: "🥇", 2: "🥈", 3: "🥉"}
    for rank, rec in enumerate(recommendations, 1):
        pct = as_percent(rec.suitability_score)
        label = suitability_label(rec.suitability_score)
        header = f"{medals.get(rank, '#' + str(rank))}  {rec.crop_type.capitalize()}  |  Suitability: {pct}%  |  {label}"
        with st.expander(header, expanded=(rank == 1)):
            st.markdown(f"Predicted yield: **{rec.predicted_yield:,} {YIELD_UNIT}**")
            st.markdown(f"Suitability: :{_label_colour(label)}[**{label}**]")
            st.progress(pct / 100)
            for reason in rec.reasons[:DISPLAY_REASONS]:
                st.markdown(f"- {reason}")

    scores = {rec.crop_type: rec.suitability_score for rec in recommendations}
    fig = plot_suitability_bar(scores)
    st.pyplot(fig)
    plt.close(fig)

    report_df = recommendations_to_frame(recommendations)
    st.dataframe(report_df, use_container_width=True)
    st.download_button(
        label="Download CSV",
        data=report_df.to_csv(index=False).encode("utf-8"),
        file_name="crop_recommendations.csv",
        mime="text/csv",
        key="recommend_download",
    )


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main():
    st.set_page_config(
        page_title="AgroPredict",
        page_icon="🌾",
        layout="wide",
    )
    apply_theme()

    st.title("🌾 AgroPredict")
    st.caption("7 crop types • Suitability analysis • Yield predictions")

    yield_tab, recommend_tab = st.tabs(["Yield prediction", "Crop recommendations"])
    with yield_tab:
        render_yield_tab()
    with recommend_tab:
        render_recommend_tab()

    st.divider()
    st.caption("AgroPredict — data-driven decisions for farmers. Estimates only; no agronomic guarantee.")


if __name__ == "__main__":
    main()
