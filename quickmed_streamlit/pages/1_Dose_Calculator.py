import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.theme import load_css, page_header
from quickmed_streamlit.services.api_client import ApiError, calculate_dose, fetch_medicines

st.set_page_config(page_title="Dose Calculator", page_icon="💊", layout="wide")
load_css()
page_header("💊 Pediatric Dose Calculator", "Weight-based syrup dosing for common fever and pain medicines")

try:
    medicines = fetch_medicines()
except ApiError as e:
    st.error(f"Could not load the medicine table: {e.message}")
    st.stop()

col_form, col_result = st.columns([1, 1], gap="large")

with col_form:
    st.subheader("Patient & Medicine")
    weight = st.slider("Patient Weight (kg)", 2, 100, 15)
    weight = st.number_input("Exact weight (kg)", min_value=0.5, max_value=150.0, value=float(weight), step=0.5)

    names = {m["id"]: m["name"] for m in medicines}
    med_id = st.selectbox("Medicine", list(names), format_func=names.get)
    medicine = next(m for m in medicines if m["id"] == med_id)

    st.caption("Strength on the bottle")
    c1, c2 = st.columns(2)
    # Keyed per medicine so switching medicine restores its default strength
    concentration_mg = c1.number_input("mg", min_value=1.0, value=float(medicine["default_concentration_mg"]),
                                       key=f"conc_mg_{med_id}")
    concentration_ml = c2.number_input("per ml", min_value=1.0, value=float(medicine["default_volume_ml"]),
                                       key=f"conc_ml_{med_id}")

with col_result:
    try:
        result = calculate_dose(weight, med_id, concentration_mg, concentration_ml)
    except ApiError as e:
        st.error(f"Invalid input: {e.message}")
        st.stop()

    st.subheader("Recommended Single Dose")
    st.metric("Volume", f"{result['volume_ml_min']:g} - {result['volume_ml_max']:g} ml")
    st.caption(f"({result['single_dose_mg_min']}mg - {result['single_dose_mg_max']}mg)")
    st.write(f"Every {medicine['frequency_hours']} hours · Max 4 times per 24h · Min 4-6h interval")

    if result.get("warning"):
        st.error(result["warning"])

    st.markdown(f"**{medicine['name']}**: {medicine['description']}")
    st.markdown(f"Source: [{medicine['citation']}]({medicine['link']})")

    st.caption("Copy Result")
    st.code(result["report"], language=None)
