import streamlit as st
import sys
from datetime import date
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.theme import load_css, page_header
from quickmed_streamlit.services.api_client import ApiError, calculate_due_date

st.set_page_config(page_title="Pregnancy Due Date", page_icon="🤰", layout="wide")
load_css()
page_header("🤰 Pregnancy Due Date", "Estimate the delivery date from the last menstrual period")

with st.form("due_date_form"):
    lmp = st.date_input("First Day of Last Menstrual Period (LMP)", value=None, max_value=date.today())
    submit = st.form_submit_button("Calculate Due Date", width="stretch")

if submit:
    if lmp is None:
        st.warning("Please select the LMP date.")
    else:
        try:
            st.session_state.due_date_result = calculate_due_date(lmp.isoformat())
        except ApiError as e:
            st.error(f"Could not calculate: {e.message}")

if "due_date_result" in st.session_state:
    res = st.session_state.due_date_result
    st.markdown('<div class="glass-card">', unsafe_allow_html=True)
    st.subheader(f"Estimated Due Date: {res['due_date_display']}")
    c1, c2, c3 = st.columns(3)
    c1.metric("Weeks Pregnant", res["weeks_pregnant"])
    c2.metric("Trimester", res["trimester"])
    c3.metric("Days Left", res["days_left"])
    st.progress(min(res["weeks_pregnant"], 40) / 40)
    st.caption("*Calculations are estimates based on a 280-day cycle. Consult a Gynecologist for accurate dating scans.")
    st.markdown('</div>', unsafe_allow_html=True)
