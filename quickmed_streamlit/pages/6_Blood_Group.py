import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.analysis_panel import reset_panel, trigger_section, upload_section
from quickmed_streamlit.core.panel_state import PanelStatus, get_panel
from quickmed_streamlit.core.theme import educational_banner, load_css, page_header
from quickmed_streamlit.services.api_client import analyze_blood_slide
from quickmed_streamlit.utils.blood_group import display_antigens
from quickmed_streamlit.utils.charts import render_confidence_gauge

st.set_page_config(page_title="Blood Group", page_icon="🔬", layout="wide")
load_css()
page_header("🔬 Blood Group Slide Analyzer", "Probable ABO/Rh group from an agglutination slide test")
educational_banner()

panel = get_panel("blood_slide")

col_upload, col_result = st.columns([1, 1], gap="large")

with col_upload:
    upload_section(panel, "blood_slide", "Upload a photo of the typing slide",
                   "Anti-A, Anti-B and Anti-D wells should all be visible.")
    trigger_section(panel, "blood_slide", "🔬 Analyze Pattern",
                    lambda p: analyze_blood_slide(p.image, p.mime_type))

with col_result:
    if panel.status == PanelStatus.DONE:
        res = panel.result
        c1, c2 = st.columns(2)
        c1.metric("Blood Group", res["bloodGroup"])
        c2.metric("Antigens", display_antigens(res["bloodGroup"]))
        st.plotly_chart(render_confidence_gauge(res["confidence"]), width="stretch")
        st.markdown("**Observed Pattern**")
        st.write(res["agglutinationDetails"])
        st.markdown("**Antibodies**")
        st.write(res["antibodies"])
        st.info(res["recommendation"])
        if st.button("↺ Analyze another slide", key="blood_slide_again"):
            reset_panel(panel, "blood_slide")
            st.rerun()
    elif panel.status == PanelStatus.ERROR:
        st.error(f"Analysis failed: {panel.error}")
    else:
        st.info("Upload a slide image and run the analysis to see the blood group here.")
