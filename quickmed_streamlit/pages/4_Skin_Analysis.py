import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.analysis_panel import trigger_section, upload_section
from quickmed_streamlit.core.panel_state import PanelStatus, get_panel
from quickmed_streamlit.core.theme import educational_banner, load_css, page_header, severity_badge
from quickmed_streamlit.services.api_client import analyze_skin
from quickmed_streamlit.utils.charts import render_confidence_gauge

st.set_page_config(page_title="Skin Analysis", page_icon="✋", layout="wide")
load_css()
page_header("✋ Skin Condition Check", "Educational look at a rash or lesion")
educational_banner()

panel = get_panel("skin")

col_upload, col_result = st.columns([1, 1], gap="large")

with col_upload:
    upload_section(panel, "skin", "Upload a clear, well-lit photo of the affected area")
    trigger_section(panel, "skin", "🔍 Analyze Skin", lambda p: analyze_skin(p.image, p.mime_type))

with col_result:
    if panel.status == PanelStatus.DONE:
        res = panel.result
        st.markdown(f"## {res['condition']}")
        st.markdown(severity_badge(res["severity"]), unsafe_allow_html=True)
        st.plotly_chart(render_confidence_gauge(res["probability"], "Probability"), width="stretch")
        st.write(res["description"])
        st.info(res["recommendation"])
    else:
        if panel.status == PanelStatus.ERROR:
            st.caption("The last analysis could not be completed.")
        st.info("Upload an image and run the analysis to see the assessment here.")
