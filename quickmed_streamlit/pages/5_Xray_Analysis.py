import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.analysis_panel import trigger_section, upload_section
from quickmed_streamlit.core.panel_state import PanelStatus, get_panel
from quickmed_streamlit.core.theme import educational_banner, load_css, page_header
from quickmed_streamlit.services.api_client import analyze_xray

st.set_page_config(page_title="X-Ray Analysis", page_icon="🩻", layout="wide")
load_css()
page_header("🩻 X-Ray Reader", "Body part identification and obvious abnormalities")
educational_banner()

panel = get_panel("xray")

col_upload, col_result = st.columns([1, 1], gap="large")

with col_upload:
    upload_section(panel, "xray", "Upload an X-ray image")
    trigger_section(panel, "xray", "🔍 Analyze X-Ray", lambda p: analyze_xray(p.image, p.mime_type))

with col_result:
    if panel.status == PanelStatus.DONE:
        res = panel.result
        st.markdown(f"## {res['bodyPart']}")
        if res["abnormalityDetected"]:
            st.error("Abnormality detected")
        else:
            st.success("No obvious abnormality")
        st.markdown("**Findings**")
        st.write(res["findings"])
        st.markdown("**Impression**")
        st.write(res["impression"])
        st.info(res["advice"])
    else:
        if panel.status == PanelStatus.ERROR:
            st.caption("The last analysis could not be completed.")
        st.info("Upload an image and run the analysis to see the report here.")
