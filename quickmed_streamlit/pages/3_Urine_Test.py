import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.analysis_panel import trigger_section, upload_section
from quickmed_streamlit.core.panel_state import PanelStatus, get_panel
from quickmed_streamlit.core.theme import educational_banner, load_css, page_header, severity_badge
from quickmed_streamlit.services.api_client import analyze_urine

st.set_page_config(page_title="Urine Test", page_icon="🧪", layout="wide")
load_css()
page_header("🧪 Urine & Pregnancy Test Reader", "Read a urine dipstick, lab report or HCG strip")
educational_banner()

modes = {"standard": "Urine Dipstick / Report", "pregnancy": "HCG Pregnancy Strip"}
mode = st.radio("Test type", list(modes), format_func=modes.get, horizontal=True)

# One panel per mode so switching tests does not mix results
panel = get_panel(f"urine_{mode}")

col_upload, col_result = st.columns([1, 1], gap="large")

with col_upload:
    upload_section(panel, f"urine_{mode}", "Upload a photo of the strip",
                   "For HCG strips make sure both the C and T windows are visible.")
    trigger_section(panel, f"urine_{mode}", "🔍 Analyze Strip",
                    lambda p: analyze_urine(p.image, p.mime_type, mode))

with col_result:
    if panel.status == PanelStatus.DONE:
        findings = panel.result
        if mode == "pregnancy":
            item = findings[0]
            st.markdown(f"## {item['finding']}")
            st.markdown(severity_badge(item["severity"]), unsafe_allow_html=True)
            st.write(item["interpretation"])
            st.info(item["advice"])
        else:
            for item in findings:
                with st.container(border=True):
                    st.markdown(f"**{item['parameter']}**: {item['finding']}  "
                                f"{severity_badge(item['severity'])}", unsafe_allow_html=True)
                    st.write(item["interpretation"])
                    st.caption(item["advice"])
    elif panel.status == PanelStatus.ERROR:
        st.error(f"Analysis failed: {panel.error}")
    else:
        st.info("Upload an image and run the analysis to see the findings here.")
