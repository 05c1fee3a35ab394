import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.theme import load_css
from quickmed_streamlit.core.views import VIEW_CONFIG, feature_views
from quickmed_streamlit.services.api_client import check_health, fetch_disclaimer

st.set_page_config(
    page_title="QuickMed Nepal",
    page_icon="🩺",
    layout="wide"
)

load_css()

header_html = """
<div class="header-container">
    <svg class="ecg-line" viewBox="0 0 160 60">
      <polyline class="ecg-path"
        points="0,30 20,30 30,10 45,50 60,30 80,30 90,15 110,45 125,30 160,30" />
    </svg>
    <div class="brand-text">
        QuickMed Nepal
    </div>
</div>
"""
st.markdown(header_html, unsafe_allow_html=True)

st.markdown("#### Quick health tools for families and frontline workers")

health = check_health()
if health.get("status") == "unreachable":
    st.error("Backend API is unreachable. Start it with `uvicorn quickmed.main:app`.")
elif not health.get("gateway_credential"):
    st.info("AI analysis is running without an API key: blood and urine panels return placeholder results, "
            "skin and X-ray analysis are unavailable.")

views = feature_views()
for start in range(0, len(views), 3):
    cols = st.columns(3)
    for col, view in zip(cols, views[start:start + 3]):
        cfg = VIEW_CONFIG[view]
        with col:
            with st.container(border=True):
                st.markdown(f"### {cfg['icon']} {cfg['label']}")
                st.caption(cfg["summary"])
                st.page_link(cfg["page"], label=f"Open {cfg['label']}", icon=cfg["icon"])

disclaimer = fetch_disclaimer()
if disclaimer:
    st.warning(disclaimer)
