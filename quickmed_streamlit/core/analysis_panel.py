import logging
from typing import Any, Callable

import streamlit as st

from quickmed_streamlit.core.panel_state import PanelState
from quickmed_streamlit.services.api_client import ApiError

logger = logging.getLogger("AnalysisPanel")


def reset_panel(panel: PanelState, key: str):
    panel.reset()
    generation_key = f"{key}_upload_generation"
    st.session_state[generation_key] = st.session_state.get(generation_key, 0) + 1


def upload_section(panel: PanelState, key: str, label: str, help_text: str = ""):
    # Bumping the generation gives the uploader a fresh key, which clears it
    generation_key = f"{key}_upload_generation"
    generation = st.session_state.setdefault(generation_key, 0)

    uploaded = st.file_uploader(label, type=["png", "jpg", "jpeg", "webp"], key=f"{key}_upload_{generation}",
                                help=help_text or None, disabled=panel.busy)
    if uploaded is not None and not panel.busy:
        panel.attach(uploaded.getvalue(), uploaded.type, uploaded.name)

    if panel.image is not None:
        st.image(panel.image, caption=panel.image_name, width="stretch")
        if st.button("✖ Remove image", key=f"{key}_reset", disabled=panel.busy):
            reset_panel(panel, key)
            st.rerun()


def trigger_section(panel: PanelState, key: str, button_label: str, call: Callable[[PanelState], Any]):
    """Analyze button plus the request itself.

    Clicking moves the panel to LOADING and reruns, so the button is drawn
    disabled while the request is outstanding.
    """
    if st.button(button_label, key=f"{key}_analyze", disabled=not panel.can_analyze, width="stretch"):
        panel.begin()
        st.rerun()

    if panel.busy:
        with st.spinner("Running Analysis..."):
            try:
                panel.finish(call(panel))
            except ApiError as e:
                logger.error(f"{key} analysis failed: {e.message}")
                panel.fail(e.message)
            except Exception as e:
                # Anything left in LOADING would be requested again on the next rerun
                logger.exception(f"{key} analysis crashed: {e}")
                panel.fail(str(e) or type(e).__name__)
        st.rerun()
