import streamlit as st
import sys
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.theme import load_css, page_header
from quickmed_streamlit.services.api_client import ApiError, fetch_emergency_contacts

st.set_page_config(page_title="Emergency", page_icon="🚨", layout="wide")
load_css()
page_header("🚨 Emergency Contacts", "Nepal emergency and poison information numbers")

try:
    contacts = fetch_emergency_contacts()
except ApiError as e:
    st.error(f"Could not load contacts: {e.message}")
    contacts = {}

for contact in contacts.get("emergency", []):
    with st.container(border=True):
        st.markdown(f"### 📞 {contact['name']}")
        st.markdown(f"[{contact['number']}](tel:{contact['number']})")

poison = contacts.get("poison_information", [])
if poison:
    st.markdown("#### Poison Information")
    for contact in poison:
        st.write(f"{contact['name']}: {contact['number']}")
