import streamlit as st
import sys
import pandas as pd
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.theme import load_css, page_header
from quickmed_streamlit.services.api_client import ApiError, fetch_compatibility
from quickmed_streamlit.utils.blood_group import compatibility_rows

st.set_page_config(page_title="Compatibility Matrix", page_icon="🤝", layout="wide")
load_css()
page_header("🤝 Blood Compatibility Matrix", "Rows are recipients, columns are donors")

try:
    data = fetch_compatibility()
except ApiError as e:
    st.error(f"Could not load the compatibility table: {e.message}")
    st.stop()

blood_types = data["blood_types"]
matrix = data["matrix"]

df = pd.DataFrame(compatibility_rows(blood_types, matrix)).set_index("Recipient")

def _highlight(cell: str) -> str:
    return "background-color: #dcfce7; color: #166534" if cell == "✓" else "color: #cbd5e1"

st.dataframe(df.style.map(_highlight), width="stretch")

c1, c2 = st.columns(2)
c1.info("**O-** is the universal donor")
c2.info("**AB+** is the universal recipient")

st.subheader("Check a pair")
d, r = st.columns(2)
donor = d.selectbox("Donor", blood_types)
recipient = r.selectbox("Recipient", blood_types, index=len(blood_types) - 1)
if matrix[recipient][donor]:
    st.success(f"{donor} can donate to {recipient}")
else:
    st.error(f"{donor} cannot donate to {recipient}")
