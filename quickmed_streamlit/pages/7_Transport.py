import streamlit as st
import sys
import time
from pathlib import Path

project_root = str(Path(__file__).resolve().parent.parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickmed_streamlit.core.theme import load_css, page_header
from quickmed_streamlit.services.api_client import ApiError, fetch_transport_vehicles

st.set_page_config(page_title="Transport", page_icon="🚑", layout="wide")
load_css()
page_header("🚑 Ambulance Transport", "Request medical transport to a hospital")

# Simulated dispatch: no booking is sent anywhere
SEARCH_SECONDS = 2.5

if "booking_status" not in st.session_state:
    st.session_state.booking_status = "idle"

try:
    vehicles = fetch_transport_vehicles()
except ApiError as e:
    st.error(f"Could not load ambulance options: {e.message}")
    st.stop()

status = st.session_state.booking_status
col_form, col_status = st.columns([1, 1], gap="large")

with col_form:
    pickup = st.text_input("Pickup Location", placeholder="e.g. Thamel, Kathmandu", disabled=status != "idle")
    destination = st.text_input("Destination Hospital", disabled=status != "idle")
    labels = {v["id"]: f"{v['icon']} {v['name']} · {v['price']} · ETA {v['eta']}" for v in vehicles}
    vehicle_id = st.radio("Vehicle", list(labels), format_func=labels.get, index=None, disabled=status != "idle")
    if vehicle_id:
        st.caption(next(v["features"] for v in vehicles if v["id"] == vehicle_id))

    ready = bool(pickup and destination and vehicle_id)
    if st.button("Request Ambulance", disabled=not ready or status != "idle", width="stretch"):
        st.session_state.booking_status = "searching"
        st.session_state.booking = {"pickup": pickup, "destination": destination, "vehicle_id": vehicle_id}
        st.rerun()

with col_status:
    if status == "searching":
        with st.spinner("Finding nearest driver..."):
            time.sleep(SEARCH_SECONDS)
        st.session_state.booking_status = "confirmed"
        st.rerun()
    elif status == "confirmed":
        booking = st.session_state.booking
        vehicle = next(v for v in vehicles if v["id"] == booking["vehicle_id"])
        st.success(f"Ambulance confirmed: {vehicle['name']} arriving in {vehicle['eta']}")
        st.write(f"Pickup: {booking['pickup']}")
        st.write(f"Destination: {booking['destination']}")
        st.caption("For life-threatening emergencies call 102 directly.")
        if st.button("New Request"):
            st.session_state.booking_status = "idle"
            st.rerun()
    else:
        st.info("Fill in pickup, destination and vehicle to request an ambulance.")
