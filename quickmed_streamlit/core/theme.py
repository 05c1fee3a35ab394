import streamlit as st
from pathlib import Path

SEVERITY_COLORS = {
    "Normal": {"color": "#16a34a", "bg": "#f0fdf4", "emoji": "🟢"},
    "Negative": {"color": "#16a34a", "bg": "#f0fdf4", "emoji": "🟢"},
    "Mild": {"color": "#16a34a", "bg": "#f0fdf4", "emoji": "🟢"},
    "Trace": {"color": "#f59e0b", "bg": "#fffbeb", "emoji": "🟡"},
    "Moderate": {"color": "#f97316", "bg": "#fff7ed", "emoji": "🟠"},
    "High": {"color": "#ef4444", "bg": "#fef2f2", "emoji": "🔴"},
    "Severe": {"color": "#ef4444", "bg": "#fef2f2", "emoji": "🔴"},
    "Positive": {"color": "#2563eb", "bg": "#eff6ff", "emoji": "🔵"},
    "Invalid": {"color": "#64748b", "bg": "#f8fafc", "emoji": "⚪"},
    "Unknown": {"color": "#64748b", "bg": "#f8fafc", "emoji": "⚪"},
}


def load_css():
    css_path = Path(__file__).parent.parent / "assets" / "style.css"
    if css_path.exists():
        with open(css_path, encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def page_header(title: str, subtitle: str):
    st.markdown(f"""
    <div class="page-header">
        <h1>{title}</h1>
        <p>{subtitle}</p>
    </div>
    """, unsafe_allow_html=True)


def educational_banner():
    st.warning("⚠️ Educational Use Only - Not for Clinical Diagnosis")


def severity_badge(severity: str) -> str:
    cfg = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["Unknown"])
    return (
        f'<span style="'
        f"display:inline-block;padding:4px 12px;border-radius:16px;"
        f"background:{cfg['bg']};color:{cfg['color']};"
        f"font-weight:700;font-size:13px;border:1px solid {cfg['color']};"
        f'">{cfg["emoji"]} {severity}</span>'
    )
