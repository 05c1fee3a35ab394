import plotly.graph_objects as go

def render_confidence_gauge(value: float, title: str = "Confidence"):
    value = max(0.0, min(100.0, float(value or 0)))

    if value > 75: bar_color = "#16A34A"
    elif value > 50: bar_color = "#F59E0B"
    elif value > 25: bar_color = "#F97316"
    else: bar_color = "#DC2626"

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=value,
        number={'suffix': "%", 'font': {'size': 24, 'color': '#1e3a8a'}},
        title={'text': title, 'font': {'size': 16, 'color': '#64748b'}},
        gauge={
            'axis': {'range': [0, 100], 'tickwidth': 1, 'tickcolor': "#cbd5e1"},
            'bar': {'color': bar_color},
            'bgcolor': "white",
            'borderwidth': 2,
            'bordercolor': "#f1f5f9",
            'steps': [
                {'range': [0, 25], 'color': "rgba(220, 38, 38, 0.12)"},
                {'range': [25, 50], 'color': "rgba(249, 115, 22, 0.12)"},
                {'range': [50, 75], 'color': "rgba(245, 158, 11, 0.12)"},
                {'range': [75, 100], 'color': "rgba(22, 163, 74, 0.12)"},
            ],
        }
    ))

    fig.update_layout(
        height=240,
        margin=dict(l=20, r=20, t=40, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font={'family': "Inter, sans-serif"}
    )
    return fig
