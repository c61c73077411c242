"""
services/charts.py — Plotly chart builders for the HTML report.
"""

import plotly.graph_objects as go
from decimal import Decimal
from typing import List, Literal, Optional, Sequence


STATUS_COLORS = {
    "PASS": "#22c55e",
    "FAIL": "#ef4444",
}

ACCENT = "#60a5fa"
AXIS_TEXT = "rgba(255,255,255,0.65)"
GRID = "rgba(255,255,255,0.06)"


def score_labels(count: int) -> List[str]:
    """Labels "Test 1", "Test 2", ... for ``count`` scores."""
    return [f"Test {i}" for i in range(1, count + 1)]


def score_trend_chart(
    scores: Sequence[Decimal],
    pass_threshold: Optional[Decimal] = None,
    height: int = 260,
) -> go.Figure:
    """Line chart of scores in input order, y-axis fixed to 0-100."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=score_labels(len(scores)), y=[float(s) for s in scores],
        name="Scores", mode="lines+markers",
        line=dict(color=ACCENT, width=2, shape="spline", smoothing=0.6),
        marker=dict(size=6), fill="tozeroy", fillcolor="rgba(96,165,250,0.18)",
    ))

    if pass_threshold is not None:
        fig.add_hline(
            y=float(pass_threshold), line_dash="dot", line_width=1,
            line_color="rgba(245,158,11,0.8)",
            annotation_text="Pass threshold", annotation_position="top left",
            annotation_font=dict(color=AXIS_TEXT, size=11),
        )

    fig.update_layout(
        height=height, margin=dict(l=40, r=16, t=16, b=32),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        legend=dict(font=dict(color="rgba(255,255,255,0.75)")),
        xaxis=dict(tickfont=dict(color=AXIS_TEXT), gridcolor=GRID),
        yaxis=dict(range=[0, 100], tickfont=dict(color=AXIS_TEXT), gridcolor=GRID),
    )
    return fig


def chart_html(
    fig: go.Figure,
    plotlyjs: Literal["inline", "cdn"] = "inline",
    div_id: str = "scoresChart",
) -> str:
    """Render ``fig`` as an embeddable <div>; plotly.js inline or from the CDN."""
    return fig.to_html(
        full_html=False,
        include_plotlyjs=True if plotlyjs == "inline" else "cdn",
        div_id=div_id,
        config={"displayModeBar": False, "responsive": True},
    )
