"""
Grade Report Generator
grade_report/services/report_generator.py

Renders the self-contained HTML report for one student: status badge,
student details, results, a per-test score table and a Plotly score chart.
Consumes the pipeline outputs read-only.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from html import escape
from typing import List, Literal, Optional, Sequence

from grade_report import __version__
from grade_report.models.exam import ExamParameters
from grade_report.scoring.scoring_policy import ScoreOutcome
from grade_report.scoring.stats_engine import Statistics
from grade_report.scoring.utils import round_half_up, to_json_number
from grade_report.services.charts import (
    STATUS_COLORS,
    chart_html,
    score_labels,
    score_trend_chart,
)

logger = logging.getLogger(__name__)


REPORT_CSS = """
:root{
  --bg:#0b1220; --card:rgba(255,255,255,0.08); --card2:rgba(255,255,255,0.06);
  --border:rgba(255,255,255,0.12); --text:rgba(255,255,255,0.92);
  --muted:rgba(255,255,255,0.70); --muted2:rgba(255,255,255,0.55);
  --shadow:0 18px 40px rgba(0,0,0,0.35); --radius:18px;
  --pass:#22c55e; --fail:#ef4444; --accent:#60a5fa; --chip:rgba(96,165,250,0.18);
}
*{ box-sizing:border-box; }
body{
  margin:0; min-height:100vh; color:var(--text);
  font-family:ui-sans-serif, system-ui, -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
  background:
    radial-gradient(1200px 700px at 20% 10%, rgba(96,165,250,0.28), transparent 55%),
    radial-gradient(900px 600px at 90% 30%, rgba(34,197,94,0.18), transparent 55%),
    var(--bg);
}
.container{ max-width:1100px; margin:0 auto; padding:28px 18px 60px; }
header{ display:flex; align-items:flex-end; justify-content:space-between; gap:16px; margin-bottom:18px; }
h1{ margin:0; font-size:28px; }
.subtitle{ color:var(--muted); font-size:13px; margin-top:6px; }
.badge{
  display:inline-flex; align-items:center; gap:8px; padding:10px 12px;
  border-radius:999px; border:1px solid var(--border); background:rgba(255,255,255,0.06);
  box-shadow:var(--shadow); font-size:13px; color:var(--muted); white-space:nowrap;
}
.dot{ width:10px; height:10px; border-radius:999px; }
.grid{ display:grid; grid-template-columns:1.1fr 0.9fr; gap:16px; }
@media (max-width:880px){ .grid{ grid-template-columns:1fr; } header{ flex-direction:column; align-items:flex-start; } }
.card{
  background:linear-gradient(180deg, var(--card), var(--card2)); border:1px solid var(--border);
  border-radius:var(--radius); padding:16px; box-shadow:var(--shadow);
}
.card h2{ margin:0 0 10px; font-size:16px; font-weight:650; }
.kv{ display:grid; grid-template-columns:140px 1fr; row-gap:10px; column-gap:12px; font-size:14px; }
.k{ color:var(--muted2); }
.pill{
  display:inline-flex; align-items:center; gap:8px; padding:6px 10px; border-radius:999px;
  border:1px solid var(--border); background:rgba(255,255,255,0.05); font-size:12px; color:var(--muted);
}
.pill strong{ color:var(--text); }
.pill.accent{ background:var(--chip); }
.pill.pass{ background:rgba(34,197,94,0.16); }
.score-big{ display:flex; align-items:flex-end; justify-content:space-between; gap:12px; }
.score-big .num{ font-size:44px; font-weight:750; line-height:1; }
.score-big .meta{ display:flex; flex-direction:column; gap:8px; align-items:flex-end; }
.divider{ height:1px; background:rgba(255,255,255,0.10); margin:14px 0; }
table{ width:100%; border-collapse:collapse; border:1px solid rgba(255,255,255,0.10); }
thead th{ text-align:left; font-size:12px; padding:10px 12px; background:rgba(255,255,255,0.06); }
tbody td{ padding:10px 12px; border-bottom:1px solid rgba(255,255,255,0.08); font-size:13px; }
tr.best td{ background:rgba(34,197,94,0.10); }
tr.worst td{ background:rgba(239,68,68,0.10); }
.right{ text-align:right; }
.muted{ color:var(--muted); font-size:12px; }
footer{ margin-top:16px; color:var(--muted2); font-size:12px; display:flex; justify-content:space-between; flex-wrap:wrap; }
code{ background:rgba(255,255,255,0.06); padding:2px 6px; border-radius:8px; }
"""


def _fmt(value: Decimal) -> str:
    """Two decimals, halves rounded up."""
    return f"{round_half_up(value):.2f}"


def _plain(value: Decimal) -> str:
    return str(to_json_number(value))


def _band_label(score: Decimal) -> str:
    if score >= 90: return "Excellent"
    if score >= 75: return "Good"
    if score >= 60: return "Satisfactory"
    if score >= 40: return "Needs Improvement"
    return "Unsatisfactory"


def _score_rows(scores: Sequence[Decimal], stats: Statistics) -> List[str]:
    """Table rows; best and worst tests are highlighted unless all scores tie."""
    rows = []
    highlight = stats.min != stats.max
    for label, value in zip(score_labels(len(scores)), scores):
        css = ""
        if highlight and value == stats.max:
            css = ' class="best"'
        elif highlight and value == stats.min:
            css = ' class="worst"'
        rows.append(
            f'<tr{css}><td>{label}</td><td class="right"><b>{_plain(value)}</b></td>'
            f'<td>{_band_label(value)}</td></tr>'
        )
    return rows


# =====================================================================
# Single Student Report
# =====================================================================

def generate_student_report(
    params: ExamParameters,
    scores: Sequence[Decimal],
    stats: Statistics,
    outcome: ScoreOutcome,
    plotlyjs: Literal["inline", "cdn"] = "inline",
    chart_height: int = 260,
    generated_at: Optional[datetime] = None,
    app_name: str = "Exam Grade Report",
) -> str:
    """Generate the HTML report for a single student."""

    generated = (generated_at or datetime.now(timezone.utc)).isoformat(timespec="seconds")
    status = outcome.status.value
    color = STATUS_COLORS[status]
    bonus_text = f"Yes (+{_plain(params.bonus_points)})" if params.has_bonus else "No"

    chart = chart_html(
        score_trend_chart(scores, pass_threshold=params.pass_threshold, height=chart_height),
        plotlyjs=plotlyjs,
    )

    lines = []
    lines.append("<!doctype html>")
    lines.append('<html lang="en">')
    lines.append("<head>")
    lines.append('  <meta charset="utf-8" />')
    lines.append('  <meta name="viewport" content="width=device-width,initial-scale=1" />')
    lines.append(f"  <title>Student Grade Report - {escape(params.student_name)}</title>")
    lines.append(f"  <style>{REPORT_CSS}</style>")
    lines.append("</head>")
    lines.append("<body>")
    lines.append('<div class="container">')

    # ── Header + status badge ──
    lines.append("<header>")
    lines.append('  <div><h1>Student Grade Report</h1>')
    lines.append(f'  <div class="subtitle">Generated: {generated}</div></div>')
    lines.append('  <div class="badge">')
    lines.append(f'    <span class="dot" style="background:{color}"></span>')
    lines.append(f'    <span>Status: <b style="color:{color}">{status}</b></span>')
    lines.append("  </div>")
    lines.append("</header>")

    lines.append('<div class="grid">')

    # ── Student details + results ──
    lines.append('<div class="card">')
    lines.append("  <h2>Student Details</h2>")
    lines.append('  <div class="kv">')
    lines.append(f'    <div class="k">Name</div><div class="v">{escape(params.student_name)}</div>')
    lines.append(f'    <div class="k">Student ID</div><div class="v">{escape(params.student_id)}</div>')
    lines.append(f'    <div class="k">Exam Date</div><div class="v">{escape(params.exam_date)}</div>')
    lines.append(
        f'    <div class="k">Scores</div><div class="v">'
        f'<span class="pill accent"><strong>{stats.count}</strong> tests</span></div>'
    )
    lines.append("  </div>")
    lines.append('  <div class="divider"></div>')
    lines.append("  <h2>Results</h2>")
    lines.append('  <div class="score-big">')
    lines.append(
        f'    <div><div class="muted">Final Score</div>'
        f'<div class="num" style="color:{color}">{_fmt(outcome.final_score)}</div></div>'
    )
    lines.append('    <div class="meta">')
    lines.append(f'      <span class="pill">Average: <strong>{_fmt(stats.average)}</strong></span>')
    lines.append(f'      <span class="pill">Threshold: <strong>{_plain(params.pass_threshold)}</strong></span>')
    lines.append(
        f'      <span class="pill{" pass" if params.has_bonus else ""}">'
        f"Bonus: <strong>{bonus_text}</strong></span>"
    )
    lines.append("    </div>")
    lines.append("  </div>")
    lines.append('  <div class="divider"></div>')
    lines.append(
        f'  <div class="muted">Min: <b>{_plain(stats.min)}</b> · '
        f"Max: <b>{_plain(stats.max)}</b> · "
        f"Std Dev: <b>{_fmt(stats.standard_deviation)}</b></div>"
    )
    lines.append("</div>")

    # ── Chart + table ──
    lines.append('<div class="card">')
    lines.append("  <h2>Chart</h2>")
    lines.append('  <div class="muted">Score trend across tests</div>')
    lines.append(f"  {chart}")
    lines.append('  <div class="divider"></div>')
    lines.append("  <h2>Scores Table</h2>")
    lines.append("  <table>")
    lines.append('    <thead><tr><th>#</th><th class="right">Score</th><th>Band</th></tr></thead>')
    lines.append("    <tbody>")
    lines.extend(f"      {row}" for row in _score_rows(scores, stats))
    lines.append("    </tbody>")
    lines.append("  </table>")
    lines.append("</div>")

    lines.append("</div>")

    lines.append("<footer>")
    lines.append(
        "  <div>Artifacts: <code>report.html</code> · <code>run.log</code> · "
        "<code>summary.json</code></div>"
    )
    lines.append(f'  <div class="muted">{escape(params.student_name)} · {escape(params.student_id)}</div>')
    lines.append(f'  <div class="muted">{escape(app_name)} {__version__}</div>')
    lines.append("</footer>")
    lines.append("</div>")
    lines.append("</body>")
    lines.append("</html>")

    logger.debug("Rendered report for %s (%d scores)", params.student_id, stats.count)
    return "\n".join(lines)
