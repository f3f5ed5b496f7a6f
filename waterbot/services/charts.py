from __future__ import annotations

import io

import matplotlib

matplotlib.use("Agg")

from matplotlib.figure import Figure  # noqa: E402

from waterbot.services.stats import StatsReport  # noqa: E402

CHART_WIDTH_PX = 800
CHART_HEIGHT_PX = 400
CHART_DPI = 100

BAR_COLOR = (52 / 255, 152 / 255, 219 / 255, 0.8)
BAR_EDGE_COLOR = (52 / 255, 152 / 255, 219 / 255, 1.0)
GOAL_COLOR = (46 / 255, 204 / 255, 113 / 255, 1.0)


def render_intake_chart(report: StatsReport) -> bytes:
    """Render daily totals as a bar chart with the daily goal as a dashed line. Returns PNG bytes."""
    fig = Figure(figsize=(CHART_WIDTH_PX / CHART_DPI, CHART_HEIGHT_PX / CHART_DPI), dpi=CHART_DPI)
    ax = fig.add_subplot(1, 1, 1)

    labels = [d.day for d in report.days]
    amounts = [d.total for d in report.days]
    ax.bar(labels, amounts, color=BAR_COLOR, edgecolor=BAR_EDGE_COLOR, linewidth=1, label="Water Intake (ml)")
    ax.axhline(report.goal, color=GOAL_COLOR, linewidth=2, linestyle=(0, (5, 5)), label=f"Daily Goal ({report.goal}ml)")

    ax.set_title(f"Water Intake - {report.title}", fontsize=18)
    ax.set_xlabel("Date")
    ax.set_ylabel("Amount (ml)")
    ax.set_ylim(bottom=0)
    ax.legend()
    if len(labels) > 7:
        ax.tick_params(axis="x", labelrotation=45)
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format="png")
    return buf.getvalue()
