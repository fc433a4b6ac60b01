"""
Jeet-O-Meter: half-circle gauge summarizing a wallet's hold times.

Drawn with plotly on an 800x600 canvas whose axes are pixel coordinates
(origin bottom-left), exported to PNG via kaleido. The needle position is
logarithmic: hold times span seconds to days, so avg is clamped to
[1, 86400] and mapped through log(avg) / log(86400). Gauge degrees run
0 (left, jeet) to 180 (right, diamond).
"""

from __future__ import annotations

import base64
import math
from dataclasses import dataclass

import plotly.graph_objects as go

from jeet_timer.analytics.hold_time import AnalysisSummary
from jeet_timer.analytics.jeet_levels import format_hold_time, get_jeet_level
from jeet_timer.utils.wallet_utils import truncate_wallet

WIDTH = 800
HEIGHT = 600
BG_COLOR = "#0f0f1a"
FONT_FAMILY = "sans-serif"

# Gauge geometry (pixels, y grows upward)
CENTER_X = WIDTH / 2
CENTER_Y = 280
RADIUS = 200
ARC_WIDTH = 30
NEEDLE_LENGTH = RADIUS - 40
HUB_RADIUS = 10
ARC_STEPS = 48

MIN_SECONDS = 1
MAX_SECONDS = 86400

RED = "#ff3b3b"
YELLOW = "#ffc107"
GREEN = "#4caf50"

BADGE_MAX_SECONDS = 60
BADGE_TEXT = "OFFICIAL JEET CERTIFICATE"


@dataclass(frozen=True)
class GaugeZone:
    start_deg: float
    end_deg: float
    color: str
    label: str


GAUGE_ZONES: tuple[GaugeZone, ...] = (
    GaugeZone(0, 72, RED, "JEET"),
    GaugeZone(72, 126, YELLOW, "TRADER"),
    GaugeZone(126, 180, GREEN, "DIAMOND"),
)

# Zone label anchors (x offset from center)
_ZONE_LABEL_X = {"JEET": -170, "TRADER": 0, "DIAMOND": 170}


def needle_ratio(avg_seconds: float) -> float:
    """Normalized needle position in [0, 1] on a log scale."""
    clamped = max(MIN_SECONDS, min(avg_seconds, MAX_SECONDS))
    return math.log(clamped) / math.log(MAX_SECONDS)


def gauge_radians(deg: float) -> float:
    """Gauge degrees (0 = jeet/left) to standard polar radians (pi = left)."""
    return math.pi - math.radians(deg)


def needle_angle(avg_seconds: float) -> float:
    """Needle angle in radians: pi at the jeet end, 0 at the diamond end."""
    return math.pi * (1 - needle_ratio(avg_seconds))


def needle_tip(avg_seconds: float, length: float = NEEDLE_LENGTH) -> tuple[float, float]:
    angle = needle_angle(avg_seconds)
    return CENTER_X + length * math.cos(angle), CENTER_Y + length * math.sin(angle)


def arc_points(
    start_deg: float,
    end_deg: float,
    radius: float = RADIUS,
    steps: int = ARC_STEPS,
) -> list[tuple[float, float]]:
    """Points along the gauge arc from start_deg to end_deg (inclusive)."""
    points = []
    for i in range(steps + 1):
        theta = gauge_radians(start_deg + (end_deg - start_deg) * i / steps)
        points.append((CENTER_X + radius * math.cos(theta), CENTER_Y + radius * math.sin(theta)))
    return points


def _svg_path(points: list[tuple[float, float]]) -> str:
    head, *rest = points
    return f"M {head[0]:.2f},{head[1]:.2f} " + " ".join(f"L {x:.2f},{y:.2f}" for x, y in rest)


def _text(fig: go.Figure, text: str, y: float, size: int, color: str, bold: bool = False, x: float = CENTER_X) -> None:
    fig.add_annotation(
        x=x,
        xref="x",
        yref="y",
        y=y,
        text=f"<b>{text}</b>" if bold else text,
        showarrow=False,
        font=dict(family=FONT_FAMILY, size=size, color=color),
        xanchor="center",
        yanchor="middle",
    )


def build_speedometer_figure(summary: AnalysisSummary, wallet: str) -> go.Figure:
    """Build the gauge figure (no I/O)."""
    avg = summary.avg_hold_seconds
    fig = go.Figure()

    for zone in GAUGE_ZONES:
        fig.add_shape(
            type="path",
            xref="x",
            yref="y",
            path=_svg_path(arc_points(zone.start_deg, zone.end_deg)),
            line=dict(color=zone.color, width=ARC_WIDTH),
        )
        _text(fig, zone.label, CENTER_Y + RADIUS + 20, 14, zone.color, bold=True, x=CENTER_X + _ZONE_LABEL_X[zone.label])

    tip_x, tip_y = needle_tip(avg)
    fig.add_shape(type="line", xref="x", yref="y", x0=CENTER_X, y0=CENTER_Y, x1=tip_x, y1=tip_y, line=dict(color="#ffffff", width=4))
    fig.add_shape(
        type="circle",
        xref="x",
        yref="y",
        x0=CENTER_X - HUB_RADIUS,
        y0=CENTER_Y - HUB_RADIUS,
        x1=CENTER_X + HUB_RADIUS,
        y1=CENTER_Y + HUB_RADIUS,
        fillcolor="#ffffff",
        line=dict(color="#ffffff", width=0),
    )

    level = get_jeet_level(avg)
    _text(fig, "JEET-O-METER", HEIGHT - 50, 36, "#ffffff", bold=True)
    _text(fig, level.label, CENTER_Y - 60, 28, "#ffffff", bold=True)
    _text(fig, f"Avg Hold: {format_hold_time(avg)}", CENTER_Y - 100, 20, "#cccccc")
    _text(fig, f"Fastest Exit: {format_hold_time(summary.fastest_jeet)}", CENTER_Y - 130, 20, "#cccccc")
    _text(fig, f"Trades: {summary.total_trades_analyzed}", CENTER_Y - 160, 20, "#cccccc")
    if 0 < avg < BADGE_MAX_SECONDS:
        _text(fig, BADGE_TEXT, CENTER_Y - 200, 22, RED, bold=True)
    _text(fig, truncate_wallet(wallet), 20, 16, "#888888")

    fig.update_layout(
        width=WIDTH,
        height=HEIGHT,
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor=BG_COLOR,
        plot_bgcolor=BG_COLOR,
        showlegend=False,
        xaxis=dict(range=[0, WIDTH], visible=False, fixedrange=True),
        yaxis=dict(range=[0, HEIGHT], visible=False, fixedrange=True),
    )
    return fig


def generate_speedometer(summary: AnalysisSummary, wallet: str) -> str:
    """Render the gauge to PNG and return it as a data URI."""
    fig = build_speedometer_figure(summary, wallet)
    png = fig.to_image(format="png", width=WIDTH, height=HEIGHT)
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
