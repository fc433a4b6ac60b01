"""
Pytest tests for the Jeet-O-Meter renderer.

Geometry is tested directly. One test renders a real PNG through kaleido; the rest patch the export.
"""

from __future__ import annotations

import base64
import math
from unittest.mock import patch

import plotly.graph_objects as go
import pytest

from jeet_timer.analytics.hold_time import AnalysisSummary
from jeet_timer.render.speedometer import (
    BADGE_TEXT,
    CENTER_X,
    CENTER_Y,
    GAUGE_ZONES,
    RADIUS,
    arc_points,
    build_speedometer_figure,
    generate_speedometer,
    needle_angle,
    needle_ratio,
)

WALLET = "DstRVJCPsgZHLnW6mFcasHPdemYvFVbdm3LFZNv3Egrp"


def _texts(fig: go.Figure) -> list[str]:
    return [a.text for a in fig.layout.annotations]


def test_needle_ratio_is_logarithmic_and_clamped():
    assert needle_ratio(1) == 0
    assert needle_ratio(0) == 0
    assert needle_ratio(-100) == 0
    assert needle_ratio(86400) == pytest.approx(1)
    assert needle_ratio(10**9) == pytest.approx(1)
    assert needle_ratio(math.sqrt(86400)) == pytest.approx(0.5)


def test_needle_angle_sweeps_left_to_right():
    assert needle_angle(1) == pytest.approx(math.pi)
    assert needle_angle(86400) == pytest.approx(0)
    assert needle_angle(60) > needle_angle(3600) > needle_angle(43200)


def test_zones_cover_half_circle():
    assert [(z.start_deg, z.end_deg, z.label) for z in GAUGE_ZONES] == [
        (0, 72, "JEET"),
        (72, 126, "TRADER"),
        (126, 180, "DIAMOND"),
    ]


def test_arc_points_on_radius_from_left():
    points = arc_points(0, 180, steps=4)
    assert points[0] == pytest.approx((CENTER_X - RADIUS, CENTER_Y))
    assert points[2] == pytest.approx((CENTER_X, CENTER_Y + RADIUS))
    assert points[-1] == pytest.approx((CENTER_X + RADIUS, CENTER_Y))
    for x, y in points:
        assert math.hypot(x - CENTER_X, y - CENTER_Y) == pytest.approx(RADIUS)


def test_figure_has_zones_needle_and_stats():
    summary = AnalysisSummary(avg_hold_seconds=3661, fastest_jeet=90, total_trades_analyzed=4)
    fig = build_speedometer_figure(summary, WALLET)
    shape_types = [s.type for s in fig.layout.shapes]
    assert shape_types.count("path") == 3
    assert "line" in shape_types
    assert "circle" in shape_types
    texts = _texts(fig)
    assert "<b>JEET-O-METER</b>" in texts
    assert "<b>⏳ Patient Player</b>" in texts
    assert "Avg Hold: 1h 1m" in texts
    assert "Fastest Exit: 1m 30s" in texts
    assert "Trades: 4" in texts
    assert "DstR...Egrp" in texts
    assert all(BADGE_TEXT not in t for t in texts)


@pytest.mark.parametrize("avg, badge", [(0, False), (0.5, True), (59, True), (60, False)])
def test_jeet_certificate_badge(avg, badge):
    fig = build_speedometer_figure(AnalysisSummary(avg_hold_seconds=avg), WALLET)
    assert any(BADGE_TEXT in t for t in _texts(fig)) is badge


def test_short_and_empty_wallet_shown_in_full():
    assert "abcd1234" in _texts(build_speedometer_figure(AnalysisSummary(), "abcd1234"))
    assert "" in _texts(build_speedometer_figure(AnalysisSummary(), ""))


def test_needle_line_points_at_angle():
    fig = build_speedometer_figure(AnalysisSummary(avg_hold_seconds=86400), WALLET)
    needle = next(s for s in fig.layout.shapes if s.type == "line")
    assert needle.x0 == CENTER_X and needle.y0 == CENTER_Y
    assert needle.x1 > CENTER_X
    assert needle.y1 == pytest.approx(CENTER_Y)


def test_generate_speedometer_returns_png_data_uri():
    fake_png = b"\x89PNG\r\n\x1a\nfake"
    with patch.object(go.Figure, "to_image", return_value=fake_png) as to_image:
        uri = generate_speedometer(AnalysisSummary(avg_hold_seconds=10), WALLET)
    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == fake_png
    assert to_image.call_args.kwargs["format"] == "png"


def test_generate_speedometer_renders_real_png():
    summary = AnalysisSummary(avg_hold_seconds=45, fastest_jeet=10, total_trades_analyzed=2)
    uri = generate_speedometer(summary, WALLET)
    assert uri.startswith("data:image/png;base64,iVBOR")
    png = base64.b64decode(uri.split(",", 1)[1])
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
