"""Image rendering: the Jeet-O-Meter speedometer PNG."""

from jeet_timer.render.speedometer import build_speedometer_figure, generate_speedometer

__all__ = ["build_speedometer_figure", "generate_speedometer"]
