"""
Analytics: hold-time analysis, jeet classification, and the request pipeline.

Modules: hold_time, jeet_levels, analytics_pipeline.
Use run_jeet_analysis(wallet, settings) for the full fetch -> analyze -> render flow.
"""

from jeet_timer.analytics.analytics_pipeline import run_jeet_analysis
from jeet_timer.analytics.hold_time import AnalysisSummary, TradePair, analyze_hold_times
from jeet_timer.analytics.jeet_levels import JeetLevel, format_hold_time, get_jeet_level

__all__ = [
    "AnalysisSummary",
    "JeetLevel",
    "TradePair",
    "analyze_hold_times",
    "format_hold_time",
    "get_jeet_level",
    "run_jeet_analysis",
]
