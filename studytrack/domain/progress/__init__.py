"""Progress analytics domain layer."""

from .entities import ProgressEntry, ProgressSegment, TrendReport, TrendSeries, WeekComparison
from .services import build_entries, build_segments, build_trend, compare_weeks

__all__ = [
    "ProgressEntry",
    "ProgressSegment",
    "TrendReport",
    "TrendSeries",
    "WeekComparison",
    "build_entries",
    "build_segments",
    "build_trend",
    "compare_weeks",
]
