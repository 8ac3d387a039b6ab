from .progress_entry import PlanRef, ProgressEntry, ProgressTag
from .segment import (
    FULL_CIRCLE_DEGREES,
    NEUTRAL_VARIANT,
    AngleSpan,
    ProgressSegment,
    SegmentBreakdown,
)
from .trend import TrendReport, TrendSeries
from .week_comparison import ProgressSummary, WeekComparison

__all__ = [
    "FULL_CIRCLE_DEGREES",
    "NEUTRAL_VARIANT",
    "AngleSpan",
    "PlanRef",
    "ProgressEntry",
    "ProgressSegment",
    "ProgressSummary",
    "ProgressTag",
    "SegmentBreakdown",
    "TrendReport",
    "TrendSeries",
    "WeekComparison",
]
