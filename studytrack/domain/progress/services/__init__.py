from .entry_builder import build_entries
from .placeholder_trend import (
    PLACEHOLDER_SERIES,
    build_placeholder_trend,
    build_trend_or_placeholder,
)
from .range_filters import (
    DatePredicate,
    RangeName,
    WeekWindow,
    current_week,
    is_same_day,
    previous_week,
    range_filter,
    same_day,
)
from .segment_aggregator import build_angle_spans, build_segments
from .tag_colorer import PROGRESS_TAG_VARIANTS, TagColorer, cyclic_colorer, default_colorer
from .trend_aggregator import build_trend, month_key
from .week_comparator import compare_weeks, percent_change, summarize_minutes

__all__ = [
    "PLACEHOLDER_SERIES",
    "PROGRESS_TAG_VARIANTS",
    "DatePredicate",
    "RangeName",
    "TagColorer",
    "WeekWindow",
    "build_angle_spans",
    "build_entries",
    "build_placeholder_trend",
    "build_segments",
    "build_trend",
    "build_trend_or_placeholder",
    "compare_weeks",
    "current_week",
    "cyclic_colorer",
    "default_colorer",
    "is_same_day",
    "month_key",
    "percent_change",
    "previous_week",
    "range_filter",
    "same_day",
    "summarize_minutes",
]
