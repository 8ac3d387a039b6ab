"""
Placeholder trend policy.

A first-run dashboard has no tracked history to chart. Instead of an empty
chart, presentation may opt into illustrative demo series. The policy is kept
apart from build_trend so real aggregation never returns invented numbers;
placeholder reports are flagged with ``is_placeholder=True``.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Final

from studytrack.domain.progress.entities import ProgressEntry, TrendReport
from studytrack.domain.progress.services.trend_aggregator import MonthlyBuckets, build_trend

PLACEHOLDER_MONTHS: Final = 5


@dataclass(frozen=True)
class PlaceholderSeries:
    label: str
    variant: str
    minutes: tuple[int, ...]


PLACEHOLDER_SERIES: Final[tuple[PlaceholderSeries, ...]] = (
    PlaceholderSeries("Capstone Project", "teal", (420, 520, 600, 720, 810)),
    PlaceholderSeries("Language Sprint", "stone", (180, 220, 280, 315, 360)),
    PlaceholderSeries("Foundations Refresh", "violet", (240, 260, 320, 280, 360)),
)


def trailing_month_keys(now: datetime, count: int, tz: tzinfo = UTC) -> list[str]:
    """``YYYY-MM`` keys of the count months ending with now's month, ascending."""
    local = now.astimezone(tz)
    index = local.year * 12 + local.month - 1
    keys = []
    for offset in range(count - 1, -1, -1):
        year, month = divmod(index - offset, 12)
        keys.append(f"{year:04d}-{month + 1:02d}")
    return keys


def build_placeholder_trend(now: datetime, tz: tzinfo = UTC) -> TrendReport:
    """Illustrative demo trend over the five months ending at now."""
    keys = trailing_month_keys(now, PLACEHOLDER_MONTHS, tz)
    buckets = MonthlyBuckets()
    for demo in PLACEHOLDER_SERIES:
        for key, minutes in zip(keys, demo.minutes, strict=True):
            buckets.add(demo.label, demo.variant, key, minutes)
    return buckets.to_report(is_placeholder=True)


def build_trend_or_placeholder(
    entries: Iterable[ProgressEntry], now: datetime, tz: tzinfo = UTC
) -> TrendReport:
    """Real trend when any month has data, otherwise the placeholder trend."""
    report = build_trend(entries, tz)
    if not report.is_empty:
        return report
    return build_placeholder_trend(now, tz)
