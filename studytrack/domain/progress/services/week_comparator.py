"""Week-over-week comparison and rolling minute totals."""

from collections.abc import Iterable
from datetime import UTC, datetime, tzinfo

from studytrack.domain.progress.entities import ProgressEntry, ProgressSummary, WeekComparison
from studytrack.domain.progress.services.range_filters import WeekWindow, is_same_day


def percent_change(current: int, previous: int) -> float:
    """
    Relative change from previous to current, in percent.

    A previous value of 0 yields 100 when anything was tracked now, else 0.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def compare_weeks(
    entries: Iterable[ProgressEntry], now: datetime, tz: tzinfo = UTC
) -> WeekComparison:
    """
    Compare minutes tracked in the week containing now with the week before.

    Entries are placed by reference_date; undated entries count for neither.
    """
    current_window = WeekWindow.containing(now, tz)
    previous_window = current_window.previous()

    current = 0
    previous = 0
    for entry in entries:
        if current_window.contains(entry.reference_date):
            current += entry.minutes
        elif previous_window.contains(entry.reference_date):
            previous += entry.minutes

    return WeekComparison(
        current_week_minutes=current,
        previous_week_minutes=previous,
        diff=current - previous,
        percent_change=percent_change(current, previous),
    )


def summarize_minutes(
    entries: Iterable[ProgressEntry], now: datetime, tz: tzinfo = UTC
) -> ProgressSummary:
    """Minutes tracked today, this week and last week."""
    current_window = WeekWindow.containing(now, tz)
    previous_window = current_window.previous()

    today = week = last_week = 0
    for entry in entries:
        if entry.minutes <= 0 or entry.reference_date is None:
            continue
        if is_same_day(entry.reference_date, now, tz):
            today += entry.minutes
        if current_window.contains(entry.reference_date):
            week += entry.minutes
        if previous_window.contains(entry.reference_date):
            last_week += entry.minutes

    return ProgressSummary(today_minutes=today, week_minutes=week, last_week_minutes=last_week)
