"""
Date-window predicates anchored at a reference instant.

All calendar math happens in one reporting timezone, fixed per deployment.
Weeks start on Sunday (day offset 0) and windows are half-open
``[start, end)``. A missing date never matches.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Final, Literal, Self

DatePredicate = Callable[[datetime | None], bool]
RangeName = Literal["today", "week", "last_week"]

WEEK: Final = timedelta(days=7)


def start_of_day(moment: datetime, tz: tzinfo = UTC) -> datetime:
    """Midnight of moment's calendar day in tz."""
    local = moment.astimezone(tz)
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def _week_day_offset(moment: datetime) -> int:
    """Zero-based day of week with Sunday as 0."""
    return (moment.weekday() + 1) % 7


def is_same_day(reference: datetime | None, now: datetime, tz: tzinfo = UTC) -> bool:
    """Whether reference falls on now's calendar day in tz."""
    if reference is None:
        return False
    return reference.astimezone(tz).date() == now.astimezone(tz).date()


@dataclass(frozen=True)
class WeekWindow:
    """Half-open seven-day window [start, end)."""

    start: datetime
    end: datetime

    @classmethod
    def containing(cls, now: datetime, tz: tzinfo = UTC) -> Self:
        """The week (Sunday-start, in tz) that contains now."""
        day_start = start_of_day(now, tz)
        week_start = day_start - timedelta(days=_week_day_offset(day_start))
        return cls(start=week_start, end=week_start + WEEK)

    def previous(self) -> "WeekWindow":
        return WeekWindow(start=self.start - WEEK, end=self.start)

    def next(self) -> "WeekWindow":
        return WeekWindow(start=self.end, end=self.end + WEEK)

    def contains(self, reference: datetime | None) -> bool:
        if reference is None:
            return False
        return self.start <= reference < self.end


def same_day(now: datetime, tz: tzinfo = UTC) -> DatePredicate:
    """Predicate matching dates on now's calendar day."""

    def predicate(reference: datetime | None) -> bool:
        return is_same_day(reference, now, tz)

    return predicate


def current_week(now: datetime, tz: tzinfo = UTC) -> DatePredicate:
    """Predicate matching dates in the week containing now."""
    return WeekWindow.containing(now, tz).contains


def previous_week(now: datetime, tz: tzinfo = UTC) -> DatePredicate:
    """Predicate matching dates in the week before the one containing now."""
    return WeekWindow.containing(now, tz).previous().contains


_RANGE_FACTORIES: Final[dict[str, Callable[[datetime, tzinfo], DatePredicate]]] = {
    "today": same_day,
    "week": current_week,
    "last_week": previous_week,
}


def range_filter(name: RangeName, now: datetime, tz: tzinfo = UTC) -> DatePredicate:
    """
    Predicate for a named dashboard range.

    Raises:
        ValueError: If name is not a known range
    """
    factory = _RANGE_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown progress range: {name}")
    return factory(now, tz)
