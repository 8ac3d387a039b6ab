"""Domain service bucketing tracked minutes per plan per calendar month."""

from collections.abc import Iterable
from datetime import UTC, datetime, tzinfo

from studytrack.domain.progress.entities import ProgressEntry, TrendReport, TrendSeries


def month_key(moment: datetime, tz: tzinfo = UTC) -> str:
    """``YYYY-MM`` key of moment's month in tz."""
    return moment.astimezone(tz).strftime("%Y-%m")


class MonthlyBuckets:
    """Minutes per (label, month) with first-seen label order."""

    def __init__(self) -> None:
        self.month_keys: set[str] = set()
        self.variants: dict[str, str] = {}
        self.minutes: dict[str, dict[str, int]] = {}

    def add(self, label: str, variant: str, key: str, minutes: int) -> None:
        self.month_keys.add(key)
        if label not in self.minutes:
            self.minutes[label] = {}
            self.variants[label] = variant
        by_month = self.minutes[label]
        by_month[key] = by_month.get(key, 0) + minutes

    def to_report(self, is_placeholder: bool = False) -> TrendReport:
        keys = sorted(self.month_keys)
        series = [
            TrendSeries(
                label=label,
                variant=self.variants[label],
                values=[round(by_month.get(key, 0) / 60, 1) for key in keys],
            )
            for label, by_month in self.minutes.items()
        ]
        max_value = max((value for item in series for value in item.values), default=0.0)
        return TrendReport(
            month_keys=keys,
            series=series,
            max_value=max(0.0, max_value),
            is_placeholder=is_placeholder,
        )


def build_trend(entries: Iterable[ProgressEntry], tz: tzinfo = UTC) -> TrendReport:
    """
    Per-plan monthly hours across all history.

    Each entry is placed by finish_date, else start_date; entries with
    neither are skipped. Values are hours rounded to one decimal, 0 for
    months where a plan tracked nothing.
    """
    buckets = MonthlyBuckets()
    for entry in entries:
        reference = entry.finish_date or entry.start_date
        if reference is None:
            continue
        buckets.add(entry.tag.label, entry.tag.variant, month_key(reference, tz), entry.minutes)
    return buckets.to_report()
