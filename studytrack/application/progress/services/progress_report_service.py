"""Application service composing the progress dashboard from loaded plans."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from studytrack.config import Settings
from studytrack.domain.planning.entities import Plan
from studytrack.domain.planning.services import PlanStatistics, compute_plan_statistics
from studytrack.domain.progress.entities import (
    ProgressEntry,
    ProgressSummary,
    SegmentBreakdown,
    TrendReport,
    WeekComparison,
)
from studytrack.domain.progress.services import (
    TagColorer,
    build_entries,
    build_segments,
    build_trend,
    build_trend_or_placeholder,
    compare_weeks,
    default_colorer,
    range_filter,
    summarize_minutes,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProgressDashboard:
    """Everything the progress dashboard renders, computed at one instant."""

    generated_at: datetime
    entries: list[ProgressEntry]
    today: SegmentBreakdown
    week: SegmentBreakdown
    trend: TrendReport
    week_comparison: WeekComparison
    summary: ProgressSummary
    statistics: PlanStatistics


class ProgressReportService:
    """Application service for progress analytics over a plan snapshot."""

    def __init__(
        self,
        settings: Settings,
        colorer: TagColorer = default_colorer,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self.settings = settings
        self.colorer = colorer
        self.clock = clock

    def build_report(self, plans: Sequence[Plan], now: datetime | None = None) -> ProgressDashboard:
        """
        Build the dashboard for plans as of now.

        Args:
            plans: Snapshot of the loaded plans
            now: Reference instant (defaults to the service clock)

        Returns:
            ProgressDashboard with all day/week/month boundaries taken in the
            configured reporting timezone
        """
        now = now or self.clock()
        tz = self.settings.reporting_tz
        entries = build_entries(plans, self.colorer)

        if self.settings.TREND_PLACEHOLDER_ENABLED:
            trend = build_trend_or_placeholder(entries, now, tz)
        else:
            trend = build_trend(entries, tz)

        dashboard = ProgressDashboard(
            generated_at=now,
            entries=entries,
            today=build_segments(entries, range_filter("today", now, tz)),
            week=build_segments(entries, range_filter("week", now, tz)),
            trend=trend,
            week_comparison=compare_weeks(entries, now, tz),
            summary=summarize_minutes(entries, now, tz),
            statistics=compute_plan_statistics(plans),
        )

        logger.debug(
            "built_progress_report",
            plans=len(plans),
            entries=len(entries),
            week_minutes=dashboard.week.total_minutes,
            placeholder_trend=trend.is_placeholder,
        )
        return dashboard
