"""Week-over-week comparison and rolling minute summaries."""

from dataclasses import dataclass

from studytrack.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class WeekComparison(ValueObject):
    """
    Tracked minutes this week against last week.

    percent_change is unrounded; callers round for display.
    """

    current_week_minutes: int
    previous_week_minutes: int
    diff: int
    percent_change: float

    @property
    def trend_sign(self) -> str:
        if self.percent_change > 0:
            return "+"
        if self.percent_change < 0:
            return "-"
        return ""


@dataclass(frozen=True)
class ProgressSummary(ValueObject):
    """Minutes tracked today, this week and last week."""

    today_minutes: int = 0
    week_minutes: int = 0
    last_week_minutes: int = 0
