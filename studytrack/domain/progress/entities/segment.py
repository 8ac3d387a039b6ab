"""Per-plan minute totals within a reporting range, for proportional charts."""

from dataclasses import dataclass, field
from typing import Final

from studytrack.domain.common.value_object import ValueObject

FULL_CIRCLE_DEGREES: Final = 360.0
NEUTRAL_VARIANT: Final = "neutral"


@dataclass(frozen=True)
class ProgressSegment(ValueObject):
    """Summed minutes for one plan tag."""

    id: str
    label: str
    variant: str
    minutes: int
    hours: float


@dataclass(frozen=True)
class AngleSpan(ValueObject):
    """
    Slice of a full circle, in degrees.

    label is None for the neutral span drawn when nothing was tracked.
    """

    label: str | None
    variant: str
    start: float
    end: float

    @property
    def sweep(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class SegmentBreakdown(ValueObject):
    """Segments of a range together with their total and cumulative angle spans."""

    segments: list[ProgressSegment] = field(default_factory=list)
    total_minutes: int = 0
    spans: list[AngleSpan] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return round(self.total_minutes / 60, 2)

    @property
    def is_empty(self) -> bool:
        return self.total_minutes == 0
