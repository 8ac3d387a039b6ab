"""Domain service summing tracked minutes per plan within a reporting range."""

import re
from collections.abc import Iterable

from studytrack.domain.progress.entities import (
    FULL_CIRCLE_DEGREES,
    NEUTRAL_VARIANT,
    AngleSpan,
    ProgressEntry,
    ProgressSegment,
    SegmentBreakdown,
)
from studytrack.domain.progress.services.range_filters import DatePredicate

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def segment_id(label: str) -> str:
    """Stable id for a segment, derived from its label."""
    return f"segment-{_SLUG_PATTERN.sub('-', label.lower())}"


def build_angle_spans(segments: list[ProgressSegment], total_minutes: int) -> list[AngleSpan]:
    """
    Cumulative angle spans proportional to each segment's share of the total.

    The spans cover exactly 360 degrees. With nothing tracked the whole circle
    is a single neutral span.
    """
    if total_minutes <= 0:
        return [AngleSpan(label=None, variant=NEUTRAL_VARIANT, start=0.0, end=FULL_CIRCLE_DEGREES)]

    spans: list[AngleSpan] = []
    current = 0.0
    for index, segment in enumerate(segments):
        end = current + segment.minutes / total_minutes * FULL_CIRCLE_DEGREES
        if index == len(segments) - 1:
            end = FULL_CIRCLE_DEGREES  # absorb float drift
        spans.append(
            AngleSpan(label=segment.label, variant=segment.variant, start=current, end=end)
        )
        current = end
    return spans


def build_segments(entries: Iterable[ProgressEntry], predicate: DatePredicate) -> SegmentBreakdown:
    """
    Group entries with tracked time inside a range by plan tag.

    Args:
        entries: Progress entries
        predicate: Range filter applied to each entry's reference_date

    Returns:
        SegmentBreakdown with segments in first-appearance order, their total
        and angle spans
    """
    minutes_by_label: dict[str, int] = {}
    variant_by_label: dict[str, str] = {}

    for entry in entries:
        if entry.minutes <= 0 or not predicate(entry.reference_date):
            continue
        label = entry.tag.label
        if label not in minutes_by_label:
            minutes_by_label[label] = 0
            variant_by_label[label] = entry.tag.variant
        minutes_by_label[label] += entry.minutes

    segments = [
        ProgressSegment(
            id=segment_id(label),
            label=label,
            variant=variant_by_label[label],
            minutes=minutes,
            hours=round(minutes / 60, 2),
        )
        for label, minutes in minutes_by_label.items()
    ]
    total_minutes = sum(segment.minutes for segment in segments)

    return SegmentBreakdown(
        segments=segments,
        total_minutes=total_minutes,
        spans=build_angle_spans(segments, total_minutes),
    )
