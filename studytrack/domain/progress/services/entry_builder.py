"""Flattens the plan -> task tree into one ProgressEntry per task."""

from collections.abc import Sequence

from studytrack.domain.planning.entities import Plan
from studytrack.domain.progress.entities import PlanRef, ProgressEntry, ProgressTag
from studytrack.domain.progress.services.tag_colorer import TagColorer, default_colorer


def build_entries(plans: Sequence[Plan], colorer: TagColorer = default_colorer) -> list[ProgressEntry]:
    """
    Build progress entries for every task of every plan.

    Args:
        plans: Canonical plans, in display order
        colorer: Maps a plan's index to its tag color variant

    Returns:
        Entries sorted by start date (start_at, else created_at), most recent
        first; entries without any date keep their relative order at the end
    """
    entries: list[ProgressEntry] = []

    for index, plan in enumerate(plans):
        tag = ProgressTag(label=plan.title, variant=colorer(index))
        plan_ref = PlanRef(
            id=plan.id.value,
            title=plan.title,
            description=plan.description,
            status=plan.status,
        )
        for task in plan.tasks:
            entries.append(
                ProgressEntry(
                    id=f"progress-{task.id}",
                    name=task.title,
                    plan_ref=plan_ref,
                    task_ref=task,
                    tag=tag,
                    minutes=task.tracked_minutes,
                    reference_date=task.reference_date,
                    start_date=task.started_at,
                    finish_date=task.completed_at,
                )
            )

    # reverse=True keeps equal keys in their original order
    return sorted(
        entries,
        key=lambda entry: (
            entry.start_date is not None,
            entry.start_date.timestamp() if entry.start_date else 0.0,
        ),
        reverse=True,
    )
