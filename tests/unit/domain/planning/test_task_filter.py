"""Tests for task search and status filtering."""

from studytrack.domain.common.value_objects import PlanId, TaskId
from studytrack.domain.planning.entities import Plan, Task
from studytrack.domain.planning.services import filter_tasks


def _plan() -> Plan:
    return Plan(
        id=PlanId("p"),
        title="Languages",
        tasks=[
            Task(id=TaskId("t1"), title="Spanish verbs", status="completed"),
            Task(id=TaskId("t2"), title="French", description="Irregular VERBS", status="in-progress"),
            Task(id=TaskId("t3"), title="German nouns"),
        ],
    )


class TestFilterTasks:
    def test_no_filters_returns_all_in_order(self) -> None:
        assert [task.id.value for task in filter_tasks(_plan())] == ["t1", "t2", "t3"]

    def test_query_matches_title_or_description_case_insensitively(self) -> None:
        matches = filter_tasks(_plan(), query="  verbs ")
        assert [task.id.value for task in matches] == ["t1", "t2"]

    def test_status_filter(self) -> None:
        matches = filter_tasks(_plan(), status="not-started")
        assert [task.id.value for task in matches] == ["t3"]

    def test_query_and_status_combine(self) -> None:
        matches = filter_tasks(_plan(), query="verbs", status="completed")
        assert [task.id.value for task in matches] == ["t1"]

    def test_no_match(self) -> None:
        assert filter_tasks(_plan(), query="latin") == []
