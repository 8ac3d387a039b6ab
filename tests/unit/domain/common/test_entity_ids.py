"""Tests for entity identifiers."""

import pytest

from studytrack.domain.common.value_objects import PlanId, TaskId


class TestEntityIds:
    def test_generated_ids_are_prefixed_and_unique(self) -> None:
        first = PlanId.generate()
        assert first.value.startswith("plan-")
        assert TaskId.generate().value.startswith("task-")
        assert first != PlanId.generate()

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_ids_are_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            TaskId(value)

    def test_ids_of_different_types_differ(self) -> None:
        assert PlanId("x") != TaskId("x")
        assert str(PlanId("x")) == "x"
        assert PlanId("x").to_primitive() == "x"
