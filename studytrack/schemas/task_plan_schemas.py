"""Pydantic schemas for task store request payloads.

Payloads are serialized in the store's camelCase wire format. Patch schemas
distinguish an omitted field (left untouched server-side) from a field set
to None (cleared): only fields explicitly set end up in the payload.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from studytrack.domain.planning.entities import Category, Priority, Status
from studytrack.utils import coerce_minutes, parse_instant, to_iso

_TIMESTAMP_FIELDS = ("created_at", "start_at", "due_date", "completed_at")


def _strict_instant(value: Any) -> datetime | None:
    """Parse a timestamp, keeping None (clear) but rejecting garbage."""
    if value is None:
        return None
    parsed = parse_instant(value)
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {value!r}")
    return parsed


Instant = Annotated[datetime | None, BeforeValidator(_strict_instant)]
Minutes = Annotated[int, BeforeValidator(coerce_minutes)]


class StorePayload(BaseModel):
    """Base schema for payloads sent to the task store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        """Wire payload containing only explicitly set fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def is_empty(self) -> bool:
        return not self.model_fields_set


class PlanCreate(StorePayload):
    """Schema for creating a plan."""

    title: str = Field(..., description="Plan title")
    description: str = Field("", description="Plan description")
    due_date: Instant = Field(None, description="Explicit plan due date")
    category: Category = Field("academic", description="Plan category")
    tags: list[str] = Field(default_factory=list, description="Free-form plan tags")

    @field_serializer("due_date")
    def serialize_due_date(self, value: datetime | None) -> str | None:
        return to_iso(value)

    def to_payload(self) -> dict[str, Any]:
        """Creation payloads always carry every field."""
        return self.model_dump(mode="json", by_alias=True)


class PlanPatch(StorePayload):
    """Schema for a partial plan update."""

    title: str | None = Field(None, description="New title")
    description: str | None = Field(None, description="New description")
    status: Status | None = Field(None, description="New status")
    category: Category | None = Field(None, description="New category")
    tags: list[str] | None = Field(None, description="Replacement tag list")
    due_date: Instant = Field(None, description="New due date; None clears it")

    @field_serializer("due_date")
    def serialize_due_date(self, value: datetime | None) -> str | None:
        return to_iso(value)


class TaskCreate(StorePayload):
    """
    Schema for the store's task creation endpoint.

    The endpoint only accepts these fields; status, timestamps and tracked
    minutes are reconciled with a follow-up TaskPatch.
    """

    title: str = Field(..., description="Task title")
    description: str = Field("", description="Task description")
    priority: Priority = Field("medium", description="Task priority")
    due_date: Instant = Field(None, description="Task due date")

    @field_serializer("due_date")
    def serialize_due_date(self, value: datetime | None) -> str | None:
        return to_iso(value)

    def to_payload(self) -> dict[str, Any]:
        """Creation payloads always carry every field."""
        return self.model_dump(mode="json", by_alias=True)


class TaskPatch(StorePayload):
    """Schema for task fields supplied by a caller, or a partial task update."""

    title: str | None = Field(None, description="New title")
    description: str | None = Field(None, description="New description")
    status: Status | None = Field(None, description="New status")
    priority: Priority | None = Field(None, description="New priority")
    created_at: Instant = Field(None, description="Creation instant")
    start_at: Instant = Field(None, description="Start instant; None clears it")
    due_date: Instant = Field(None, description="Due date; None clears it")
    completed_at: Instant = Field(None, description="Completion instant; None clears it")
    tracked_minutes: Minutes | None = Field(None, description="Tracked minutes, rounded")

    @field_serializer(*_TIMESTAMP_FIELDS)
    def serialize_timestamp(self, value: datetime | None) -> str | None:
        return to_iso(value)

    def provides(self, field_name: str) -> bool:
        """Whether the caller explicitly supplied field_name (even as None)."""
        return field_name in self.model_fields_set
