"""Pydantic schemas for Event, Group and Assignment API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from api.v1.schemas.attribute import AttributeResponse


class EventCreate(BaseModel):
    """Schema for creating an event."""

    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field("", max_length=200)
    start: datetime
    end: datetime


class EventUpdate(BaseModel):
    """Schema for updating an event."""

    name: str | None = Field(None, min_length=1, max_length=200)
    location: str | None = Field(None, max_length=200)
    start: datetime | None = None
    end: datetime | None = None


class GroupCreate(BaseModel):
    """Schema for adding a group to an event."""

    name: str | None = Field(None, max_length=100)
    color: str | None = Field(None, max_length=50)


class GroupRename(BaseModel):
    """Schema for renaming a group. Blank names are ignored."""

    name: str = Field(..., max_length=100)


class GroupResponse(BaseModel):
    """Schema for Group response."""

    id: str
    name: str
    color: str
    member_ids: list[str]


class EventResponse(BaseModel):
    """Schema for Event response."""

    id: str
    name: str
    location: str
    start: datetime
    end: datetime
    groups: list[GroupResponse]
    member_count: int = 0


class EventSummary(BaseModel):
    """Compact event reference used in conflict reports."""

    id: str
    name: str
    start: datetime
    end: datetime


class EventListResponse(BaseModel):
    """Schema for list of Events response."""

    data: list[EventResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class EventDetailResponse(BaseModel):
    """Schema for single Event response."""

    data: EventResponse


class GroupDetailResponse(BaseModel):
    """Schema for single Group response."""

    data: GroupResponse


class ConflictResponse(BaseModel):
    """Result of a conflict check; ``conflict`` is null when there is none."""

    member_id: str
    event_id: str
    conflict: EventSummary | None = None


class ConflictMapResponse(BaseModel):
    """Conflicting events keyed by member id."""

    data: dict[str, EventSummary]
    meta: dict[str, Any] = Field(default_factory=dict)


class AssignmentResponse(BaseModel):
    """Event after an assignment, plus the advisory conflict seen beforehand."""

    data: EventResponse
    conflict: EventSummary | None = None


class SheetRowResponse(BaseModel):
    member_id: str
    first_name: str
    last_name: str
    values: list[str]


class SheetSectionResponse(BaseModel):
    group_id: str
    group_name: str
    color: str
    rows: list[SheetRowResponse]


class RosterSheetResponse(BaseModel):
    """Printable roster of an event."""

    event: EventSummary
    location: str
    columns: list[AttributeResponse]
    sections: list[SheetSectionResponse]
    total_members: int
    generated_at: datetime
