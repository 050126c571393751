"""Pydantic schemas for Activity API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AuditLogResponse(BaseModel):
    """Schema for an audit log entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    timestamp: datetime
    actor: str
    action: str
    details: str


class AuditLogCreate(BaseModel):
    """Schema for recording an entry on behalf of an outside collaborator."""

    action: str = Field(..., min_length=1, max_length=100)
    details: str = Field("", max_length=1000)


class ActivityListResponse(BaseModel):
    """Schema for paginated audit log response."""

    data: list[AuditLogResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
