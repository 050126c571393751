"""Pydantic schemas for Member API."""

from typing import Any

from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    """Schema for adding a member to the roster."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    attributes: dict[str, str] = Field(default_factory=dict)


class MemberUpdate(BaseModel):
    """Schema for updating a member. ``attributes`` is merged, not replaced."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    attributes: dict[str, str] | None = None


class MemberResponse(BaseModel):
    """Schema for Member response."""

    id: str
    first_name: str
    last_name: str
    attributes: dict[str, str]


class MemberListResponse(BaseModel):
    """Schema for list of Members response."""

    data: list[MemberResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class MemberDetailResponse(BaseModel):
    """Schema for single Member response."""

    data: MemberResponse
