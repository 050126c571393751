"""Pydantic schemas for Attribute API."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AttributeCreate(BaseModel):
    """Schema for defining an attribute."""

    name: str = Field(..., min_length=1, max_length=100)
    type: Literal["text", "date", "select"] = "text"
    options: list[str] | str | None = Field(
        None,
        description="Select options as a list or a comma-separated string",
    )


class AttributeReorder(BaseModel):
    """Schema for moving one attribute to another position."""

    from_index: int
    to_index: int


class AttributeResponse(BaseModel):
    """Schema for Attribute response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str
    options: list[str] = Field(default_factory=list)


class AttributeListResponse(BaseModel):
    """Schema for list of Attributes response."""

    data: list[AttributeResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class AttributeDetailResponse(BaseModel):
    """Schema for single Attribute response."""

    data: AttributeResponse
