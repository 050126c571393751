"""Attribute schema registry API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.actor import Actor
from api.v1.dependencies import get_attribute_service
from api.v1.schemas.attribute import (
    AttributeCreate,
    AttributeDetailResponse,
    AttributeListResponse,
    AttributeReorder,
    AttributeResponse,
)
from api.v1.schemas.common import INVALID, NOT_FOUND
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.attribute import AttributeDefinition
from domain.services.attribute_service import AttributeService

router = APIRouter(prefix="/attributes", tags=["attributes"])


def to_attribute_response(definition: AttributeDefinition) -> AttributeResponse:
    return AttributeResponse(
        id=definition.id,
        name=definition.name,
        type=definition.type.value,
        options=list(definition.options),
    )


@router.get("", response_model=AttributeListResponse, summary="List attribute definitions")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_attributes(
    request: Request,
    service: AttributeService = Depends(get_attribute_service),
) -> AttributeListResponse:
    """Get all definitions in display order."""
    data = [to_attribute_response(d) for d in service.get_all()]
    return AttributeListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=AttributeDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Define an attribute",
    responses={400: INVALID},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def define_attribute(
    request: Request,
    body: AttributeCreate,
    actor: Actor,
    service: AttributeService = Depends(get_attribute_service),
) -> AttributeDetailResponse:
    """Append a definition. Select attributes need at least one option."""
    definition = service.define(name=body.name, type=body.type, options=body.options)
    return AttributeDetailResponse(data=to_attribute_response(definition))


@router.delete(
    "/{attribute_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an attribute",
    responses={404: NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_attribute(
    request: Request,
    attribute_id: str,
    actor: Actor,
    service: AttributeService = Depends(get_attribute_service),
) -> None:
    """Remove a definition. Stored member values are kept."""
    service.remove(attribute_id)


@router.post(
    "/reorder",
    response_model=AttributeListResponse,
    summary="Move an attribute",
    responses={400: INVALID},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def reorder_attributes(
    request: Request,
    body: AttributeReorder,
    actor: Actor,
    service: AttributeService = Depends(get_attribute_service),
) -> AttributeListResponse:
    """Move one definition and return the new order."""
    ordered = service.reorder(body.from_index, body.to_index)
    data = [to_attribute_response(d) for d in ordered]
    return AttributeListResponse(data=data, meta={"total": len(data)})
