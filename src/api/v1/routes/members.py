"""Member roster API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.actor import Actor
from api.v1.dependencies import get_member_service
from api.v1.schemas.common import INVALID, NOT_FOUND
from api.v1.schemas.member import (
    MemberCreate,
    MemberDetailResponse,
    MemberListResponse,
    MemberResponse,
    MemberUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.member import Member
from domain.services.member_service import AttributeFilter, MemberService

router = APIRouter(prefix="/members", tags=["members"])


def to_member_response(member: Member) -> MemberResponse:
    return MemberResponse(
        id=member.id,
        first_name=member.first_name,
        last_name=member.last_name,
        attributes=dict(member.attributes),
    )


def attribute_filter_from(
    attribute_id: str | None, attribute_value: str | None
) -> AttributeFilter | None:
    if attribute_id and attribute_value is not None:
        return (attribute_id, attribute_value)
    return None


@router.get("", response_model=MemberListResponse, summary="Search the roster")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_members(
    request: Request,
    q: str | None = Query(None, max_length=200, description="Search term"),
    attribute_id: str | None = Query(None),
    attribute_value: str | None = Query(None),
    service: MemberService = Depends(get_member_service),
) -> MemberListResponse:
    """Case-insensitive search over names and attribute values."""
    members = service.find(q, attribute_filter_from(attribute_id, attribute_value))
    data = [to_member_response(m) for m in members]
    return MemberListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=MemberDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a member",
    responses={400: INVALID},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_member(
    request: Request,
    body: MemberCreate,
    actor: Actor,
    service: MemberService = Depends(get_member_service),
) -> MemberDetailResponse:
    """Add a member to the roster."""
    member = service.add(body.first_name, body.last_name, body.attributes)
    return MemberDetailResponse(data=to_member_response(member))


@router.get(
    "/{member_id}",
    response_model=MemberDetailResponse,
    summary="Get a member",
    responses={404: NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_member(
    request: Request,
    member_id: str,
    service: MemberService = Depends(get_member_service),
) -> MemberDetailResponse:
    """Get a single member."""
    return MemberDetailResponse(data=to_member_response(service.get(member_id)))


@router.patch(
    "/{member_id}",
    response_model=MemberDetailResponse,
    summary="Update a member",
    responses={400: INVALID, 404: NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_member(
    request: Request,
    member_id: str,
    body: MemberUpdate,
    actor: Actor,
    service: MemberService = Depends(get_member_service),
) -> MemberDetailResponse:
    """Replace given names and merge the given attribute values."""
    member = service.update(
        member_id,
        first_name=body.first_name,
        last_name=body.last_name,
        attributes=body.attributes,
    )
    return MemberDetailResponse(data=to_member_response(member))


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a member",
    responses={404: NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_member(
    request: Request,
    member_id: str,
    actor: Actor,
    service: MemberService = Depends(get_member_service),
) -> None:
    """Delete a member and release it from every event group."""
    service.remove(member_id)
