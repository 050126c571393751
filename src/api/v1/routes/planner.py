"""Planner API routes: assignment, conflict checks and roster sheets."""

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.actor import Actor
from api.v1.dependencies import (
    get_assignment_service,
    get_conflict_service,
    get_member_service,
    get_sheet_service,
)
from api.v1.routes.attributes import to_attribute_response
from api.v1.routes.events import to_event_response, to_event_summary
from api.v1.routes.members import attribute_filter_from, to_member_response
from api.v1.schemas.common import NOT_FOUND
from api.v1.schemas.event import (
    AssignmentResponse,
    ConflictMapResponse,
    ConflictResponse,
    RosterSheetResponse,
    SheetRowResponse,
    SheetSectionResponse,
)
from api.v1.schemas.member import MemberListResponse
from core.rate_limit import ASSIGN_LIMIT, READ_LIMIT, limiter
from domain.services.assignment_service import AssignmentService
from domain.services.conflict_service import ConflictService
from domain.services.member_service import MemberService
from domain.services.sheet_service import RosterSheetService

router = APIRouter(prefix="/events/{event_id}", tags=["planner"])


@router.put(
    "/groups/{group_id}/members/{member_id}",
    response_model=AssignmentResponse,
    summary="Assign a member to a group",
    responses={404: NOT_FOUND},
)
@limiter.limit(ASSIGN_LIMIT)  # type: ignore[untyped-decorator]
async def assign_member(
    request: Request,
    event_id: str,
    group_id: str,
    member_id: str,
    actor: Actor,
    service: AssignmentService = Depends(get_assignment_service),
    conflicts: ConflictService = Depends(get_conflict_service),
) -> AssignmentResponse:
    """Place a member in a group, moving it out of the event's other groups.

    The assignment always goes through. A time conflict found before the
    change is reported alongside the result so the client can flag it.
    """
    conflict = conflicts.find_conflict(member_id, event_id)
    event = service.assign(event_id, group_id, member_id)
    return AssignmentResponse(
        data=to_event_response(event),
        conflict=to_event_summary(conflict) if conflict else None,
    )


@router.delete(
    "/groups/{group_id}/members/{member_id}",
    response_model=AssignmentResponse,
    summary="Remove a member from a group",
    responses={404: NOT_FOUND},
)
@limiter.limit(ASSIGN_LIMIT)  # type: ignore[untyped-decorator]
async def unassign_member(
    request: Request,
    event_id: str,
    group_id: str,
    member_id: str,
    actor: Actor,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """Remove a member from one group; no-op when it is not there."""
    event = service.unassign(event_id, group_id, member_id)
    return AssignmentResponse(data=to_event_response(event))


@router.get(
    "/conflicts",
    response_model=ConflictMapResponse,
    summary="Conflicts of everyone placed in the event",
    responses={404: NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_conflicts(
    request: Request,
    event_id: str,
    service: ConflictService = Depends(get_conflict_service),
) -> ConflictMapResponse:
    """Map each assigned member to the first overlapping event that also holds it."""
    found = service.conflicts_for_event(event_id)
    data = {member_id: to_event_summary(e) for member_id, e in found.items()}
    return ConflictMapResponse(data=data, meta={"total": len(data)})


@router.get(
    "/conflicts/{member_id}",
    response_model=ConflictResponse,
    summary="Check a member for a time conflict",
    responses={404: NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def check_conflict(
    request: Request,
    event_id: str,
    member_id: str,
    service: ConflictService = Depends(get_conflict_service),
) -> ConflictResponse:
    """Check before assigning; ``conflict`` is null when the member is free."""
    conflict = service.find_conflict(member_id, event_id)
    return ConflictResponse(
        member_id=member_id,
        event_id=event_id,
        conflict=to_event_summary(conflict) if conflict else None,
    )


@router.get(
    "/available-members",
    response_model=MemberListResponse,
    summary="Members not yet placed in the event",
    responses={404: NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def available_members(
    request: Request,
    event_id: str,
    q: str | None = Query(None, max_length=200),
    attribute_id: str | None = Query(None),
    attribute_value: str | None = Query(None),
    service: MemberService = Depends(get_member_service),
) -> MemberListResponse:
    """Search the members that are still unassigned in this event."""
    members = service.available_for_event(
        event_id, q, attribute_filter_from(attribute_id, attribute_value)
    )
    data = [to_member_response(m) for m in members]
    return MemberListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/sheet",
    response_model=RosterSheetResponse,
    summary="Printable roster sheet",
    responses={404: NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def roster_sheet(
    request: Request,
    event_id: str,
    attribute_ids: list[str] | None = Query(None, alias="attribute_id"),
    service: RosterSheetService = Depends(get_sheet_service),
) -> RosterSheetResponse:
    """Groups with their members and the chosen attribute columns."""
    sheet = service.build(event_id, attribute_ids)
    return RosterSheetResponse(
        event=to_event_summary(sheet.event),
        location=sheet.event.location,
        columns=[to_attribute_response(c) for c in sheet.columns],
        sections=[
            SheetSectionResponse(
                group_id=section.group_id,
                group_name=section.group_name,
                color=section.color,
                rows=[
                    SheetRowResponse(
                        member_id=row.member_id,
                        first_name=row.first_name,
                        last_name=row.last_name,
                        values=list(row.values),
                    )
                    for row in section.rows
                ],
            )
            for section in sheet.sections
        ],
        total_members=sheet.total_members,
        generated_at=sheet.generated_at,
    )
