"""Event and group API routes."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from api.dependencies.actor import Actor
from api.v1.dependencies import get_event_service
from api.v1.schemas.common import INVALID, NOT_FOUND
from api.v1.schemas.event import (
    EventCreate,
    EventDetailResponse,
    EventListResponse,
    EventResponse,
    EventSummary,
    EventUpdate,
    GroupCreate,
    GroupDetailResponse,
    GroupRename,
    GroupResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.event import AppEvent, EventGroup
from domain.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


def to_group_response(group: EventGroup) -> GroupResponse:
    return GroupResponse(
        id=group.id,
        name=group.name,
        color=group.color,
        member_ids=list(group.member_ids),
    )


def to_event_response(event: AppEvent) -> EventResponse:
    return EventResponse(
        id=event.id,
        name=event.name,
        location=event.location,
        start=event.start,
        end=event.end,
        groups=[to_group_response(g) for g in event.groups],
        member_count=len(event.assigned_member_ids()),
    )


def to_event_summary(event: AppEvent) -> EventSummary:
    return EventSummary(id=event.id, name=event.name, start=event.start, end=event.end)


@router.get("", response_model=EventListResponse, summary="List events")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_events(
    request: Request,
    upcoming: bool = Query(False, description="Only events that have not ended"),
    service: EventService = Depends(get_event_service),
) -> EventListResponse:
    """Get all events in creation order, or upcoming events by start time."""
    events = service.upcoming() if upcoming else service.get_all()
    data = [to_event_response(e) for e in events]
    return EventListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=EventDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an event",
    responses={400: INVALID},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_event(
    request: Request,
    body: EventCreate,
    actor: Actor,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    """Create an event with its default group."""
    event = service.create(body.name, body.location, body.start, body.end)
    return EventDetailResponse(data=to_event_response(event))


@router.get(
    "/{event_id}",
    response_model=EventDetailResponse,
    summary="Get an event",
    responses={404: NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_event(
    request: Request,
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    """Get a single event with its groups."""
    return EventDetailResponse(data=to_event_response(service.get(event_id)))


@router.patch(
    "/{event_id}",
    response_model=EventDetailResponse,
    summary="Update an event",
    responses={400: INVALID, 404: NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_event(
    request: Request,
    event_id: str,
    body: EventUpdate,
    actor: Actor,
    service: EventService = Depends(get_event_service),
) -> EventDetailResponse:
    """Update name, location or time range."""
    event = service.update(
        event_id,
        name=body.name,
        location=body.location,
        start=body.start,
        end=body.end,
    )
    return EventDetailResponse(data=to_event_response(event))


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event",
    responses={404: NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_event(
    request: Request,
    event_id: str,
    actor: Actor,
    service: EventService = Depends(get_event_service),
) -> None:
    """Delete an event and its groups."""
    service.remove(event_id)


@router.post(
    "/{event_id}/groups",
    response_model=GroupDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a group",
    responses={404: NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_group(
    request: Request,
    event_id: str,
    body: GroupCreate,
    actor: Actor,
    service: EventService = Depends(get_event_service),
) -> GroupDetailResponse:
    """Append an empty group to the event."""
    group = service.add_group(event_id, name=body.name, color=body.color)
    return GroupDetailResponse(data=to_group_response(group))


@router.patch(
    "/{event_id}/groups/{group_id}",
    response_model=GroupDetailResponse,
    summary="Rename a group",
    responses={
        204: {"description": "Blank name, nothing changed"},
        404: NOT_FOUND,
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def rename_group(
    request: Request,
    event_id: str,
    group_id: str,
    body: GroupRename,
    actor: Actor,
    service: EventService = Depends(get_event_service),
) -> GroupDetailResponse | Response:
    """Rename a group. A blank name is ignored."""
    group = service.rename_group(event_id, group_id, body.name)
    if group is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return GroupDetailResponse(data=to_group_response(group))
