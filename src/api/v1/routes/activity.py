"""Audit log API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.actor import Actor
from api.v1.dependencies import get_activity_service
from api.v1.schemas.activity import ActivityListResponse, AuditLogCreate, AuditLogResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.activity import AuditLogEntry
from domain.services.activity_service import ActivityService

router = APIRouter(prefix="/activity", tags=["activity"])


def to_log_response(entry: AuditLogEntry) -> AuditLogResponse:
    return AuditLogResponse(
        id=entry.id,
        timestamp=entry.timestamp,
        actor=entry.actor,
        action=entry.action,
        details=entry.details,
    )


@router.get(
    "",
    response_model=ActivityListResponse,
    summary="Get the audit log",
    responses={200: {"description": "Audit log entries, newest first"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_log(
    request: Request,
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: ActivityService = Depends(get_activity_service),
) -> ActivityListResponse:
    """Get the audit log, most recent entry first."""
    entries = service.list_log(limit=limit, offset=offset)
    data = [to_log_response(e) for e in entries]
    return ActivityListResponse(
        data=data,
        meta={"limit": limit, "offset": offset, "total": service.count()},
    )


@router.post(
    "",
    response_model=AuditLogResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an entry from an outside collaborator",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def record_entry(
    request: Request,
    body: AuditLogCreate,
    actor: Actor,
    service: ActivityService = Depends(get_activity_service),
) -> AuditLogResponse:
    """Append an entry, e.g. a sign-in recorded by the login front end."""
    return to_log_response(service.record(body.action, body.details, actor=actor))
