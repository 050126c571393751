"""Dependency injection factories for API v1."""

from functools import lru_cache

from fastapi import Depends

from core.config import settings
from domain.services.activity_service import ActivityService
from domain.services.assignment_service import AssignmentService
from domain.services.attribute_service import AttributeService
from domain.services.conflict_service import ConflictService
from domain.services.event_service import EventService
from domain.services.member_service import MemberService
from domain.services.sheet_service import RosterSheetService
from infrastructure.engine import PlannerEngine, build_engine
from infrastructure.memory.seed import seed_demo_data


@lru_cache
def get_engine() -> PlannerEngine:
    """Get the process-wide engine, seeding demo data when configured."""
    engine = build_engine()
    if settings.seed_demo_data:
        seed_demo_data(engine.store)
    return engine


def get_activity_service(engine: PlannerEngine = Depends(get_engine)) -> ActivityService:
    """Get Activity service instance."""
    return engine.activity


def get_attribute_service(engine: PlannerEngine = Depends(get_engine)) -> AttributeService:
    """Get Attribute service instance."""
    return engine.attributes


def get_member_service(engine: PlannerEngine = Depends(get_engine)) -> MemberService:
    """Get Member service instance."""
    return engine.members


def get_event_service(engine: PlannerEngine = Depends(get_engine)) -> EventService:
    """Get Event service instance."""
    return engine.events


def get_conflict_service(engine: PlannerEngine = Depends(get_engine)) -> ConflictService:
    """Get Conflict service instance."""
    return engine.conflicts


def get_assignment_service(engine: PlannerEngine = Depends(get_engine)) -> AssignmentService:
    """Get Assignment service instance."""
    return engine.assignments


def get_sheet_service(engine: PlannerEngine = Depends(get_engine)) -> RosterSheetService:
    """Get Roster sheet service instance."""
    return engine.sheets
