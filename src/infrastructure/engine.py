"""Wiring of the planner services over one in-memory store."""

from dataclasses import dataclass

from core.config import settings
from core.providers import ActorProvider, Clock, IdFactory, context_actor, new_id, utc_now
from domain.services.activity_service import ActivityService
from domain.services.assignment_service import AssignmentService
from domain.services.attribute_service import AttributeService
from domain.services.conflict_service import ConflictService
from domain.services.event_service import EventService
from domain.services.member_service import MemberService
from domain.services.sheet_service import RosterSheetService
from infrastructure.memory.memory_uow import InMemoryUnitOfWork
from infrastructure.memory.store import InMemoryStore


@dataclass(frozen=True)
class PlannerEngine:
    """All services sharing one store. Independent engines share nothing."""

    store: InMemoryStore
    activity: ActivityService
    attributes: AttributeService
    members: MemberService
    events: EventService
    conflicts: ConflictService
    assignments: AssignmentService
    sheets: RosterSheetService


def build_engine(
    store: InMemoryStore | None = None,
    id_factory: IdFactory = new_id,
    clock: Clock = utc_now,
    actor_provider: ActorProvider | None = None,
) -> PlannerEngine:
    """Create a fully wired engine; every environment service is injectable."""
    store = store or InMemoryStore()

    def uow_factory() -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(store)

    activity = ActivityService(
        uow_factory,
        id_factory=id_factory,
        clock=clock,
        actor_provider=actor_provider or context_actor(settings.system_actor),
    )
    return PlannerEngine(
        store=store,
        activity=activity,
        attributes=AttributeService(uow_factory, activity, id_factory=id_factory),
        members=MemberService(uow_factory, activity, id_factory=id_factory),
        events=EventService(uow_factory, activity, id_factory=id_factory, clock=clock),
        conflicts=ConflictService(uow_factory),
        assignments=AssignmentService(uow_factory),
        sheets=RosterSheetService(uow_factory, clock=clock),
    )
