"""Demo data for a fresh in-memory store."""

from datetime import timedelta

from core.providers import Clock, IdFactory, new_id, utc_now
from domain.entities.attribute import AttributeDefinition, AttributeType
from domain.entities.event import AppEvent, EventGroup
from domain.entities.member import AttributeValues, Member
from infrastructure.memory.store import InMemoryStore


def seed_demo_data(
    store: InMemoryStore,
    id_factory: IdFactory = new_id,
    clock: Clock = utc_now,
) -> None:
    """Load a small football-club roster. Seeding is not audited."""
    position = AttributeDefinition(
        id="pos",
        name="Position",
        type=AttributeType.SELECT,
        options=("Goalkeeper", "Defender", "Midfield", "Striker", "Coach"),
    )
    birth_date = AttributeDefinition(id="dob", name="Date of birth", type=AttributeType.DATE)
    level = AttributeDefinition(
        id="skill",
        name="Level",
        type=AttributeType.SELECT,
        options=("Beginner", "Advanced", "Pro"),
    )

    members = [
        Member(
            id=id_factory(),
            first_name="Max",
            last_name="Mustermann",
            attributes=AttributeValues({"pos": "Striker", "skill": "Pro"}),
        ),
        Member(
            id=id_factory(),
            first_name="Julia",
            last_name="Müller",
            attributes=AttributeValues({"pos": "Defender", "skill": "Advanced"}),
        ),
        Member(
            id=id_factory(),
            first_name="Tim",
            last_name="Werner",
            attributes=AttributeValues({"pos": "Goalkeeper", "skill": "Beginner"}),
        ),
    ]

    start = clock() + timedelta(days=1)
    training = AppEvent(
        id=id_factory(),
        name="Training first team",
        location="North pitch",
        start=start,
        end=start + timedelta(hours=1),
        groups=[
            EventGroup(id=id_factory(), name="Team Red", color="red"),
            EventGroup(id=id_factory(), name="Team Blue", color="blue"),
        ],
    )

    with store.lock:
        state = store.state
        state.attributes.extend([position, birth_date, level])
        for member in members:
            state.members[member.id] = member
        state.events[training.id] = training
