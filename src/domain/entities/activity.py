"""Audit log domain entity and action constants."""

from dataclasses import dataclass
from datetime import datetime

# --- Activity Action Constants ---
# Format: {entity_type}.{action}


class Actions:
    """Activity action constants using dot-notation."""

    # Member actions
    MEMBER_CREATED = "member.created"
    MEMBER_UPDATED = "member.updated"
    MEMBER_DELETED = "member.deleted"

    # Attribute definition actions
    ATTRIBUTE_CREATED = "attribute.created"
    ATTRIBUTE_DELETED = "attribute.deleted"

    # Event actions
    EVENT_CREATED = "event.created"
    EVENT_UPDATED = "event.updated"
    EVENT_DELETED = "event.deleted"

    # Session actions, recorded by the sign-in collaborator
    SESSION_LOGIN = "session.login"
    SESSION_LOGOUT = "session.logout"


@dataclass(frozen=True)
class AuditLogEntry:
    """Domain entity for an append-only audit log entry."""

    id: str
    timestamp: datetime
    actor: str
    action: str
    details: str
