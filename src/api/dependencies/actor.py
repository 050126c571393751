"""Operator identity dependency for FastAPI.

Authentication is handled upstream; the API only needs a display identity
for audit attribution, passed in the ``X-Actor`` header.
"""

from typing import Annotated

from fastapi import Depends, Header

from core.config import settings
from core.providers import current_actor


async def get_actor(
    x_actor: Annotated[str | None, Header(max_length=200)] = None,
) -> str:
    """Resolve the acting operator and expose it to the audit log.

    Must stay ``async`` so the context variable is set in the request task.
    """
    actor = (x_actor or "").strip() or settings.system_actor
    current_actor.set(actor)
    return actor


# Type alias for convenience in route handlers
Actor = Annotated[str, Depends(get_actor)]
