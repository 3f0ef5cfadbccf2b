"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Depends, Request

from ballot.config import settings
from ballot.services.common import Principal
from ballot.services.election_service import Election
from ballot.services.notification_service import NotificationService
from ballot.services.registry_service import ElectionRegistry
from ballot.utils.errors import UnauthorizedError
from ballot.utils.time import Clock


def get_registry(request: Request) -> ElectionRegistry:
    """Return the registry created in the application lifespan."""
    return request.app.state.registry


def get_clock(request: Request) -> Clock:
    """Return the clock used to timestamp participant actions."""
    return request.app.state.clock


def get_notifications(
    registry: ElectionRegistry = Depends(get_registry),
) -> NotificationService:
    return registry.notifications


def get_election(
    election_id: int,
    registry: ElectionRegistry = Depends(get_registry),
) -> Election:
    """Resolve the ``election_id`` path parameter.

    Raises:
        NotFoundError: 404 if no such election exists.
    """
    return registry.get(election_id)


def get_current_principal(request: Request) -> Principal:
    """Read the caller identity set by the authentication layer in front.

    Raises:
        UnauthorizedError: 401 if the principal header is missing or blank.
    """
    raw = request.headers.get(settings.principal_header)
    if not raw or not raw.strip():
        raise UnauthorizedError(f"Missing {settings.principal_header} header")
    return raw.strip()
