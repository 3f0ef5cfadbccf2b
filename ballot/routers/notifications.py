"""Notification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ballot.config import settings
from ballot.dependencies import get_notifications
from ballot.services.notification_service import NotificationService

router = APIRouter()


@router.get("")
def list_notifications(
    after: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1),
    service: NotificationService = Depends(get_notifications),
) -> dict:
    """Return events across all elections with ``seq`` greater than ``after``."""
    notifications = service.list_notifications(
        after=after,
        limit=min(limit, settings.notification_page_max_limit),
    )
    return {"notifications": notifications, "last_seq": service.last_seq}
