"""Notification inbox endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from ecoplates.api.deps import get_container, require_session
from ecoplates.domain.sessions import SessionContext  # noqa: TC001
from ecoplates.services.presenters import serialize_notification

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
async def list_notifications(
    request: Request,
    limit: int = Query(50, ge=1, le=100),
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Return the caller's notifications, newest first."""
    container: AppContainer = get_container(request)
    notifications = container.notification_service.list_notifications(
        session, limit
    )
    return {"notifications": [serialize_notification(n) for n in notifications]}


@router.post("/{notification_id}/read")
async def mark_read(
    notification_id: UUID,
    request: Request,
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Mark one of the caller's notifications as read."""
    container: AppContainer = get_container(request)
    notification = container.notification_service.mark_read(session, notification_id)
    return {"notification": serialize_notification(notification)}
