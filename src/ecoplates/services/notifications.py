"""Notification inbox service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from ecoplates.domain.errors import NotificationNotFoundError
from ecoplates.domain.models import Notification
from ecoplates.domain.sessions import SessionContext


class NotificationRepository(Protocol):
    """Persistence interface for notifications."""

    def list_for_user(self, user_id: UUID, limit: int) -> list[Notification]:
        """Return a user's notifications, newest first."""

    def mark_read(self, user_id: UUID, notification_id: UUID) -> Notification | None:
        """Mark one of the user's notifications as read."""


@dataclass
class NotificationService:
    """Read-only access to notifications plus the read flag."""

    repository: NotificationRepository

    def list_notifications(
        self, session: SessionContext, limit: int = 50
    ) -> list[Notification]:
        """Return the acting user's notifications."""
        return self.repository.list_for_user(session.profile.id, limit)

    def mark_read(self, session: SessionContext, notification_id: UUID) -> Notification:
        """Mark a notification as read."""
        updated = self.repository.mark_read(session.profile.id, notification_id)
        if updated is None:
            raise NotificationNotFoundError("Notification not found")
        return updated
