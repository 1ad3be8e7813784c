"""Supabase repository for notifications."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from ecoplates.adapters.rows import parse_timestamp
from ecoplates.domain.models import Notification, NotificationType
from ecoplates.services.notifications import NotificationRepository


@dataclass
class SupabaseNotificationRepository(NotificationRepository):
    """Supabase implementation for notification access."""

    client: Client

    def list_for_user(self, user_id: UUID, limit: int) -> list[Notification]:
        """Return a user's notifications, newest first."""
        response = (
            self.client.table("notifications")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_row_to_notification(row) for row in response.data or []]

    def mark_read(self, user_id: UUID, notification_id: UUID) -> Notification | None:
        """Mark one of the user's notifications as read."""
        response = (
            self.client.table("notifications")
            .update({"is_read": True})
            .eq("id", str(notification_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _row_to_notification(response.data[0])


def _row_to_notification(row: dict[str, object]) -> Notification:
    return Notification(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        message=str(row.get("message") or ""),
        type=NotificationType(row.get("type", NotificationType.GENERAL.value)),
        is_read=bool(row.get("is_read", False)),
        created_at=parse_timestamp(row.get("created_at")),
    )
