"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from ecoplates.adapters.rows import optional_text, parse_timestamp
from ecoplates.domain.models import Profile, Role
from ecoplates.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, profile_id: UUID) -> Profile | None:
        """Return the profile for an auth user id, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", str(profile_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _row_to_profile(response.data[0])

    def list_pending_ngos(self) -> list[Profile]:
        """Return unapproved NGO profiles, newest first."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("role", Role.NGO.value)
            .eq("is_approved", False)
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_profile(row) for row in response.data or []]

    def set_approved(self, profile_id: UUID, approved: bool) -> Profile | None:
        """Update the approval flag and return the updated profile."""
        response = (
            self.client.table("profiles")
            .update(
                {
                    "is_approved": approved,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(profile_id))
            .execute()
        )
        if not response.data:
            return None
        return _row_to_profile(response.data[0])

    def delete_profile(self, profile_id: UUID) -> None:
        """Remove a profile row."""
        self.client.table("profiles").delete().eq("id", str(profile_id)).execute()


def _row_to_profile(row: dict[str, object]) -> Profile:
    return Profile(
        id=UUID(str(row["id"])),
        email=str(row.get("email") or ""),
        full_name=str(row.get("full_name") or ""),
        role=Role(row["role"]),
        is_approved=bool(row.get("is_approved", False)),
        phone=optional_text(row.get("phone")),
        address=optional_text(row.get("address")),
        organization_name=optional_text(row.get("organization_name")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
