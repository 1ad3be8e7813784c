"""Profile persistence interface."""

from typing import Protocol
from uuid import UUID

from ecoplates.domain.models import Profile


class ProfileRepository(Protocol):
    """Persistence interface for the profiles table."""

    def get_profile(self, profile_id: UUID) -> Profile | None:
        """Return the profile for an auth user id, if present."""

    def list_pending_ngos(self) -> list[Profile]:
        """Return unapproved NGO profiles, newest first."""

    def set_approved(self, profile_id: UUID, approved: bool) -> Profile | None:
        """Update the approval flag and return the updated profile."""

    def delete_profile(self, profile_id: UUID) -> None:
        """Remove a profile row."""
