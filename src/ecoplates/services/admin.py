"""Admin service for NGO vetting."""

import logging
from dataclasses import dataclass
from uuid import UUID

from ecoplates.domain.errors import PermissionDeniedError, ProfileNotFoundError
from ecoplates.domain.models import Profile, Role
from ecoplates.domain.sessions import SessionContext
from ecoplates.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """Service backing the admin dashboard."""

    profiles: ProfileRepository

    def list_pending_ngos(self, session: SessionContext) -> list[Profile]:
        """Return NGO profiles awaiting approval."""
        _require_admin(session)
        return self.profiles.list_pending_ngos()

    def approve_ngo(self, session: SessionContext, ngo_id: UUID) -> Profile:
        """Flip an NGO's approval flag so it can claim donations."""
        _require_admin(session)
        profile = self._get_ngo(ngo_id)
        updated = self.profiles.set_approved(profile.id, approved=True)
        if updated is None:
            raise ProfileNotFoundError("NGO profile not found")
        _logger.info("NGO approved: profile_id=%s", ngo_id)
        return updated

    def reject_ngo(self, session: SessionContext, ngo_id: UUID) -> None:
        """Remove an NGO application entirely."""
        _require_admin(session)
        self._get_ngo(ngo_id)
        self.profiles.delete_profile(ngo_id)
        _logger.info("NGO rejected: profile_id=%s", ngo_id)

    def _get_ngo(self, ngo_id: UUID) -> Profile:
        profile = self.profiles.get_profile(ngo_id)
        if profile is None or profile.role is not Role.NGO:
            raise ProfileNotFoundError("NGO profile not found")
        return profile


def _require_admin(session: SessionContext) -> None:
    if session.role is not Role.ADMIN:
        raise PermissionDeniedError(
            "You do not have permission to access the admin panel"
        )
