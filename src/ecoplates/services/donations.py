"""Donation lifecycle business logic."""

import logging
from dataclasses import dataclass, fields
from typing import Protocol
from uuid import UUID

from ecoplates.domain.errors import (
    DonationNotEditableError,
    DonationNotFoundError,
    DonationUnavailableError,
    NgoNotApprovedError,
    PermissionDeniedError,
    ValidationError,
)
from ecoplates.domain.models import Donation, DonationDetails, DonationStatus, Role
from ecoplates.domain.sessions import SessionContext

_logger = logging.getLogger(__name__)

CLAIMED_STATUSES = (DonationStatus.REQUESTED, DonationStatus.COMPLETED)


class DonationRepository(Protocol):
    """Persistence interface for donations."""

    def create_donation(self, donor_id: UUID, details: DonationDetails) -> Donation:
        """Insert an available donation and return it."""

    def get_donation(self, donation_id: UUID) -> Donation | None:
        """Return a donation by id, if present."""

    def update_available_details(
        self, donation_id: UUID, details: DonationDetails
    ) -> Donation | None:
        """Replace the details of a donation that is still available."""

    def claim_available(self, donation_id: UUID, ngo_id: UUID) -> Donation | None:
        """Mark an available donation as requested by an NGO.

        Returns None when the donation was not available at write time.
        """

    def delete_donation(self, donation_id: UUID) -> None:
        """Remove a donation row."""

    def list_by_donor(self, donor_id: UUID) -> list[Donation]:
        """Return a donor's donations, newest first."""

    def list_by_status(self, status: DonationStatus) -> list[Donation]:
        """Return donations with the given status, newest first."""

    def list_by_ngo(
        self, ngo_id: UUID, statuses: tuple[DonationStatus, ...]
    ) -> list[Donation]:
        """Return donations claimed by an NGO in any of the statuses."""


def validate_details(details: DonationDetails) -> None:
    """Require every field to be filled in; values are stored as typed."""
    for entry in fields(details):
        if not getattr(details, entry.name).strip():
            label = entry.name.replace("_", " ")
            raise ValidationError(f"{label.capitalize()} is required")


def _require_role(session: SessionContext, role: Role) -> None:
    if session.role is not role:
        raise PermissionDeniedError(f"Only {role} accounts can do this")


@dataclass
class DonationService:
    """Service for donor and NGO donation actions."""

    repository: DonationRepository

    def create(self, session: SessionContext, details: DonationDetails) -> Donation:
        """Post a new available donation for the acting donor."""
        _require_role(session, Role.DONOR)
        validate_details(details)
        donation = self.repository.create_donation(session.profile.id, details)
        _logger.info(
            "Donation created: donation_id=%s donor_id=%s",
            donation.id,
            donation.donor_id,
        )
        return donation

    def update(
        self, session: SessionContext, donation_id: UUID, details: DonationDetails
    ) -> Donation:
        """Replace all donor-editable fields while the donation is available."""
        current = self._get_owned(session, donation_id)
        if not current.is_editable:
            raise DonationNotEditableError(
                f"Donation is {current.status} and can no longer be edited"
            )
        validate_details(details)
        updated = self.repository.update_available_details(donation_id, details)
        if updated is None:
            raise DonationNotEditableError("Donation can no longer be edited")
        return updated

    def delete(self, session: SessionContext, donation_id: UUID) -> None:
        """Delete one of the donor's donations regardless of status."""
        self._get_owned(session, donation_id)
        self.repository.delete_donation(donation_id)
        _logger.info("Donation deleted: donation_id=%s", donation_id)

    def list_for_donor(self, session: SessionContext) -> list[Donation]:
        """Return the acting donor's donations."""
        _require_role(session, Role.DONOR)
        return self.repository.list_by_donor(session.profile.id)

    def list_available(self) -> list[Donation]:
        """Return every donation still open for claiming."""
        return self.repository.list_by_status(DonationStatus.AVAILABLE)

    def list_claimed(self, session: SessionContext) -> list[Donation]:
        """Return donations the acting NGO requested or completed."""
        _require_role(session, Role.NGO)
        return self.repository.list_by_ngo(session.profile.id, CLAIMED_STATUSES)

    def claim(self, session: SessionContext, donation_id: UUID) -> Donation:
        """Request an available donation on behalf of an approved NGO."""
        _require_role(session, Role.NGO)
        if not session.profile.is_approved:
            raise NgoNotApprovedError(
                "Your NGO account is awaiting admin approval"
            )
        claimed = self.repository.claim_available(donation_id, session.profile.id)
        if claimed is not None:
            _logger.info(
                "Donation claimed: donation_id=%s ngo_id=%s",
                donation_id,
                session.profile.id,
            )
            return claimed
        if self.repository.get_donation(donation_id) is None:
            raise DonationNotFoundError("Donation not found")
        _logger.info("Claim lost: donation_id=%s", donation_id)
        raise DonationUnavailableError("Donation is no longer available")

    def _get_owned(self, session: SessionContext, donation_id: UUID) -> Donation:
        _require_role(session, Role.DONOR)
        donation = self.repository.get_donation(donation_id)
        if donation is None:
            raise DonationNotFoundError("Donation not found")
        if donation.donor_id != session.profile.id:
            raise PermissionDeniedError("You can only manage your own donations")
        return donation
