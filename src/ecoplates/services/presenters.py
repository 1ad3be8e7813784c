"""JSON-ready representations of domain objects."""

from datetime import datetime

from ecoplates.domain.models import Donation, DonationStatus, Notification, Profile
from ecoplates.domain.stats import LandingStats


def serialize_donation(donation: Donation) -> dict[str, object]:
    return {
        "id": str(donation.id),
        "donor_id": str(donation.donor_id),
        **donation.details.as_row(),
        "status": donation.status.value,
        "ngo_id": str(donation.ngo_id) if donation.ngo_id else None,
        "created_at": _isoformat(donation.created_at),
        "updated_at": _isoformat(donation.updated_at),
    }


def serialize_owned_donation(donation: Donation) -> dict[str, object]:
    """Donor-facing row; only available donations offer an edit action."""
    return {**serialize_donation(donation), "can_edit": donation.is_editable}


def serialize_claimable_donation(
    donation: Donation, viewer: Profile
) -> dict[str, object]:
    """NGO-facing row; the claim action needs an approved NGO."""
    return {
        **serialize_donation(donation),
        "can_claim": viewer.can_claim and donation.status is DonationStatus.AVAILABLE,
    }


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "id": str(profile.id),
        "email": profile.email,
        "full_name": profile.full_name,
        "role": profile.role.value,
        "phone": profile.phone,
        "address": profile.address,
        "organization_name": profile.organization_name,
        "is_approved": profile.is_approved,
        "created_at": _isoformat(profile.created_at),
        "updated_at": _isoformat(profile.updated_at),
    }


def serialize_notification(notification: Notification) -> dict[str, object]:
    return {
        "id": str(notification.id),
        "user_id": str(notification.user_id),
        "title": notification.title,
        "message": notification.message,
        "type": notification.type.value,
        "is_read": notification.is_read,
        "created_at": _isoformat(notification.created_at),
    }


def serialize_stats(stats: LandingStats) -> dict[str, int]:
    return {
        "total_donations": stats.total_donations,
        "active_donors": stats.active_donors,
        "registered_ngos": stats.registered_ngos,
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
