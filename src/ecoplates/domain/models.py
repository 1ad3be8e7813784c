"""Domain models for EcoPlates."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class Role(StrEnum):
    """Account roles."""

    DONOR = "donor"
    NGO = "ngo"
    ADMIN = "admin"


class DonationStatus(StrEnum):
    """Lifecycle states of a donation."""

    AVAILABLE = "available"
    REQUESTED = "requested"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class NotificationType(StrEnum):
    """Kinds of user notifications."""

    DONATION_POSTED = "donation_posted"
    DONATION_REQUESTED = "donation_requested"
    DONATION_COMPLETED = "donation_completed"
    NGO_APPROVED = "ngo_approved"
    GENERAL = "general"


@dataclass(frozen=True)
class Profile:
    """Represents a row of the profiles table."""

    id: UUID
    email: str
    full_name: str
    role: Role
    is_approved: bool
    phone: str | None = None
    address: str | None = None
    organization_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def can_claim(self) -> bool:
        """Return True when the profile is an approved NGO."""
        return self.role is Role.NGO and self.is_approved


@dataclass(frozen=True)
class DonationDetails:
    """Donor-editable donation fields, all free text."""

    food_type: str
    quantity: str
    description: str
    pickup_location: str
    pickup_time: str

    def as_row(self) -> dict[str, str]:
        """Return the fields as a table payload."""
        return {
            "food_type": self.food_type,
            "quantity": self.quantity,
            "description": self.description,
            "pickup_location": self.pickup_location,
            "pickup_time": self.pickup_time,
        }


@dataclass(frozen=True)
class Donation:
    """Represents a posted food donation."""

    id: UUID
    donor_id: UUID
    details: DonationDetails
    status: DonationStatus
    ngo_id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_editable(self) -> bool:
        """Donors may only edit donations nobody has claimed yet."""
        return self.status is DonationStatus.AVAILABLE


@dataclass(frozen=True)
class Notification:
    """Represents a user notification."""

    id: UUID
    user_id: UUID
    title: str
    message: str
    type: NotificationType
    is_read: bool
    created_at: datetime | None = None
