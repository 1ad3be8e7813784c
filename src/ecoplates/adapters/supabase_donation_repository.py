"""Supabase-backed donation repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from ecoplates.adapters.rows import parse_timestamp, parse_uuid
from ecoplates.domain.models import Donation, DonationDetails, DonationStatus
from ecoplates.services.donations import DonationRepository


@dataclass
class SupabaseDonationRepository(DonationRepository):
    """Supabase implementation for donation persistence."""

    client: Client

    def create_donation(self, donor_id: UUID, details: DonationDetails) -> Donation:
        """Insert an available donation and return it."""
        response = (
            self.client.table("donations")
            .insert(
                {
                    "donor_id": str(donor_id),
                    **details.as_row(),
                    "status": DonationStatus.AVAILABLE.value,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create donation in Supabase")
        return _row_to_donation(response.data[0])

    def get_donation(self, donation_id: UUID) -> Donation | None:
        """Return a donation by id, if present."""
        response = (
            self.client.table("donations")
            .select("*")
            .eq("id", str(donation_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _row_to_donation(response.data[0])

    def update_available_details(
        self, donation_id: UUID, details: DonationDetails
    ) -> Donation | None:
        """Replace the details of a donation that is still available."""
        response = (
            self.client.table("donations")
            .update({**details.as_row(), "updated_at": _now()})
            .eq("id", str(donation_id))
            .eq("status", DonationStatus.AVAILABLE.value)
            .execute()
        )
        if not response.data:
            return None
        return _row_to_donation(response.data[0])

    def claim_available(self, donation_id: UUID, ngo_id: UUID) -> Donation | None:
        """Conditionally move a donation from available to requested."""
        response = (
            self.client.table("donations")
            .update(
                {
                    "status": DonationStatus.REQUESTED.value,
                    "ngo_id": str(ngo_id),
                    "updated_at": _now(),
                }
            )
            .eq("id", str(donation_id))
            .eq("status", DonationStatus.AVAILABLE.value)
            .execute()
        )
        if not response.data:
            return None
        return _row_to_donation(response.data[0])

    def delete_donation(self, donation_id: UUID) -> None:
        """Remove a donation row."""
        self.client.table("donations").delete().eq("id", str(donation_id)).execute()

    def list_by_donor(self, donor_id: UUID) -> list[Donation]:
        """Return a donor's donations, newest first."""
        response = (
            self.client.table("donations")
            .select("*")
            .eq("donor_id", str(donor_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_donation(row) for row in response.data or []]

    def list_by_status(self, status: DonationStatus) -> list[Donation]:
        """Return donations with the given status, newest first."""
        response = (
            self.client.table("donations")
            .select("*")
            .eq("status", status.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_donation(row) for row in response.data or []]

    def list_by_ngo(
        self, ngo_id: UUID, statuses: tuple[DonationStatus, ...]
    ) -> list[Donation]:
        """Return donations claimed by an NGO in any of the statuses."""
        response = (
            self.client.table("donations")
            .select("*")
            .eq("ngo_id", str(ngo_id))
            .in_("status", [status.value for status in statuses])
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_donation(row) for row in response.data or []]


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()


def _row_to_donation(row: dict[str, object]) -> Donation:
    return Donation(
        id=UUID(str(row["id"])),
        donor_id=UUID(str(row["donor_id"])),
        details=DonationDetails(
            food_type=str(row.get("food_type") or ""),
            quantity=str(row.get("quantity") or ""),
            description=str(row.get("description") or ""),
            pickup_location=str(row.get("pickup_location") or ""),
            pickup_time=str(row.get("pickup_time") or ""),
        ),
        status=DonationStatus(row.get("status", DonationStatus.AVAILABLE.value)),
        ngo_id=parse_uuid(row.get("ngo_id")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
