"""Donor endpoints for managing posted donations."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from ecoplates.api.deps import get_container, require_session
from ecoplates.api.schemas import DonationRequest  # noqa: TC001
from ecoplates.domain.sessions import SessionContext  # noqa: TC001
from ecoplates.services.presenters import serialize_owned_donation

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer

router = APIRouter(prefix="/donor", tags=["donor"])


def _donor_listing(container: AppContainer, session: SessionContext) -> list[object]:
    donations = container.donation_service.list_for_donor(session)
    return [serialize_owned_donation(donation) for donation in donations]


@router.get("/donations")
async def list_donations(
    request: Request, session: SessionContext = Depends(require_session)
) -> dict[str, object]:
    """Return the caller's donations, newest first."""
    container: AppContainer = get_container(request)
    return {"donations": _donor_listing(container, session)}


@router.post("/donations", status_code=status.HTTP_201_CREATED)
async def create_donation(
    payload: DonationRequest,
    request: Request,
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Post a new available donation."""
    container: AppContainer = get_container(request)
    donation = container.donation_service.create(session, payload.to_details())
    return {
        "donation": serialize_owned_donation(donation),
        "donations": _donor_listing(container, session),
    }


@router.put("/donations/{donation_id}")
async def update_donation(
    donation_id: UUID,
    payload: DonationRequest,
    request: Request,
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Replace the fields of a donation that is still available."""
    container: AppContainer = get_container(request)
    donation = container.donation_service.update(
        session, donation_id, payload.to_details()
    )
    return {
        "donation": serialize_owned_donation(donation),
        "donations": _donor_listing(container, session),
    }


@router.delete("/donations/{donation_id}")
async def delete_donation(
    donation_id: UUID,
    request: Request,
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Delete one of the caller's donations in any status."""
    container: AppContainer = get_container(request)
    container.donation_service.delete(session, donation_id)
    return {"donations": _donor_listing(container, session)}
