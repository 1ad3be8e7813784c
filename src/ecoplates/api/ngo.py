"""NGO endpoints for browsing and claiming donations."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ecoplates.api.deps import get_container, require_session
from ecoplates.domain.models import Role
from ecoplates.domain.sessions import SessionContext  # noqa: TC001
from ecoplates.services.presenters import (
    serialize_claimable_donation,
    serialize_donation,
)

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer


async def require_ngo(
    session: SessionContext = Depends(require_session),
) -> SessionContext:
    """Restrict NGO endpoints to NGO accounts."""
    if session.role is not Role.NGO:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only NGO accounts can do this",
        )
    return session


router = APIRouter(prefix="/ngo", tags=["ngo"])


def _available(container: AppContainer, session: SessionContext) -> list[object]:
    return [
        serialize_claimable_donation(donation, session.profile)
        for donation in container.donation_service.list_available()
    ]


def _requested(container: AppContainer, session: SessionContext) -> list[object]:
    return [
        serialize_donation(donation)
        for donation in container.donation_service.list_claimed(session)
    ]


@router.get("/donations/available")
async def available_donations(
    request: Request, session: SessionContext = Depends(require_ngo)
) -> dict[str, object]:
    """Return available donations; unapproved NGOs only see their pending state."""
    if not session.profile.is_approved:
        return {"pending_approval": True}
    container: AppContainer = get_container(request)
    return {
        "pending_approval": False,
        "donations": _available(container, session),
    }


@router.get("/donations/requested")
async def requested_donations(
    request: Request, session: SessionContext = Depends(require_ngo)
) -> dict[str, object]:
    """Return donations the caller requested or completed."""
    container: AppContainer = get_container(request)
    return {"donations": _requested(container, session)}


@router.post("/donations/{donation_id}/claim")
async def claim_donation(
    donation_id: UUID,
    request: Request,
    session: SessionContext = Depends(require_ngo),
) -> dict[str, object]:
    """Claim an available donation for the caller."""
    container: AppContainer = get_container(request)
    donation = container.donation_service.claim(session, donation_id)
    return {
        "donation": serialize_donation(donation),
        "available": _available(container, session),
        "requested": _requested(container, session),
    }
