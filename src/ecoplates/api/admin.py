"""Admin endpoints for vetting NGO accounts."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from ecoplates.api.deps import get_container, require_session
from ecoplates.domain.sessions import SessionContext  # noqa: TC001
from ecoplates.services.presenters import serialize_profile

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _pending(container: AppContainer, session: SessionContext) -> list[object]:
    return [
        serialize_profile(profile)
        for profile in container.admin_service.list_pending_ngos(session)
    ]


@router.get("/ngos/pending")
async def pending_ngos(
    request: Request, session: SessionContext = Depends(require_session)
) -> dict[str, object]:
    """Return NGO applications awaiting review."""
    container: AppContainer = get_container(request)
    return {"pending_ngos": _pending(container, session)}


@router.post("/ngos/{ngo_id}/approve")
async def approve_ngo(
    ngo_id: UUID,
    request: Request,
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Approve an NGO so it can claim donations."""
    container: AppContainer = get_container(request)
    profile = container.admin_service.approve_ngo(session, ngo_id)
    return {
        "profile": serialize_profile(profile),
        "pending_ngos": _pending(container, session),
    }


@router.delete("/ngos/{ngo_id}")
async def reject_ngo(
    ngo_id: UUID,
    request: Request,
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Reject an NGO application by deleting its profile."""
    container: AppContainer = get_container(request)
    container.admin_service.reject_ngo(session, ngo_id)
    return {"pending_ngos": _pending(container, session)}
