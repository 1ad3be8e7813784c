"""Shell endpoints returning the screen for the caller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from ecoplates.api.deps import get_container, optional_session, require_session
from ecoplates.domain.sessions import SessionContext  # noqa: TC001
from ecoplates.services.navigation import (
    AuthView,
    DashboardView,
    navigation_items,
)

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def dashboard(
    request: Request,
    view: DashboardView = DashboardView.HOME,
    auth_view: AuthView = AuthView.LANDING,
    session: SessionContext | None = Depends(optional_session),
) -> dict[str, object]:
    """Return the view model for the selected screen."""
    container: AppContainer = get_container(request)
    return container.dashboard_service.render(session, view, auth_view)


@router.get("/navigation")
async def navigation(
    session: SessionContext = Depends(require_session),
) -> dict[str, object]:
    """Return the navigation entries for the caller's role."""
    return {"items": [item.value for item in navigation_items(session.role)]}
