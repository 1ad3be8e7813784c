"""Sign-up, sign-in and session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from ecoplates.api.deps import get_container, require_session
from ecoplates.api.schemas import LoginRequest, SignUpRequest  # noqa: TC001
from ecoplates.domain.sessions import SessionContext  # noqa: TC001
from ecoplates.services.navigation import navigation_items
from ecoplates.services.presenters import serialize_profile

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def sign_up(payload: SignUpRequest, request: Request) -> dict[str, object]:
    """Create an account; NGO accounts start unapproved."""
    container: AppContainer = get_container(request)
    user = container.auth_service.sign_up(payload.to_form())
    return {
        "user": {"id": str(user.id), "email": user.email},
        "message": "Account created successfully",
    }


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a bearer token and the caller's profile."""
    container: AppContainer = get_container(request)
    session = container.auth_service.sign_in(payload.email, payload.password)
    return {
        "access_token": session.access_token,
        "token_type": "bearer",
        "profile": serialize_profile(session.profile),
    }


@router.post("/logout")
async def logout(
    request: Request, session: SessionContext = Depends(require_session)
) -> dict[str, str]:
    """Revoke the caller's token."""
    container: AppContainer = get_container(request)
    container.auth_service.sign_out(session)
    return {"status": "ok"}


@router.get("/me")
async def me(session: SessionContext = Depends(require_session)) -> dict[str, object]:
    """Return the caller's freshly loaded profile."""
    return {
        "profile": serialize_profile(session.profile),
        "navigation": [item.value for item in navigation_items(session.role)],
    }
