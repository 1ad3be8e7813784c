"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from ecoplates.domain.sessions import SessionContext  # noqa: TC001

if TYPE_CHECKING:
    from ecoplates.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def optional_session(
    request: Request,
    authorization: str | None = Header(default=None),
) -> SessionContext | None:
    """Resolve the bearer token to a session when one is supplied."""
    token = _bearer_token(authorization)
    if token is None:
        return None
    return get_container(request).auth_service.resolve(token)


async def require_session(
    session: SessionContext | None = Depends(optional_session),
) -> SessionContext:
    """Require an authenticated session."""
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session
