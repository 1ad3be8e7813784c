"""Supabase Auth gateway."""

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from ecoplates.domain.sessions import AuthTokens, AuthUser
from ecoplates.services.auth import AuthGateway


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Forward credentials to Supabase Auth.

    A signed-in Supabase client keeps the user's session and rewrites its own
    Authorization header, so every sign-in and sign-up runs on a throwaway
    client from ``client_factory`` (built from the public anon key). Token
    lookup and revocation go through ``admin_client``, which holds the service
    key and never signs in.
    """

    client_factory: Callable[[], Client]
    admin_client: Client

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, AuthTokens]:
        """Exchange credentials for a user and tokens."""
        response = self.client_factory().auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        if response.user is None or response.session is None:
            raise RuntimeError("Supabase returned no session")
        return _to_auth_user(response.user), AuthTokens(
            access_token=response.session.access_token,
            refresh_token=response.session.refresh_token,
        )

    def sign_up(
        self, email: str, password: str, metadata: dict[str, str]
    ) -> AuthUser:
        """Register a user; a database trigger creates the profile row."""
        response = self.client_factory().auth.sign_up(
            {"email": email, "password": password, "options": {"data": metadata}}
        )
        if response.user is None:
            raise RuntimeError("Supabase returned no user")
        return _to_auth_user(response.user)

    def sign_out(self, access_token: str) -> None:
        """Revoke an access token."""
        self.admin_client.auth.admin.sign_out(access_token)

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user owning an access token, if still valid."""
        response = self.admin_client.auth.get_user(access_token)
        if response is None or response.user is None:
            return None
        return _to_auth_user(response.user)


def _to_auth_user(user) -> AuthUser:  # type: ignore[no-untyped-def]
    return AuthUser(id=UUID(str(user.id)), email=str(user.email or ""))
