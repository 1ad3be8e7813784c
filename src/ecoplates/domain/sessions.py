"""Domain models for authenticated sessions."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from ecoplates.domain.models import Profile, Role


@dataclass(frozen=True)
class AuthUser:
    """Identity issued by the auth backend."""

    id: UUID
    email: str


@dataclass(frozen=True)
class AuthTokens:
    """Tokens returned by a successful sign-in."""

    access_token: str
    refresh_token: str | None = None


@dataclass(frozen=True)
class SessionContext:
    """Authenticated user plus the profile loaded for this request."""

    user: AuthUser
    profile: Profile
    access_token: str

    @property
    def role(self) -> Role:
        return self.profile.role


@dataclass(frozen=True)
class SignUpForm:
    """Raw sign-up input."""

    email: str
    password: str
    confirm_password: str
    full_name: str
    role: Role = Role.DONOR
    phone: str = ""
    address: str = ""
    organization_name: str = ""

    def metadata(self) -> dict[str, str]:
        """Return the user metadata forwarded to the auth backend."""
        return {
            "full_name": self.full_name,
            "role": self.role.value,
            "phone": self.phone,
            "address": self.address,
            "organization_name": self.organization_name,
        }


class SessionEvent(StrEnum):
    """Session lifecycle events."""

    SIGNED_IN = "signed_in"
    SIGNED_UP = "signed_up"
    SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class SessionChange:
    """Notification delivered to session listeners."""

    event: SessionEvent
    user: AuthUser
    session: SessionContext | None = None
