"""Authentication and session services."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from ecoplates.domain.errors import AuthError, ValidationError
from ecoplates.domain.models import Role
from ecoplates.domain.sessions import (
    AuthTokens,
    AuthUser,
    SessionChange,
    SessionContext,
    SessionEvent,
    SignUpForm,
)
from ecoplates.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)

DEFAULT_MIN_PASSWORD_LENGTH = 6
SIGNUP_ROLES = frozenset({Role.DONOR, Role.NGO})

SessionListener = Callable[[SessionChange], None]


class AuthGateway(Protocol):
    """Interface to the hosted authentication backend."""

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, AuthTokens]:
        """Exchange credentials for a user and tokens."""

    def sign_up(
        self, email: str, password: str, metadata: dict[str, str]
    ) -> AuthUser:
        """Register a user with profile metadata."""

    def sign_out(self, access_token: str) -> None:
        """Revoke an access token."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user owning an access token, if still valid."""


def validate_sign_up(
    form: SignUpForm, min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH
) -> None:
    """Reject a sign-up form before any network call is made."""
    if form.password != form.confirm_password:
        raise ValidationError("Passwords do not match")
    if len(form.password) < min_password_length:
        raise ValidationError(
            f"Password must be at least {min_password_length} characters"
        )
    if form.role not in SIGNUP_ROLES:
        raise ValidationError("Only donor and NGO accounts can sign up")
    if form.role is Role.NGO and not form.organization_name.strip():
        raise ValidationError("Organization name is required for NGOs")


@dataclass
class AuthService:
    """Forward credentials to the auth backend and mirror the session."""

    gateway: AuthGateway
    profiles: ProfileRepository
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH
    listeners: list[SessionListener] = field(default_factory=list)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a session listener and return its unsubscribe callable."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def sign_up(self, form: SignUpForm) -> AuthUser:
        """Validate the form locally, then register with the backend."""
        validate_sign_up(form, self.min_password_length)
        try:
            user = self.gateway.sign_up(form.email, form.password, form.metadata())
        except Exception as exc:
            _logger.warning("Sign up failed: email=%s", form.email)
            raise AuthError(_error_message(exc, "Failed to sign up")) from exc
        _logger.info("User signed up: user_id=%s role=%s", user.id, form.role)
        self._notify(SessionChange(event=SessionEvent.SIGNED_UP, user=user))
        return user

    def sign_in(self, email: str, password: str) -> SessionContext:
        """Exchange credentials for a session with a loaded profile."""
        try:
            user, tokens = self.gateway.sign_in(email, password)
        except Exception as exc:
            _logger.warning("Sign in failed: email=%s", email)
            raise AuthError(_error_message(exc, "Failed to sign in")) from exc
        session = self._build_session(user, tokens.access_token)
        self._notify(
            SessionChange(event=SessionEvent.SIGNED_IN, user=user, session=session)
        )
        return session

    def sign_out(self, session: SessionContext) -> None:
        """Revoke the session's access token."""
        self.gateway.sign_out(session.access_token)
        self._notify(SessionChange(event=SessionEvent.SIGNED_OUT, user=session.user))

    def resolve(self, access_token: str) -> SessionContext:
        """Rebuild the session for a bearer token, reloading the profile."""
        try:
            user = self.gateway.get_user(access_token)
        except Exception as exc:
            raise AuthError("Invalid or expired session") from exc
        if user is None:
            raise AuthError("Invalid or expired session")
        return self._build_session(user, access_token)

    def _build_session(self, user: AuthUser, access_token: str) -> SessionContext:
        profile = self.profiles.get_profile(user.id)
        if profile is None:
            raise AuthError("No profile found for this account")
        return SessionContext(user=user, profile=profile, access_token=access_token)

    def _notify(self, change: SessionChange) -> None:
        for listener in list(self.listeners):
            try:
                listener(change)
            except Exception:
                _logger.exception("Session listener failed: event=%s", change.event)


def log_session_change(change: SessionChange) -> None:
    """Session listener that records lifecycle events."""
    _logger.info("Session %s: user_id=%s", change.event, change.user.id)


def _error_message(exc: Exception, default: str) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or default
