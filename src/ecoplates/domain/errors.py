"""Domain errors raised by EcoPlates services."""


class EcoPlatesError(Exception):
    """Base class for expected, user-facing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EcoPlatesError):
    """Input rejected before reaching the backend."""


class AuthError(EcoPlatesError):
    """Sign-in, sign-up or token resolution failed."""


class PermissionDeniedError(EcoPlatesError):
    """The acting profile may not perform the operation."""


class NgoNotApprovedError(PermissionDeniedError):
    """An NGO tried to claim before an admin approved it."""


class ProfileNotFoundError(EcoPlatesError):
    """No profile row exists for the given id."""


class DonationNotFoundError(EcoPlatesError):
    """No donation row exists for the given id."""


class DonationNotEditableError(EcoPlatesError):
    """The donation has left the available state."""


class DonationUnavailableError(EcoPlatesError):
    """The donation was claimed by someone else or is no longer available."""


class NotificationNotFoundError(EcoPlatesError):
    """No notification with the given id belongs to the user."""
