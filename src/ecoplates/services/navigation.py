"""Screen selection for the application shell."""

from enum import StrEnum
from typing import assert_never

from ecoplates.domain.models import Role
from ecoplates.domain.sessions import SessionContext


class AuthView(StrEnum):
    """Screens reachable without a session."""

    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"


class DashboardView(StrEnum):
    """Navigation selections available once signed in."""

    HOME = "home"
    DONOR = "donor"
    NGO = "ngo"
    ADMIN = "admin"


class Screen(StrEnum):
    """Screens the shell can show."""

    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    DONOR_DASHBOARD = "donor_dashboard"
    NGO_DASHBOARD = "ngo_dashboard"
    ADMIN_DASHBOARD = "admin_dashboard"


def dashboard_for(role: Role) -> DashboardView:
    """Return the dashboard selection owned by a role."""
    match role:
        case Role.DONOR:
            return DashboardView.DONOR
        case Role.NGO:
            return DashboardView.NGO
        case Role.ADMIN:
            return DashboardView.ADMIN
        case _:
            assert_never(role)


def navigation_items(role: Role) -> list[DashboardView]:
    """Return the navigation entries shown to a role."""
    return [DashboardView.HOME, dashboard_for(role)]


def resolve_screen(
    session: SessionContext | None,
    selection: DashboardView = DashboardView.HOME,
    auth_view: AuthView = AuthView.LANDING,
) -> Screen:
    """Pick the screen for the current session and navigation selection."""
    if session is None:
        match auth_view:
            case AuthView.LOGIN:
                return Screen.LOGIN
            case AuthView.SIGNUP:
                return Screen.SIGNUP
            case AuthView.LANDING:
                return Screen.LANDING
            case _:
                assert_never(auth_view)

    if selection is not dashboard_for(session.role):
        return Screen.LANDING
    match session.role:
        case Role.DONOR:
            return Screen.DONOR_DASHBOARD
        case Role.NGO:
            return Screen.NGO_DASHBOARD
        case Role.ADMIN:
            return Screen.ADMIN_DASHBOARD
        case _:
            assert_never(session.role)
