"""View models for each screen of the application shell."""

from dataclasses import dataclass
from typing import assert_never

from ecoplates.domain.sessions import SessionContext
from ecoplates.services.admin import AdminService
from ecoplates.services.donations import DonationService
from ecoplates.services.navigation import (
    AuthView,
    DashboardView,
    Screen,
    navigation_items,
    resolve_screen,
)
from ecoplates.services.presenters import (
    serialize_claimable_donation,
    serialize_donation,
    serialize_owned_donation,
    serialize_profile,
    serialize_stats,
)
from ecoplates.services.stats import StatsService


@dataclass
class DashboardService:
    """Compose per-role screens from the underlying services."""

    donation_service: DonationService
    admin_service: AdminService
    stats_service: StatsService

    def render(
        self,
        session: SessionContext | None,
        selection: DashboardView = DashboardView.HOME,
        auth_view: AuthView = AuthView.LANDING,
    ) -> dict[str, object]:
        """Return the view model for the screen the shell would show."""
        screen = resolve_screen(session, selection, auth_view)
        view: dict[str, object] = {"screen": screen.value}
        if session is not None:
            view["navigation"] = [item.value for item in navigation_items(session.role)]
            view["profile"] = serialize_profile(session.profile)
        match screen:
            case Screen.LANDING:
                view["stats"] = serialize_stats(self.stats_service.get_landing_stats())
            case Screen.LOGIN | Screen.SIGNUP:
                pass
            case Screen.DONOR_DASHBOARD:
                view.update(self._donor_view(session))
            case Screen.NGO_DASHBOARD:
                view.update(self._ngo_view(session))
            case Screen.ADMIN_DASHBOARD:
                view.update(self._admin_view(session))
            case _:
                assert_never(screen)
        return view

    def _donor_view(self, session: SessionContext) -> dict[str, object]:
        donations = self.donation_service.list_for_donor(session)
        return {
            "donations": [serialize_owned_donation(donation) for donation in donations]
        }

    def _ngo_view(self, session: SessionContext) -> dict[str, object]:
        if not session.profile.is_approved:
            return {"pending_approval": True}
        available = self.donation_service.list_available()
        requested = self.donation_service.list_claimed(session)
        return {
            "pending_approval": False,
            "available": [
                serialize_claimable_donation(donation, session.profile)
                for donation in available
            ],
            "requested": [serialize_donation(donation) for donation in requested],
        }

    def _admin_view(self, session: SessionContext) -> dict[str, object]:
        pending = self.admin_service.list_pending_ngos(session)
        return {"pending_ngos": [serialize_profile(profile) for profile in pending]}
