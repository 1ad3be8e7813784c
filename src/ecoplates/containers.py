"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, ClientOptions, create_client

from ecoplates.adapters.supabase_auth_gateway import SupabaseAuthGateway
from ecoplates.adapters.supabase_donation_repository import (
    SupabaseDonationRepository,
)
from ecoplates.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from ecoplates.adapters.supabase_profile_repository import SupabaseProfileRepository
from ecoplates.adapters.supabase_stats_repository import SupabaseStatsRepository
from ecoplates.config import Settings
from ecoplates.services.admin import AdminService
from ecoplates.services.auth import AuthService, log_session_change
from ecoplates.services.dashboard import DashboardService
from ecoplates.services.donations import DonationService
from ecoplates.services.notifications import NotificationService
from ecoplates.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    donation_service: DonationService
    admin_service: AdminService
    stats_service: StatsService
    notification_service: NotificationService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    donation_repository = SupabaseDonationRepository(supabase_client)
    stats_repository = SupabaseStatsRepository(supabase_client)
    notification_repository = SupabaseNotificationRepository(supabase_client)
    auth_service = AuthService(
        gateway=SupabaseAuthGateway(
            client_factory=lambda: new_auth_client(resolved_settings),
            admin_client=supabase_client,
        ),
        profiles=profile_repository,
        min_password_length=resolved_settings.min_password_length,
    )
    auth_service.subscribe(log_session_change)
    donation_service = DonationService(donation_repository)
    admin_service = AdminService(profile_repository)
    stats_service = StatsService(stats_repository)
    notification_service = NotificationService(notification_repository)
    dashboard_service = DashboardService(
        donation_service=donation_service,
        admin_service=admin_service,
        stats_service=stats_service,
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        donation_service=donation_service,
        admin_service=admin_service,
        stats_service=stats_service,
        notification_service=notification_service,
        dashboard_service=dashboard_service,
    )


def new_auth_client(settings: Settings) -> Client:
    """Create a single-use anon-key client for one sign-in or sign-up."""
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
