"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from itertools import count
from uuid import UUID, uuid4

import pytest

from ecoplates.config import Settings
from ecoplates.containers import AppContainer
from ecoplates.domain.models import (
    Donation,
    DonationDetails,
    DonationStatus,
    Notification,
    NotificationType,
    Profile,
    Role,
)
from ecoplates.domain.sessions import AuthTokens, AuthUser, SessionContext
from ecoplates.services.admin import AdminService
from ecoplates.services.auth import AuthGateway, AuthService
from ecoplates.services.dashboard import DashboardService
from ecoplates.services.donations import DonationRepository, DonationService
from ecoplates.services.notifications import (
    NotificationRepository,
    NotificationService,
)
from ecoplates.services.profiles import ProfileRepository
from ecoplates.services.stats import StatsRepository, StatsService

_BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)
    _clock: count = field(default_factory=count)

    def add(
        self,
        role: Role,
        full_name: str = "Test User",
        *,
        is_approved: bool = False,
        organization_name: str | None = None,
        profile_id: UUID | None = None,
        email: str | None = None,
    ) -> Profile:
        resolved_id = profile_id or uuid4()
        profile = Profile(
            id=resolved_id,
            email=email or f"{resolved_id.hex[:8]}@example.com",
            full_name=full_name,
            role=role,
            is_approved=is_approved,
            organization_name=organization_name,
            created_at=_BASE_TIME + timedelta(seconds=next(self._clock)),
        )
        self.profiles[profile.id] = profile
        return profile

    def get_profile(self, profile_id: UUID) -> Profile | None:
        return self.profiles.get(profile_id)

    def list_pending_ngos(self) -> list[Profile]:
        pending = [
            profile
            for profile in self.profiles.values()
            if profile.role is Role.NGO and not profile.is_approved
        ]
        return sorted(pending, key=lambda profile: profile.created_at, reverse=True)

    def set_approved(self, profile_id: UUID, approved: bool) -> Profile | None:
        current = self.profiles.get(profile_id)
        if current is None:
            return None
        updated = Profile(
            id=current.id,
            email=current.email,
            full_name=current.full_name,
            role=current.role,
            is_approved=approved,
            phone=current.phone,
            address=current.address,
            organization_name=current.organization_name,
            created_at=current.created_at,
            updated_at=datetime.now(tz=UTC),
        )
        self.profiles[profile_id] = updated
        return updated

    def delete_profile(self, profile_id: UUID) -> None:
        self.profiles.pop(profile_id, None)


@dataclass
class InMemoryDonationRepository(DonationRepository):
    """In-memory donation repository for tests."""

    donations: dict[UUID, Donation] = field(default_factory=dict)
    _clock: count = field(default_factory=count)

    def create_donation(self, donor_id: UUID, details: DonationDetails) -> Donation:
        donation = Donation(
            id=uuid4(),
            donor_id=donor_id,
            details=details,
            status=DonationStatus.AVAILABLE,
            ngo_id=None,
            created_at=_BASE_TIME + timedelta(seconds=next(self._clock)),
        )
        self.donations[donation.id] = donation
        return donation

    def get_donation(self, donation_id: UUID) -> Donation | None:
        return self.donations.get(donation_id)

    def update_available_details(
        self, donation_id: UUID, details: DonationDetails
    ) -> Donation | None:
        current = self.donations.get(donation_id)
        if current is None or current.status is not DonationStatus.AVAILABLE:
            return None
        return self._replace(current, details=details)

    def claim_available(self, donation_id: UUID, ngo_id: UUID) -> Donation | None:
        current = self.donations.get(donation_id)
        if current is None or current.status is not DonationStatus.AVAILABLE:
            return None
        return self._replace(current, status=DonationStatus.REQUESTED, ngo_id=ngo_id)

    def delete_donation(self, donation_id: UUID) -> None:
        self.donations.pop(donation_id, None)

    def list_by_donor(self, donor_id: UUID) -> list[Donation]:
        return self._newest_first(
            donation
            for donation in self.donations.values()
            if donation.donor_id == donor_id
        )

    def list_by_status(self, status: DonationStatus) -> list[Donation]:
        return self._newest_first(
            donation
            for donation in self.donations.values()
            if donation.status is status
        )

    def list_by_ngo(
        self, ngo_id: UUID, statuses: tuple[DonationStatus, ...]
    ) -> list[Donation]:
        return self._newest_first(
            donation
            for donation in self.donations.values()
            if donation.ngo_id == ngo_id and donation.status in statuses
        )

    def set_status(self, donation_id: UUID, status: DonationStatus) -> Donation:
        return self._replace(self.donations[donation_id], status=status)

    def _replace(self, current: Donation, **changes: object) -> Donation:
        values = {
            "id": current.id,
            "donor_id": current.donor_id,
            "details": current.details,
            "status": current.status,
            "ngo_id": current.ngo_id,
            "created_at": current.created_at,
            "updated_at": datetime.now(tz=UTC),
        }
        values.update(changes)
        updated = Donation(**values)
        self.donations[current.id] = updated
        return updated

    @staticmethod
    def _newest_first(donations) -> list[Donation]:  # type: ignore[no-untyped-def]
        return sorted(donations, key=lambda donation: donation.created_at, reverse=True)


@dataclass
class InMemoryStatsRepository(StatsRepository):
    """Counts computed over the in-memory repositories."""

    profiles: InMemoryProfileRepository
    donations: InMemoryDonationRepository

    def count_donations(self) -> int:
        return len(self.donations.donations)

    def count_profiles(self, role: Role, approved: bool | None = None) -> int:
        return sum(
            1
            for profile in self.profiles.profiles.values()
            if profile.role is role
            and (approved is None or profile.is_approved == approved)
        )


@dataclass
class InMemoryNotificationRepository(NotificationRepository):
    """In-memory notification repository for tests."""

    notifications: dict[UUID, Notification] = field(default_factory=dict)

    def add(self, user_id: UUID, title: str = "Hello") -> Notification:
        notification = Notification(
            id=uuid4(),
            user_id=user_id,
            title=title,
            message="Welcome to EcoPlates",
            type=NotificationType.GENERAL,
            is_read=False,
            created_at=datetime.now(tz=UTC),
        )
        self.notifications[notification.id] = notification
        return notification

    def list_for_user(self, user_id: UUID, limit: int) -> list[Notification]:
        owned = [n for n in self.notifications.values() if n.user_id == user_id]
        return sorted(owned, key=lambda n: n.created_at, reverse=True)[:limit]

    def mark_read(self, user_id: UUID, notification_id: UUID) -> Notification | None:
        current = self.notifications.get(notification_id)
        if current is None or current.user_id != user_id:
            return None
        updated = Notification(
            id=current.id,
            user_id=current.user_id,
            title=current.title,
            message=current.message,
            type=current.type,
            is_read=True,
            created_at=current.created_at,
        )
        self.notifications[notification_id] = updated
        return updated


@dataclass
class FakeAuthGateway(AuthGateway):
    """Fake auth backend that mimics the profile-creating sign-up trigger."""

    profiles: InMemoryProfileRepository
    accounts: dict[str, tuple[str, AuthUser]] = field(default_factory=dict)
    tokens: dict[str, AuthUser] = field(default_factory=dict)
    sign_up_calls: list[dict[str, object]] = field(default_factory=list)
    revoked: list[str] = field(default_factory=list)

    def register(self, profile: Profile, password: str = "secret123") -> None:
        self.accounts[profile.email] = (
            password,
            AuthUser(id=profile.id, email=profile.email),
        )

    def issue_token(self, profile: Profile) -> str:
        token = f"token-{profile.id}"
        self.tokens[token] = AuthUser(id=profile.id, email=profile.email)
        return token

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, AuthTokens]:
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise RuntimeError("Invalid login credentials")
        user = account[1]
        token = f"token-{user.id}"
        self.tokens[token] = user
        return user, AuthTokens(access_token=token)

    def sign_up(
        self, email: str, password: str, metadata: dict[str, str]
    ) -> AuthUser:
        self.sign_up_calls.append({"email": email, "metadata": metadata})
        if email in self.accounts:
            raise RuntimeError("User already registered")
        profile = self.profiles.add(
            Role(metadata["role"]),
            metadata["full_name"],
            organization_name=metadata.get("organization_name") or None,
            email=email,
        )
        self.register(profile, password)
        return AuthUser(id=profile.id, email=email)

    def sign_out(self, access_token: str) -> None:
        self.revoked.append(access_token)
        self.tokens.pop(access_token, None)

    def get_user(self, access_token: str) -> AuthUser | None:
        return self.tokens.get(access_token)


def make_session(profile: Profile, token: str = "token") -> SessionContext:
    return SessionContext(
        user=AuthUser(id=profile.id, email=profile.email),
        profile=profile,
        access_token=token,
    )


def auth_headers(gateway: FakeAuthGateway, profile: Profile) -> dict[str, str]:
    return {"Authorization": f"Bearer {gateway.issue_token(profile)}"}


RICE = DonationDetails(
    food_type="Rice",
    quantity="10 kg",
    description="Fresh",
    pickup_location="123 Main St",
    pickup_time="6pm",
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service.key.signature",
        supabase_anon_key="anon.key.signature",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def donation_repository() -> InMemoryDonationRepository:
    return InMemoryDonationRepository()


@pytest.fixture
def notification_repository() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture
def auth_gateway(profile_repository: InMemoryProfileRepository) -> FakeAuthGateway:
    return FakeAuthGateway(profiles=profile_repository)


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    donation_repository: InMemoryDonationRepository,
    notification_repository: InMemoryNotificationRepository,
    auth_gateway: FakeAuthGateway,
) -> AppContainer:
    auth_service = AuthService(gateway=auth_gateway, profiles=profile_repository)
    donation_service = DonationService(donation_repository)
    admin_service = AdminService(profile_repository)
    stats_service = StatsService(
        InMemoryStatsRepository(
            profiles=profile_repository, donations=donation_repository
        )
    )
    dashboard_service = DashboardService(
        donation_service=donation_service,
        admin_service=admin_service,
        stats_service=stats_service,
    )

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        donation_service=donation_service,
        admin_service=admin_service,
        stats_service=stats_service,
        notification_service=NotificationService(notification_repository),
        dashboard_service=dashboard_service,
    )
