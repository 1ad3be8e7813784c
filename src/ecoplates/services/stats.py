"""Landing page statistics."""

from dataclasses import dataclass
from typing import Protocol

from ecoplates.domain.models import Role
from ecoplates.domain.stats import LandingStats


class StatsRepository(Protocol):
    """Persistence interface for aggregate counts."""

    def count_donations(self) -> int:
        """Return the number of donation rows."""

    def count_profiles(self, role: Role, approved: bool | None = None) -> int:
        """Return the number of profiles with a role and optional approval flag."""


@dataclass
class StatsService:
    """Service for landing counters, fetched fresh on every call."""

    repository: StatsRepository

    def get_landing_stats(self) -> LandingStats:
        """Return total donations, donor accounts and approved NGOs."""
        return LandingStats(
            total_donations=self.repository.count_donations(),
            active_donors=self.repository.count_profiles(Role.DONOR),
            registered_ngos=self.repository.count_profiles(Role.NGO, approved=True),
        )
