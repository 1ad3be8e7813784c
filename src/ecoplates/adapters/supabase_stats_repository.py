"""Supabase repository for landing counters."""

from dataclasses import dataclass

from supabase import Client

from ecoplates.domain.models import Role
from ecoplates.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation using exact head-only count queries."""

    client: Client

    def count_donations(self) -> int:
        """Return the number of donation rows."""
        response = (
            self.client.table("donations")
            .select("*", count="exact", head=True)
            .execute()
        )
        return response.count or 0

    def count_profiles(self, role: Role, approved: bool | None = None) -> int:
        """Return the number of profiles with a role and optional approval flag."""
        query = (
            self.client.table("profiles")
            .select("*", count="exact", head=True)
            .eq("role", role.value)
        )
        if approved is not None:
            query = query.eq("is_approved", approved)
        response = query.execute()
        return response.count or 0
