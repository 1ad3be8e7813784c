"""Domain models for landing statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LandingStats:
    """Aggregate counters shown on the landing page."""

    total_donations: int
    active_donors: int
    registered_ngos: int
