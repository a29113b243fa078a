"""Domain entities for the dashboard home page figures."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class PipelineCounts:
    """Orders per stage of the service pipeline."""

    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    cancelled: int = 0


@dataclass
class DashboardStats:
    """Figures shown on the dashboard home page.

    A source that could not be loaded leaves its figures at zero / None.
    """

    total_bookings: int = 0
    upcoming_services: int = 0
    last_service_date: date | None = None
    pipeline: PipelineCounts = field(default_factory=PipelineCounts)
    new_users_this_week: int = 0
    returning_users: int = 0
