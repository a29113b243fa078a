"""Pydantic DTOs for the dashboard home page figures."""

from datetime import date

from pydantic import BaseModel


class PipelineCountsResponse(BaseModel):
    pending: int
    in_progress: int
    completed: int
    cancelled: int

    model_config = {"from_attributes": True}


class DashboardStatsResponse(BaseModel):
    total_bookings: int
    upcoming_services: int
    last_service_date: date | None
    pipeline: PipelineCountsResponse
    new_users_this_week: int
    returning_users: int

    model_config = {"from_attributes": True}
