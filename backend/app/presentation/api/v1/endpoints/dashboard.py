"""Dashboard home page figures."""

from fastapi import APIRouter, Depends

from app.application.schemas import DashboardStatsResponse
from app.application.services import DashboardService
from app.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    """Bookings, service pipeline and user counts.

    A collection the API fails to return leaves its figures at zero.
    """
    stats = await service.get_stats()
    return DashboardStatsResponse.model_validate(stats, from_attributes=True)
