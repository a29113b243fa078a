"""Reservation endpoints: list, detail and status changes."""

from fastapi import APIRouter, Depends

from app.application.schemas import ReservationResponse, StatusChangeRequest
from app.application.services import ReservationService
from app.infrastructure.dependencies import get_reservation_service

router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.get("", response_model=list[ReservationResponse])
async def list_reservations(
    search: str | None = None,
    status: str | None = None,
    service: ReservationService = Depends(get_reservation_service),
) -> list[ReservationResponse]:
    reservations = await service.list_reservations(search=search, status=status)
    return [
        ReservationResponse.model_validate(r, from_attributes=True) for r in reservations
    ]


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationResponse:
    reservation = await service.get_reservation(reservation_id)
    return ReservationResponse.model_validate(reservation, from_attributes=True)


@router.post("/{reservation_id}/status", response_model=ReservationResponse)
async def change_reservation_status(
    reservation_id: int,
    data: StatusChangeRequest,
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationResponse:
    """Change a reservation's status (with an optional new date/time)."""
    reservation = await service.change_status(reservation_id, data)
    return ReservationResponse.model_validate(reservation, from_attributes=True)
