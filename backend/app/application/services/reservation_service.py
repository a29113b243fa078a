"""Application service (use case) for service reservations."""

from app.application.interfaces import AdminApi
from app.application.schemas.booking import StatusChangeRequest
from app.application.services.envelope import fetch_object, records
from app.application.services.status_workflow import StatusWorkflow
from app.domain.entities import Reservation, normalize_status
from app.domain.exceptions import EntityNotFoundError


def filter_reservations(
    reservations: list[Reservation],
    *,
    search: str | None = None,
    status: str | None = None,
) -> list[Reservation]:
    selected = reservations
    if search:
        selected = [r for r in selected if r.matches(search)]
    if status:
        wanted = normalize_status(status)
        selected = [r for r in selected if r.status == wanted]
    return selected


class ReservationService:
    """Lists reservations and drives their status changes."""

    def __init__(self, api: AdminApi):
        self._api = api
        self._workflow = StatusWorkflow(api, "reservations", "Reservation")

    async def list_reservations(
        self, *, search: str | None = None, status: str | None = None
    ) -> list[Reservation]:
        payload = await self._api.request("GET", "/api/reservations/all")
        reservations = [
            Reservation.from_api(raw) for raw in records(payload, "reservations")
        ]
        return filter_reservations(reservations, search=search, status=status)

    async def get_reservation(self, reservation_id: int | str) -> Reservation:
        raw = await fetch_object(
            self._api, f"/api/reservations/{reservation_id}", "Reservation", reservation_id
        )
        return Reservation.from_api(raw)

    async def list_user_reservations(self, user_id: int | str) -> list[Reservation]:
        payload = await self._api.request("GET", f"/api/reservations/by-user/{user_id}")
        return [Reservation.from_api(raw) for raw in records(payload, "reservations")]

    async def change_status(
        self, reservation_id: int | str, request: StatusChangeRequest
    ) -> Reservation:
        """Post the new status and return the record as listed afterwards."""
        await self._workflow.change_status(reservation_id, request)
        for reservation in await self.list_reservations():
            if str(reservation.id) == str(reservation_id):
                return reservation
        raise EntityNotFoundError("Reservation", reservation_id)
