"""Status changes for orders and reservations.

Both resources expose the same ``POST /api/<resource>/change-status``
endpoint taking ``{id, status, note[, date][, time]}``. The remote API
decides whether a transition is allowed; this side only checks that the
status is part of the known vocabulary and that a note is present.
"""

import logging
from typing import Any

from app.application.interfaces import AdminApi
from app.application.schemas.booking import StatusChangeRequest
from app.domain.entities.fields import as_int
from app.domain.exceptions import EntityNotFoundError, UpstreamApiError

logger = logging.getLogger(__name__)


class StatusWorkflow:
    """Posts status changes for one resource (``orders`` or ``reservations``)."""

    def __init__(self, api: AdminApi, resource: str, entity_type: str):
        self._api = api
        self._resource = resource
        self._entity_type = entity_type

    @staticmethod
    def build_body(entity_id: int | str, request: StatusChangeRequest) -> dict[str, Any]:
        numeric = as_int(entity_id)
        body: dict[str, Any] = {
            "id": numeric if numeric is not None else entity_id,
            "status": request.status,
            "note": request.note,
        }
        if request.date:
            body["date"] = request.date
        if request.time:
            body["time"] = request.time
        return body

    async def change_status(
        self, entity_id: int | str, request: StatusChangeRequest
    ) -> None:
        body = self.build_body(entity_id, request)
        try:
            await self._api.request(
                "POST", f"/api/{self._resource}/change-status", json=body
            )
        except UpstreamApiError as e:
            if e.status_code == 404:
                raise EntityNotFoundError(self._entity_type, entity_id) from e
            raise
        logger.info(
            "%s %s status changed to %s", self._entity_type, entity_id, request.status
        )
