"""Abstract Honda Aid API interface (port): one call to the remote REST API."""

from abc import ABC, abstractmethod
from typing import Any


class AdminApi(ABC):
    """Port for the remote REST API: implemented in the infrastructure layer."""

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes, str]] | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            method: HTTP verb (GET, POST, PUT, PATCH, DELETE).
            path: Endpoint path, e.g. ``/api/categories``.
            params: Query-string parameters.
            json: JSON request body.
            data: Plain form fields (multipart when ``files`` is given).
            files: Multipart file parts as ``(filename, content, content_type)``.
            authenticated: Attach the stored bearer token.

        Returns:
            The decoded JSON body, or None when the body is empty.

        Raises:
            AuthenticationRequiredError: ``authenticated`` and no token stored.
            UpstreamApiError: the API answered with a non-2xx status.
        """
        ...
