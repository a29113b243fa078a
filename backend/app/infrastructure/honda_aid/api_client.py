"""Honda Aid API client: implements the AdminApi interface.

Talks to the remote REST API with httpx. Every call except login/signup
carries ``Authorization: Bearer <token>`` read from the TokenStore.
"""

import logging
from typing import Any

import httpx

from app.application.interfaces import AdminApi, TokenStore
from app.domain.exceptions import AuthenticationRequiredError, UpstreamApiError
from app.infrastructure.logging.colored_logger import ApiCallLogger

logger = logging.getLogger(__name__)
call_log = ApiCallLogger(__name__)


class HondaAidApiClient(AdminApi):
    """Infrastructure adapter: connects to the Honda Aid REST API.

    An injected ``http_client`` is reused and never closed here; otherwise a
    short-lived client is created per call.
    """

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token_store = token_store
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self, authenticated: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if authenticated:
            token = self._token_store.get_token()
            if not token:
                raise AuthenticationRequiredError()
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

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
        headers = self._get_headers(authenticated)
        url = f"{self._base_url}{path}"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            with call_log.timed_call(method, path) as outcome:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=json,
                    data=data,
                    files=files,
                )
                outcome["status_code"] = response.status_code
                if not response.is_success:
                    self._raise_upstream_error(response)
                return self._decode(response)
        except httpx.HTTPError as e:
            logger.error("Honda Aid API unreachable: %s %s: %s", method, path, e)
            raise UpstreamApiError(502, f"Could not reach the Honda Aid API: {e}") from e
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _raise_upstream_error(response: httpx.Response) -> None:
        """Raise UpstreamApiError with the body's ``message``, then ``error``, then text."""
        message = ""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                error = error.get("message")
            message = str(body.get("message") or error or "")
        if not message:
            message = response.text.strip() or f"HTTP error! status: {response.status_code}"

        raise UpstreamApiError(status_code=response.status_code, message=message)
