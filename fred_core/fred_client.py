# =============================================================================
# fred_core/fred_client.py  —  The One Outbound HTTP Call
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends a single GET to a FRED endpoint and returns the decoded JSON body.
#   That is ALL it does.  It never retries, never caches, never pages through
#   results and never looks inside the payload.  Projecting the body down to
#   "seriess" or "observations" is the registry's job.
#
# HOW FAILURES SURFACE:
#   - network trouble (DNS, refused connection, timeout) → TransportError
#   - FRED answers with a non-2xx status                  → UpstreamError
#   Both are raised; the dispatcher turns them into the same
#   "FRED API error: ..." envelope.
#
# CONNECTIONS:
#   Each call opens its own httpx.AsyncClient and closes it when the request
#   is done, so no pool outlives a call.  The timeout is httpx's default.
#
# TESTING:
#   Pass an httpx.MockTransport as `transport` and no socket is ever opened.
# =============================================================================

from typing import Any, Optional

import httpx

from fred_core.config import FRED_API_BASE
from fred_core.errors import TransportError, UpstreamError

QueryParameters = list[tuple[str, str]]


class FredClient:
    """Thin async client for the FRED v1 REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = FRED_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def describe(self) -> str:
        """A log-safe description (the key is redacted)."""
        return f"FredClient(base_url={self._base_url!r}, api_key='***')"

    def build_query(self, params: QueryParameters) -> QueryParameters:
        """Tool parameters first, then the two parameters every request carries."""
        return [*params, ("file_type", "json"), ("api_key", self._api_key)]

    async def get_json(self, endpoint: str, params: QueryParameters) -> Any:
        """GET {base_url}/{endpoint} and return the decoded JSON body.

        Raises:
            TransportError: FRED could not be reached.
            UpstreamError: FRED returned a non-success status.
        """
        url = f"{self._base_url}/{endpoint.strip('/')}"

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url, params=self.build_query(params))
        except httpx.RequestError as exc:
            # httpx messages can be empty (e.g. some timeouts); keep the class name then.
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise UpstreamError(response.status_code, response.reason_phrase)

        return response.json()
