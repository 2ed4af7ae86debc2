"""HTTP transport for the Zenaton client.

Thin wrapper around ``httpx.AsyncClient``: send a JSON body, return the
decoded JSON response. Failures (network errors, non-2xx statuses) are
raised as the ``httpx`` exceptions they are; nothing here retries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

Params = Optional[Dict[str, Any]]


class HttpTransport:
    """Async JSON-over-HTTP transport."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize HttpTransport.

        Args:
            timeout: Request timeout in seconds (default: from config)
            client: Pre-built ``httpx.AsyncClient`` to send requests with.
                When omitted, a short-lived client is opened per request.
        """
        if timeout is None:
            from ..config import get_config

            timeout = get_config().http_timeout
        self.timeout = timeout
        self._client = client

    async def get(self, url: str, params: Params = None) -> Any:
        return await self._request("GET", url, params=params)

    async def post(self, url: str, body: Any, params: Params = None) -> Any:
        return await self._request("POST", url, body=body, params=params)

    async def put(self, url: str, body: Any, params: Params = None) -> Any:
        return await self._request("PUT", url, body=body, params=params)

    async def _request(
        self,
        method: str,
        url: str,
        body: Any = None,
        params: Params = None,
    ) -> Any:
        # unset values are left out, never sent empty
        params = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug(f"{method} {url} params={params}")
        kwargs: Dict[str, Any] = {"params": params}
        if method != "GET":
            kwargs["json"] = body

        if self._client is not None:
            response = await self._client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method, url, **kwargs)

        response.raise_for_status()
        if not response.content:
            return None
        return response.json()


_http: Optional[HttpTransport] = None


def get_http() -> HttpTransport:
    """Get or create the global HTTP transport."""
    global _http
    if _http is None:
        _http = HttpTransport()
    return _http
